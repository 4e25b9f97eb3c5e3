"""Rule data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Rule:
    category: str
    key: str
    value: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)
