"""Process-wide server configuration, fixed once at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rules_server.errors import MissingRulesPathError


@dataclass(frozen=True)
class ServerConfig:
    location: str
    github_token: Optional[str] = None
    fetch_timeout: Optional[float] = None

    @classmethod
    def create(
        cls,
        location: Optional[str],
        github_token: Optional[str] = None,
        fetch_timeout: Optional[float] = None,
    ) -> "ServerConfig":
        location = (location or "").strip()
        if not location:
            raise MissingRulesPathError()
        return cls(
            location=location,
            github_token=github_token or None,
            fetch_timeout=fetch_timeout,
        )
