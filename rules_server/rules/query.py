"""Read-only queries over a parsed rule set."""

from __future__ import annotations

from typing import Iterable, Optional

from rules_server.rules.models import Rule


def filter_by_category(rules: list[Rule], category: Optional[str]) -> list[Rule]:
    if not category:
        return rules
    wanted = category.lower()
    return [rule for rule in rules if rule.category.lower() == wanted]


def list_categories(rules: Iterable[Rule]) -> list[str]:
    seen: dict[str, None] = {}
    for rule in rules:
        if rule.category:
            seen.setdefault(rule.category, None)
    return list(seen)
