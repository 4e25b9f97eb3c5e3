"""Parse categorized ``key: value`` rules out of markdown text.

The dialect is line based::

    # Category
    key: value

A line starting with a single ``#`` opens a category. Lines holding a colon
become rules of the most recent category. Anything else is ignored.
"""

from __future__ import annotations

from rules_server.constants import CATEGORY_MARKER, RULE_SEPARATOR
from rules_server.rules.models import Rule

_DOUBLE_MARKER = CATEGORY_MARKER * 2
_BOM = "\ufeff"


def trim(text: str) -> str:
    """Strip whitespace and byte order marks from both ends."""
    return text.strip().strip(_BOM).strip()


def clean_category(line: str) -> str:
    return trim(line.replace(CATEGORY_MARKER, ""))


def is_category_header(line: str) -> bool:
    return line.startswith(CATEGORY_MARKER) and not line.startswith(_DOUBLE_MARKER)


def parse_rule_line(line: str, category: str) -> Rule | None:
    if not category:
        return None
    key, separator, value = line.partition(RULE_SEPARATOR)
    if not separator:
        return None
    key = trim(key)
    value = trim(value)
    if not key or not value:
        return None
    return Rule(category=category, key=key, value=value)


def parse_rules(text: str) -> list[Rule]:
    rules: list[Rule] = []
    current_category = ""

    for raw_line in text.split("\n"):
        line = trim(raw_line)
        if not line:
            continue

        # "##" lines are not headers; they fall through to rule matching.
        if is_category_header(line):
            current_category = clean_category(line)
            continue

        rule = parse_rule_line(line, current_category)
        if rule is not None:
            rules.append(rule)

    return rules
