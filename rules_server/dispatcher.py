"""Tool catalogue and dispatch: fetch, parse, query, serialize."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from jsonschema import Draft202012Validator

from rules_server.constants import GET_CATEGORIES_TOOL, GET_RULES_TOOL
from rules_server.errors import InvalidToolArgumentsError, UnknownToolError
from rules_server.rules.models import Rule
from rules_server.rules.parser import parse_rules
from rules_server.rules.query import filter_by_category, list_categories
from rules_server.sources.base import IContentSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=GET_RULES_TOOL,
        description="Get all rules or filter by category",
        input_schema={
            "type": "object",
            "properties": {
                "category": {
                    "type": ["string", "null"],
                    "description": "Optional category to filter rules",
                },
            },
        },
    ),
    ToolSpec(
        name=GET_CATEGORIES_TOOL,
        description="Get list of all rule categories",
        input_schema={"type": "object", "properties": {}},
    ),
)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def serialize(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


class RulesDispatcher:
    def __init__(self, source: IContentSource) -> None:
        self._source = source
        self._tools = {tool.name: tool for tool in TOOLS}
        self._validators = {
            tool.name: Draft202012Validator(tool.input_schema) for tool in TOOLS
        }
        self._handlers: dict[str, Callable[[dict[str, Any]], Any]] = {
            GET_RULES_TOOL: self._handle_get_rules,
            GET_CATEGORIES_TOOL: self._handle_get_categories,
        }

    @property
    def source(self) -> IContentSource:
        return self._source

    def list_tools(self) -> list[ToolSpec]:
        return list(self._tools.values())

    def load_rules(self) -> list[Rule]:
        return parse_rules(self._source.fetch())

    def get_rules(self, category: Optional[str] = None) -> list[Rule]:
        return filter_by_category(self.load_rules(), category)

    def get_categories(self) -> list[str]:
        return list_categories(self.load_rules())

    def call(self, name: str, arguments: Optional[dict[str, Any]] = None) -> str:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(name)

        payload = arguments or {}
        self._validate(name, payload)
        logger.debug("Dispatching %s with %s", name, payload)
        return serialize(handler(payload))

    def _validate(self, name: str, arguments: Any) -> None:
        if not isinstance(arguments, dict):
            raise InvalidToolArgumentsError(name, "must be a JSON object")
        error = next(iter(self._validators[name].iter_errors(arguments)), None)
        if error is not None:
            raise InvalidToolArgumentsError(name, format_schema_error(error))

    def _handle_get_rules(self, arguments: dict[str, Any]) -> list[dict[str, str]]:
        rules = self.get_rules(arguments.get("category"))
        return [rule.as_dict() for rule in rules]

    def _handle_get_categories(self, _arguments: dict[str, Any]) -> list[str]:
        return self.get_categories()
