from typing import Any

import yaml
from rich.console import Console
from rich.panel import Panel

from rules_server.dispatcher import serialize
from rules_server.rules.models import Rule
from rules_server.sources.base import IContentSource
from rules_server.tui.enums import OutputFormat, UIStyle
from rules_server.tui.tables import RulesTable, SourceTable


def dump_payload(payload: Any, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(
            payload, default_flow_style=False, sort_keys=False, allow_unicode=True
        ).rstrip()
    return serialize(payload)


class RulesConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_payload(self, payload: Any, output_format: OutputFormat) -> None:
        # Raw payloads bypass rich markup so they stay machine readable.
        self.console.out(dump_payload(payload, output_format), highlight=False)

    def _panel(self, title: str, body, style: UIStyle, subtitle: str | None = None) -> None:
        self.console.print(
            Panel(body, title=title, subtitle=subtitle, border_style=style.value, padding=(0, 1))
        )

    def _render_source(self, source: IContentSource, count: int, label: str) -> None:
        self._panel(
            "rules source", SourceTable.summary_block(source, count, label), UIStyle.BLUE
        )

    def render_rules(
        self, source: IContentSource, rules: list[Rule], category: str | None = None
    ) -> None:
        self._render_source(source, len(rules), "Rules")
        if not rules:
            detail = f"No rules found for category: {category}" if category else "No rules found."
            self._panel("rules", detail, UIStyle.DIM)
            return
        self._panel(
            "rules",
            RulesTable.rules_table(rules),
            UIStyle.CYAN,
            subtitle=f"category={category}" if category else None,
        )

    def render_categories(self, source: IContentSource, categories: list[str]) -> None:
        self._render_source(source, len(categories), "Categories")
        if not categories:
            self._panel("categories", "No categories found.", UIStyle.DIM)
            return
        self._panel("categories", RulesTable.categories_table(categories), UIStyle.GREEN)
