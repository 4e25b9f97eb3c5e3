from rich.table import Column, Table

from rules_server.rules.models import Rule
from rules_server.sources.base import IContentSource
from rules_server.tui.enums import UIStyle


class SourceTable:
    @staticmethod
    def summary_block(source: IContentSource, count: int, label: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Origin", source.origin)
        table.add_row("Location", source.location)
        table.add_row(label, str(count))
        return table


class RulesTable:
    @staticmethod
    def rules_table(rules: list[Rule]) -> Table:
        table = Table(
            Column(header="Category", style=UIStyle.CYAN.value, max_width=28),
            Column(header="Key", style="bold", overflow="fold", max_width=36),
            Column(header="Value", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            table.add_row(rule.category, rule.key, rule.value)
        return table

    @staticmethod
    def categories_table(categories: list[str]) -> Table:
        table = Table(
            Column(header="#", justify="right", style=UIStyle.DIM.value, width=4),
            Column(header="Category", style=UIStyle.CYAN.value),
            header_style="bold",
        )
        for index, category in enumerate(categories, start=1):
            table.add_row(str(index), category)
        return table
