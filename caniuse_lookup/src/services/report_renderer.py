"""Terminal report for looked-up features"""

import json
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from ..models.feature_models import FeatureRecord, LookupResult
from ..utils.support_utils import build_support_rows


class ReportRenderer:
    """Prints a LookupResult as decorated tables"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, *objects) -> None:
        # remote text may contain ":name:" sequences that must stay literal
        self.console.print(*objects, emoji=False)

    def render(self, result: LookupResult) -> None:
        """Print the full report for one lookup"""
        self._print("[bold]🔍[/bold] [bold green]Search term:[/bold green]")
        self._print(f"[yellow]{escape(result.search_term)}[/yellow]")

        self._print("\n[bold]🏷️ [/bold] [bold green]Selected feature IDs:[/bold green]")
        for feature_id in result.feature_ids:
            self._print(f"  • [yellow]{escape(feature_id)}[/yellow]")

        self._print("\n[bold]📊[/bold] [bold green]Feature data:[/bold green]")
        for index, feature in enumerate(result.features.values(), start=1):
            self.render_feature(index, feature)

    def render_feature(self, index: int, feature: FeatureRecord) -> None:
        self._print(f"\n[bold]🔹[/bold] [bold blue]Feature {index}:[/bold blue]")
        self._print(f"  [bold]📌 Title: {escape(feature.title)}[/bold]")
        self._print(f"  [bold]📝[/bold] Description: {self._field(feature.description)}")
        self._print(f"  [bold]📘[/bold] Spec: {self._field(feature.spec)}")
        self._print(f"  [bold]🚦[/bold] Status: {self._field(feature.status)}")
        self._print(f"  [bold]🔗[/bold] MDN URL: {self._field(feature.mdn_url)}")

        self._print("\n  [bold]🖥️  Browser Compatibility:[/bold]")
        table = self.build_support_table(feature)
        if table is None:
            self._print("  No compatibility data available.")
        else:
            self._print(Padding(table, (0, 0, 0, 2)))

        if feature.notes_by_num:
            self._print("\n  [bold]📓 Notes:[/bold]")
            for num, note in feature.notes_by_num.items():
                self._print(f"    Note {escape(num)}: {escape(note)}")

        self._print("\n  [bold]ℹ️  Extra information:[/bold]")
        for key, value in feature.extra.items():
            self._print(f"    [bold]{escape(key)}[/bold]: {escape(self._raw(value))}")
        self._print()

    def build_support_table(self, feature: FeatureRecord) -> Optional[Table]:
        rows = build_support_rows(feature)
        if not rows:
            return None
        table = Table(show_header=True, header_style="bold")
        table.add_column("Browser")
        table.add_column("Support")
        table.add_column("Notes")
        for row in rows:
            table.add_row(
                Text(f"{row.level.value} {row.browser}"),
                Text(row.support),
                Text(row.notes),
            )
        return table

    @staticmethod
    def _field(value: Optional[str]) -> str:
        return "" if value is None else escape(str(value))

    @staticmethod
    def _raw(value: Any) -> str:
        return json.dumps(value, ensure_ascii=False)
