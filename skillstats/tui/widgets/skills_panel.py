"""Terminal stats panels that collect lines emitted by the compositor."""

from typing import Any, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from skillstats.display.compositor import StatLine
from skillstats.host import NO_VALUE


def _to_line(label: str, value: Any) -> StatLine:
    if value is NO_VALUE:
        return StatLine(label, header=True)
    return StatLine(label, value)


def _value_text(value: Any) -> str:
    return "" if value is None else str(value)


class SkillsPanel(Static):
    """
    Vertical character-stats panel.

    Header lines (no value) are shown in bold; skill lines as
    ``Label: value`` with labels padded to a common width.
    """

    DEFAULT_CSS = """
    SkillsPanel {
        background: $surface;
        padding: 0 1;
        border: solid $primary;
        width: auto;
        min-width: 32;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._stat_lines: list[StatLine] = []

    @property
    def stat_lines(self) -> list[tuple[str, Optional[Any]]]:
        return [(line.label, line.value) for line in self._stat_lines]

    def on_mount(self) -> None:
        """Initialize display when mounted."""
        self._refresh_display()

    def add_stat_line(self, label: str, value: Any = NO_VALUE) -> None:
        self._stat_lines.append(_to_line(label, value))
        if self.is_mounted:
            self._refresh_display()

    def clear_lines(self) -> None:
        self._stat_lines.clear()
        if self.is_mounted:
            self._refresh_display()

    def build_text(self) -> Text:
        """Rebuild the panel contents."""
        text = Text()
        width = max(
            (len(line.label) for line in self._stat_lines if not line.header),
            default=0,
        )
        for index, line in enumerate(self._stat_lines):
            if index:
                text.append("\n")
            if line.header:
                text.append(line.label, style="bold underline")
                continue
            text.append(f"{line.label}:".ljust(width + 2), style="bold")
            style = "dim" if line.value == "--" else ""
            text.append(_value_text(line.value), style=style)
        return text

    def _refresh_display(self) -> None:
        self.update(self.build_text())


class ConsolePanel:
    """Collects stat lines and prints them as a rich table."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()
        self.lines: list[StatLine] = []

    def add_stat_line(self, label: str, value: Any = NO_VALUE) -> None:
        self.lines.append(_to_line(label, value))

    def build_table(self) -> Table:
        title = None
        rows = self.lines
        if rows and rows[0].header:
            title = rows[0].label
            rows = rows[1:]
        table = Table(title=title, show_header=False, box=None, padding=(0, 1))
        table.add_column("label", style="bold")
        table.add_column("value")
        for line in rows:
            table.add_row(line.label, "" if line.header else _value_text(line.value))
        return table

    def print(self) -> None:
        if not self.lines:
            self._console.print("[dim]No skills enabled.[/dim]")
            return
        self._console.print(self.build_table())
