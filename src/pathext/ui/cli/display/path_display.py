"""Rich rendering of path information for the CLI."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathext.path_ext import PathExt


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


class PathDisplay:
    """Render path views and listings to a Rich console."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_info(self, path: PathExt) -> None:
        """Render the accessors and type checks of ``path`` as a table."""

        table = Table(title="Path information", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        for label, value in (
            ("full", path.full_str()),
            ("name", path.name_str()),
            ("stem", path.stem_str()),
            ("extension", path.ext_str()),
        ):
            table.add_row(label, escape(value) if value else "[dim]-[/dim]")
        table.add_row("is file", _flag(path.is_file()))
        table.add_row("is directory", _flag(path.is_dir()))
        self.console.print(table)

    def show_path(self, path: Path | PathExt) -> None:
        self.console.print(str(path), markup=False, highlight=False, soft_wrap=True)

    def show_walk(self, entries: Iterable[Path], *, show_summary: bool) -> int:
        """Print every walked entry and return how many were printed."""

        count = 0
        for entry in entries:
            self.show_path(entry)
            count += 1
        if show_summary:
            self.console.print(f"\n[bold]Entries:[/bold] {count}")
        return count
