"""
Progress reporting for catalog loading.

Reporting is a side channel only: the records returned by a load do not
depend on which reporter is used.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape


@runtime_checkable
class ProgressReporter(Protocol):
    """Receives per-file progress notifications."""

    def file_started(self, path: Path) -> None:
        """Called before a file is read."""
        ...

    def file_finished(self, path: Path, record_count: int) -> None:
        """Called after all lines of a file were built."""
        ...


class NullReporter:
    """Reporter that ignores all notifications."""

    def file_started(self, path: Path) -> None:
        pass

    def file_finished(self, path: Path, record_count: int) -> None:
        pass


class ConsoleProgressReporter:
    """Prints one progress line per file to a Rich console."""

    def __init__(self, console: Console, show_counts: bool = True) -> None:
        """
        Initialize console progress reporter.

        Args:
            console: Rich Console instance for output.
            show_counts: Append the number of records read per file.
        """
        self.console = console
        self.show_counts = show_counts

    def file_started(self, path: Path) -> None:
        """Announce the file being parsed."""
        self.console.print(
            f'[blue]Parsing "{escape(str(path))}"...[/blue]', end=" ", highlight=False
        )

    def file_finished(self, path: Path, record_count: int) -> None:
        """Confirm the file completed."""
        if self.show_counts:
            self.console.print(f"[green]Done.[/green] [dim]({record_count} records)[/dim]")
        else:
            self.console.print("[green]Done.[/green]")
