"""Console output for a sync run: banner, settings, step glyphs and summaries."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import SyncSettings
from .models import PublishOutcome, SourceItem

GOOD = "👌"
BAD = "😕"


class Reporter:
    """Prints run progress; error details are shown only in verbose mode."""

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        verbose: bool = False,
    ) -> None:
        self.console = console or Console(emoji=False)
        self.error_console = error_console or Console(stderr=True, emoji=False)
        self.verbose = verbose

    def banner(self) -> None:
        self.console.print("\n[bold green]Contentful ElasticSearch Sync[/bold green]")

    def settings_table(self, settings: SyncSettings) -> None:
        table = Table(show_header=False)
        table.add_column("Setting", style="white")
        table.add_column("Value", style="bold white")
        rows = [
            ("ES instance", settings.es_url),
            ("ES Index name", settings.index_name),
            ("Contentful Space ID", settings.space_id),
            ("Contentful content_type", settings.content_type),
            ("Contentful environment ID", settings.environment),
        ]
        for label, value in rows:
            table.add_row(label, Text(str(value)) if value is not None else "")
        self.console.print()
        self.console.print(table)
        self.console.print()

    def step(self, ok: bool, message: str) -> None:
        """One line per major step, prefixed with a success/failure glyph."""

        glyph = GOOD if ok else BAD
        self.console.print(Text(f"{glyph}\t{message}", style="blue"))

    def found(self, count: int, content_type: str) -> None:
        glyph = GOOD if count > 0 else BAD
        self.console.print(
            Text.assemble(
                f"{glyph}\tFound ",
                (str(count), "bold"),
                " entries of type ",
                (content_type, "bold"),
                style="blue",
            )
        )

    def items_table(self, items: Iterable[SourceItem]) -> None:
        table = Table(header_style="bold blue")
        table.add_column("sys.id")
        table.add_column("field.name")
        for item in items:
            name = item.name
            table.add_row(Text(item.id), Text(str(name)) if name is not None else "")
        self.console.print()
        self.console.print(table)
        self.console.print()

    def published(self, outcome: PublishOutcome, content_type: str) -> None:
        self.step(
            outcome.ok,
            f"Posted {outcome.succeeded} {content_type}s ({outcome.failed} failed)",
        )

    def finished(self) -> None:
        self.console.print("\n[bold green]Finished![/bold green]\n")

    def aborting(self) -> None:
        self.console.print("\n[bold red]Aborting sync.[/bold red]\n")

    def error(self, exc: BaseException, context: Optional[str] = None) -> None:
        """Print error details when verbose; otherwise drop them."""

        if not self.verbose:
            return
        prefix = f"[error] {context}: " if context else "[error] "
        self.error_console.print(f"{prefix}{exc}", markup=False, highlight=False)


__all__ = ["GOOD", "BAD", "Reporter"]
