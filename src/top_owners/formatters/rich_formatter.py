"""Rich terminal formatter for ownership reports."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import OwnershipReport
from .base import BaseFormatter


def _repos_label(count: int) -> str:
    if count > 1:
        return f"[green]{count}[/green]"
    return str(count)


class RichFormatter(BaseFormatter):
    """Header describing the run, then a ranked table."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: OwnershipReport) -> None:
        self._print_header(report)
        self.console.print(self._build_table(report))

    def format(self, report: OwnershipReport) -> str:
        # Capture what render() would print
        with self.console.capture() as capture:
            self.render(report)
        return capture.get()

    def _print_header(self, report: OwnershipReport) -> None:
        params = report.parameters
        self.console.print()
        self.console.print("[bold cyan]TOP LIKELY OWNERS[/bold cyan]")
        self.console.print(
            f"Showing top {params.count} contributors based on recent activity across "
            f"{len(report.repositories)} specified repositories "
            f"(tau={params.tau:g} days)."
        )
        self.console.print(f"Bonus per additional repo: {params.bonus_per_repo * 100:.1f}%")

        if len(report.alias_table) > 0:
            self.console.print(f"Aliases loaded from: {escape(report.aliases_source or '')}")
        elif report.aliases_source or report.alias_table.warnings:
            self.console.print("[yellow]Alias file specified but no aliases loaded.[/yellow]")
        else:
            self.console.print("[dim]No alias file specified.[/dim]")

        for warning in report.alias_table.warnings:
            self.console.print(f"[yellow]Alias warning:[/yellow] {escape(warning)}")

        for failure in report.failures:
            self.console.print(
                f"[yellow]Skipped[/yellow] {escape(failure.repository)}: {escape(failure.reason)}"
            )
        self.console.print()

    def _build_table(self, report: OwnershipReport) -> Table:
        table = Table(show_header=True, show_lines=False, pad_edge=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Owner", min_width=24)
        table.add_column("Score", justify="right")
        table.add_column("Raw", justify="right", style="dim")
        table.add_column("Repos", justify="right")
        table.add_column("Aliases")

        for i, owner in enumerate(report.owners, start=1):
            table.add_row(
                str(i),
                escape(owner.canonical_id),
                f"{owner.final_score:.2f}",
                f"{owner.raw_score:.2f}",
                _repos_label(owner.repository_count),
                escape(", ".join(owner.aliases)),
            )
        return table
