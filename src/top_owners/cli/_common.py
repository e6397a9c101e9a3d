"""Shared CLI helpers."""

from collections.abc import Sequence

import click
import typer
from rich.console import Console
from rich.markup import escape

from ..config import load_config
from ..engine import OwnershipEngine
from ..exceptions import ConfigurationError
from ..formatters import FORMATTERS, RichFormatter, get_formatter
from ..logging_config import setup_logging, warnings_visible
from ..models import OwnershipReport

console = Console()
err_console = Console(stderr=True)

FORMAT_CHOICE = click.Choice(sorted(FORMATTERS), case_sensitive=False)


def run_report(
    ctx: typer.Context, repositories: Sequence[str], **overrides
) -> OwnershipReport:
    """Load configuration and run the engine; configuration problems exit 1."""
    options = ctx.obj or {}
    try:
        config = load_config(
            config_file=options.get("config"),
            verbose=options.get("verbose"),
            quiet=options.get("quiet"),
            **overrides,
        )
        setup_logging(config.verbosity, log_file=options.get("log_file"))
        return OwnershipEngine(config).run(list(repositories))
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


def render_report(report: OwnershipReport, output_format: str) -> None:
    output_format = output_format.lower()
    if output_format == "json":
        get_formatter("json").render(report)
        return

    if output_format != "rich" or report.is_empty:
        _print_alias_warnings(report)

    if report.is_empty:
        console.print("[yellow]No commit data found or processed successfully.[/yellow]")
        for failure in report.failures:
            err_console.print(
                f"[yellow]Skipped[/yellow] {escape(failure.repository)}: {escape(failure.reason)}"
            )
        return

    if output_format == "rich":
        RichFormatter(console).render(report)
    else:
        get_formatter(output_format).render(report)


def _print_alias_warnings(report: OwnershipReport) -> None:
    # Already on stderr through logging unless quiet verbosity hid them
    if warnings_visible():
        return
    for warning in report.alias_table.warnings:
        err_console.print(f"[yellow]Alias warning:[/yellow] {escape(warning)}", soft_wrap=True)
