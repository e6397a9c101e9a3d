"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging
from . import app
from ._common import console


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress and debug logging on stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append logs to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Rank the likely owners of local git repositories.

    Every commit reachable from HEAD is weighted by exp(-age_days / tau), so
    recent work counts more than old work. Emails can be merged with an alias
    file, and contributors active in several repositories get a bonus.

    [bold cyan]Examples:[/bold cyan]

      top-owners top .

      top-owners rank ~/src/api ~/src/web --count 5

      top-owners rank ~/src/* --aliases-file aliases.toml --format json
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]top-owners[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_file"] = str(log_file) if log_file else None

    # Flags only; run_report re-applies once file and env verbosity are merged
    flag_verbosity = "verbose" if verbose else "quiet" if quiet else "normal"
    setup_logging(flag_verbosity, log_file=ctx.obj["log_file"])
