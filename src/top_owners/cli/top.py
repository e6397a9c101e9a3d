"""Top command: quick look at a single repository."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import FORMAT_CHOICE, render_report, run_report

SINGLE_REPO_COUNT = 3


@app.command()
def top(
    ctx: typer.Context,
    repository: Path = typer.Argument(
        Path("."),
        help="Local git repository (default: current directory)",
    ),
    tau: Optional[float] = typer.Option(
        None,
        "--tau",
        "-t",
        help="Temporal decay parameter in days (default: 365)",
    ),
    count: int = typer.Option(
        SINGLE_REPO_COUNT,
        "--count",
        "-n",
        help="Number of most likely owners to display",
    ),
    aliases_file: Optional[Path] = typer.Option(
        None,
        "--aliases-file",
        "-a",
        help="TOML file mapping canonical emails to their aliases",
        dir_okay=False,
    ),
    output_format: str = typer.Option(
        "plain",
        "--format",
        "-f",
        help="Output format: rich, json or plain",
        click_type=FORMAT_CHOICE,
    ),
):
    """
    Show the most likely owners of a single repository.

    [bold cyan]Examples:[/bold cyan]

      top-owners top

      top-owners top ~/src/api --count 5 --tau 90
    """
    report = run_report(
        ctx,
        [str(repository)],
        tau=tau,
        count=count,
        aliases_file=aliases_file,
    )
    render_report(report, output_format)
