"""Rank command: owners across one or more repositories."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import FORMAT_CHOICE, render_report, run_report


@app.command()
def rank(
    ctx: typer.Context,
    repositories: list[Path] = typer.Argument(
        ...,
        help="Local git repositories to analyze",
    ),
    tau: Optional[float] = typer.Option(
        None,
        "--tau",
        "-t",
        help="Temporal decay parameter in days (default: 365)",
    ),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        help="Number of most likely owners to display (default: 10)",
    ),
    bonus_per_repo: Optional[float] = typer.Option(
        None,
        "--bonus-per-repo",
        "-b",
        help="Bonus per additional repository, e.g. 0.1 = +10% for the 2nd repo (default: 0.1)",
    ),
    aliases_file: Optional[Path] = typer.Option(
        None,
        "--aliases-file",
        "-a",
        help="TOML file mapping canonical emails to their aliases",
        dir_okay=False,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Repositories read in parallel (default: auto)",
        min=1,
        max=64,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich, json or plain",
        click_type=FORMAT_CHOICE,
    ),
):
    """
    Rank owners across one or more repositories.

    [bold cyan]Examples:[/bold cyan]

      top-owners rank ~/src/api ~/src/web

      top-owners rank ~/src/* --tau 180 --bonus-per-repo 0.25

      top-owners rank . --aliases-file aliases.toml --format plain
    """
    report = run_report(
        ctx,
        [str(r) for r in repositories],
        tau=tau,
        count=count,
        bonus_per_repo=bonus_per_repo,
        aliases_file=aliases_file,
        workers=workers,
    )
    render_report(report, output_format)
