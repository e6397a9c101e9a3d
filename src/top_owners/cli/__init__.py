"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="top-owners",
    help="top-owners - find the likely owners of git repositories",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .rank import rank as _rank  # noqa: F401, E402
from .top import top as _top  # noqa: F401, E402
