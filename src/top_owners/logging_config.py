"""
Logging configuration for top-owners.

Ranked owners are the only thing written to stdout. Everything logged goes
to stderr through a RichHandler, so ``--format json`` and ``--format plain``
output can be piped without filtering:

    quiet    ERROR    fatal configuration problems only
    normal   WARNING  skipped repositories, alias conflicts, missing alias file
    verbose  DEBUG    per-repository progress, skipped commits, malformed log lines
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "top_owners"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(
    verbosity: Verbosity = "normal", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route top_owners logging to stderr (and optionally a file).

    Safe to call more than once per process: the CLI configures logging from
    its flags first, then again once the merged configuration is known.

    Args:
        verbosity: One of "quiet", "normal", "verbose"
        log_file: Optional file path; records are appended with timestamps

    Returns:
        The top_owners root logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Emails like dependabot[bot]@... must not be read as markup
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def warnings_visible() -> bool:
    """True when WARNING records from top_owners reach the operator."""
    return logging.getLogger(ROOT_LOGGER).isEnabledFor(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the top_owners namespace.

    Args:
        name: Module name (e.g., 'top_owners.engine'); None returns the root

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
