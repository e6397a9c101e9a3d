"""Shared test fixtures for top-owners tests."""

import logging
import os
import shutil
import subprocess
from datetime import datetime, timezone
from pathlib import Path

import pytest

from top_owners.history.models import CommitEvent

DAY = 86400
# Fixed observation time so decay weights are reproducible
NOW = 1_700_000_000

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def reset_top_owners_logging():
    """Undo levels set by setup_logging so caplog sees warnings in later tests."""
    root = logging.getLogger()
    root_level = root.level
    yield
    root.setLevel(root_level)
    logging.getLogger("top_owners").setLevel(logging.NOTSET)


def make_event(author: str, days_ago: float, repository: str = "repo-a") -> CommitEvent:
    """Create a commit event ``days_ago`` days before NOW."""
    return CommitEvent(
        author=author,
        timestamp=int(NOW - days_ago * DAY),
        repository=repository,
    )


class FakeReader:
    """History reader backed by a dict of repository -> events (or an error)."""

    def __init__(self, histories):
        self.histories = histories
        self.calls = []

    def read(self, repository):
        self.calls.append(repository)
        value = self.histories[repository]
        if isinstance(value, Exception):
            raise value
        return list(value)


def _git(repo: Path, *args: str, env=None) -> None:
    subprocess.run(
        ["git", "-C", str(repo), "-c", "commit.gpgsign=false", *args],
        check=True,
        capture_output=True,
        env=env,
    )


@pytest.fixture
def git_repo_factory(tmp_path):
    """Build real git repositories with commits at fixed author dates.

    ``factory(name, [(email, unix_ts), ...])`` creates ``tmp_path/name`` with
    one empty commit per entry, oldest first, and returns its path.
    """

    def factory(name, commits):
        path = tmp_path / name
        path.mkdir()
        _git(path, "init", "-q")
        for i, (email, ts) in enumerate(commits):
            date = datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S+00:00")
            env = {
                **os.environ,
                "GIT_AUTHOR_NAME": email.split("@")[0],
                "GIT_AUTHOR_EMAIL": email,
                "GIT_AUTHOR_DATE": date,
                "GIT_COMMITTER_NAME": "Test Committer",
                "GIT_COMMITTER_EMAIL": "committer@example.com",
                "GIT_COMMITTER_DATE": date,
            }
            _git(path, "commit", "--allow-empty", "-q", "-m", f"commit {i}", env=env)
        return path

    return factory


@pytest.fixture
def alias_file(tmp_path):
    """Write an alias TOML document and return its path."""

    def factory(content: str, name: str = "aliases.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return factory
