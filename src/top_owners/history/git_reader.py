"""Read commit history from a local git repository via subprocess."""

import re
import subprocess
from pathlib import Path
from typing import Protocol

from ..exceptions import HeadResolutionError, HistoryWalkError, RepositoryOpenError
from ..logging_config import get_logger
from .models import CommitEvent

logger = get_logger(__name__)


class HistoryReader(Protocol):
    """Anything that turns a repository location into commit events.

    Implementations raise a RepositoryError subclass before returning
    anything when the repository cannot be read, so a failed repository
    never yields a partial history.
    """

    def read(self, repository: str) -> list[CommitEvent]: ...


class GitHistoryReader:
    """Walk every commit reachable from HEAD using the git CLI."""

    # hash | author timestamp | author email
    _LOG_FORMAT = "--format=%H|%at|%ae"

    # Matches: hex hash (SHA-1 or SHA-256) | unix timestamp (may be empty) | author email
    # The email goes last and is split with maxsplit=2 so a stray | survives.
    _LINE_RE = re.compile(r"^[0-9a-f]{40,64}\|(?:-?\d+)?\|.*$")

    def __init__(self, timeout_seconds: int = 120):
        self.timeout_seconds = timeout_seconds

    def read(self, repository: str) -> list[CommitEvent]:
        repo_path = str(Path(repository).resolve())

        self._check_repository(repo_path)
        head = self._resolve_head(repo_path)
        raw = self._run_git_log(repo_path, head)

        events = self._parse_log(raw, repo_path)
        logger.info("Read %d commits from %s", len(events), repo_path)
        return events

    def _git(self, repo_path: str, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            ["git", "-C", repo_path, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.timeout_seconds,
        )

    def _probe(self, repo_path: str, *args: str) -> subprocess.CompletedProcess:
        try:
            return self._git(repo_path, *args)
        except FileNotFoundError:
            raise RepositoryOpenError(repo_path, "git executable not found")
        except subprocess.TimeoutExpired:
            raise RepositoryOpenError(repo_path, f"git timed out after {self.timeout_seconds}s")

    def _check_repository(self, repo_path: str) -> None:
        if not Path(repo_path).is_dir():
            raise RepositoryOpenError(repo_path, "path does not exist or is not a directory")

        result = self._probe(repo_path, "rev-parse", "--git-dir")
        if result.returncode != 0:
            raise RepositoryOpenError(repo_path, result.stderr.strip() or "not a git repository")

        # Only a work tree root counts as a repository, never a subdirectory of one
        result = self._probe(repo_path, "rev-parse", "--show-toplevel")
        toplevel = result.stdout.strip()
        if result.returncode != 0 or not toplevel:
            raise RepositoryOpenError(repo_path, result.stderr.strip() or "not a work tree")
        if Path(toplevel).resolve() != Path(repo_path):
            raise RepositoryOpenError(
                repo_path, f"not the root of a git repository (root is {toplevel})"
            )

    def _resolve_head(self, repo_path: str) -> str:
        try:
            result = self._git(repo_path, "rev-parse", "--verify", "--quiet", "HEAD^{commit}")
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise HeadResolutionError(repo_path, str(e))
        head = result.stdout.strip()
        if result.returncode != 0 or not head:
            raise HeadResolutionError(repo_path, "HEAD does not point at a commit")
        return head

    def _run_git_log(self, repo_path: str, head: str) -> str:
        try:
            result = self._git(repo_path, "log", self._LOG_FORMAT, head)
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise HistoryWalkError(repo_path, str(e))
        if result.returncode != 0:
            raise HistoryWalkError(repo_path, result.stderr.strip() or "git log failed")
        return result.stdout

    def _parse_log(self, raw: str, repo_path: str) -> list[CommitEvent]:
        """Parse ``git log`` output into CommitEvents, newest first.

        Lines that do not look like a log header are skipped. Missing
        timestamps become 0 and are dropped later by the scorer.
        """
        events = []
        for line in raw.split("\n"):
            line = line.strip()
            if not line:
                continue
            if not self._LINE_RE.match(line):
                logger.debug("Skipping malformed git log line in %s: %r", repo_path, line)
                continue

            sha, ts, author = line.split("|", 2)
            events.append(
                CommitEvent(
                    author=author,
                    timestamp=int(ts) if ts else 0,
                    repository=repo_path,
                    sha=sha,
                )
            )
        return events
