"""Tests for reading commit events out of git repositories."""

import subprocess

import pytest

from conftest import DAY, NOW, requires_git
from top_owners.exceptions import (
    HeadResolutionError,
    HistoryWalkError,
    RepositoryError,
    RepositoryOpenError,
)
from top_owners.history import CommitEvent, GitHistoryReader

SHA_A = "a" * 40
SHA_B = "b" * 40


class TestParseLog:
    """Test GitHistoryReader._parse_log on canned output."""

    def setup_method(self):
        self.reader = GitHistoryReader()

    def test_empty_output(self):
        assert self.reader._parse_log("", "/repo") == []

    def test_parses_header_lines(self):
        raw = f"{SHA_A}|1700000000|alice@example.com\n{SHA_B}|1690000000|Bob@Example.com\n"
        events = self.reader._parse_log(raw, "/repo")

        assert events == [
            CommitEvent("alice@example.com", 1700000000, "/repo", sha=SHA_A),
            CommitEvent("Bob@Example.com", 1690000000, "/repo", sha=SHA_B),
        ]

    def test_missing_timestamp_becomes_zero(self):
        events = self.reader._parse_log(f"{SHA_A}||alice@example.com\n", "/repo")
        assert events[0].timestamp == 0

    def test_empty_author_kept_for_scorer_to_skip(self):
        events = self.reader._parse_log(f"{SHA_A}|1700000000|\n", "/repo")
        assert len(events) == 1
        assert events[0].author == ""

    def test_pipe_in_email_survives(self):
        events = self.reader._parse_log(f"{SHA_A}|1700000000|odd|name@example.com\n", "/repo")
        assert events[0].author == "odd|name@example.com"

    def test_malformed_lines_skipped(self):
        raw = "\n".join(
            [
                "not a commit line",
                f"{SHA_A}|notanumber|alice@example.com",
                f"{SHA_A[:10]}|1700000000|short@example.com",
                f"{SHA_B}|1700000000|ok@example.com",
            ]
        )
        events = self.reader._parse_log(raw, "/repo")
        assert [e.author for e in events] == ["ok@example.com"]

    def test_sha256_hashes_accepted(self):
        sha = "c" * 64
        events = self.reader._parse_log(f"{sha}|1700000000|alice@example.com", "/repo")
        assert events[0].sha == sha


class TestReadRepository:
    """Test GitHistoryReader.read against real repositories."""

    def test_missing_path_raises_open_error(self, tmp_path):
        with pytest.raises(RepositoryOpenError) as excinfo:
            GitHistoryReader().read(str(tmp_path / "missing"))
        assert isinstance(excinfo.value, RepositoryError)

    @requires_git
    def test_plain_directory_raises_open_error(self, tmp_path, monkeypatch):
        plain = tmp_path / "plain"
        plain.mkdir()
        # Stop git from discovering a repository above tmp_path
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        with pytest.raises(RepositoryOpenError):
            GitHistoryReader().read(str(plain))

    @requires_git
    def test_empty_repository_raises_head_error(self, git_repo_factory):
        repo = git_repo_factory("empty", [])
        with pytest.raises(HeadResolutionError):
            GitHistoryReader().read(str(repo))

    @requires_git
    def test_reads_all_commits_newest_first(self, git_repo_factory):
        repo = git_repo_factory(
            "project",
            [
                ("alice@example.com", NOW - 20 * DAY),
                ("Bob@Example.com", NOW - 10 * DAY),
                ("alice@example.com", NOW),
            ],
        )
        events = GitHistoryReader().read(str(repo))

        assert [e.author for e in events] == [
            "alice@example.com",
            "Bob@Example.com",
            "alice@example.com",
        ]
        assert [e.timestamp for e in events] == [NOW, NOW - 10 * DAY, NOW - 20 * DAY]
        assert {e.repository for e in events} == {str(repo.resolve())}
        assert all(len(e.sha) == 40 for e in events)

    @requires_git
    def test_git_log_failure_raises_walk_error(self, git_repo_factory, monkeypatch):
        repo = git_repo_factory("project", [("alice@example.com", NOW)])
        reader = GitHistoryReader()
        original = reader._git

        def failing_log(repo_path, *args):
            if args and args[0] == "log":
                raise subprocess.TimeoutExpired(cmd="git log", timeout=1)
            return original(repo_path, *args)

        monkeypatch.setattr(reader, "_git", failing_log)
        with pytest.raises(HistoryWalkError):
            reader.read(str(repo))

    def test_missing_git_executable(self, tmp_path, monkeypatch):
        def no_git(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(subprocess, "run", no_git)
        with pytest.raises(RepositoryOpenError, match="Cannot open repository"):
            GitHistoryReader().read(str(tmp_path))

    @requires_git
    def test_subdirectory_of_repository_rejected(self, git_repo_factory):
        repo = git_repo_factory("mono", [("bob@z.com", NOW)])
        sub = repo / "services" / "api"
        sub.mkdir(parents=True)
        with pytest.raises(RepositoryOpenError, match="Cannot open repository") as excinfo:
            GitHistoryReader().read(str(sub))
        assert "not the root" in excinfo.value.reason
