"""Tests for the top-owners exception hierarchy."""

import pytest

from top_owners.exceptions import (
    AliasFileError,
    ConfigurationError,
    HeadResolutionError,
    HistoryWalkError,
    InvalidConfigError,
    RepositoryError,
    RepositoryOpenError,
    TopOwnersError,
)


class TestHierarchy:
    """Test that every error can be caught at the right level."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidConfigError("tau", 0, "must be positive"),
            AliasFileError("aliases.toml", "bad toml"),
        ],
    )
    def test_configuration_errors(self, error):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, TopOwnersError)

    @pytest.mark.parametrize(
        "cls", [RepositoryOpenError, HeadResolutionError, HistoryWalkError]
    )
    def test_repository_errors(self, cls):
        error = cls("/repo", "boom")
        assert isinstance(error, RepositoryError)
        assert not isinstance(error, ConfigurationError)
        assert error.repository == "/repo"
        assert error.reason == "boom"


class TestMessages:
    """Test error message formatting."""

    def test_details_appended(self):
        error = InvalidConfigError("bonus_per_repo", -1, "cannot be negative")
        assert str(error) == (
            "Invalid configuration for bonus_per_repo: -1 "
            "(key=bonus_per_repo, value=-1, reason=cannot be negative)"
        )

    def test_plain_message(self):
        assert str(TopOwnersError("plain")) == "plain"

    def test_repository_summaries(self):
        assert RepositoryOpenError("/r", "x").message == "Cannot open repository: /r"
        assert HeadResolutionError("/r", "x").message == "Cannot resolve HEAD: /r"
        assert HistoryWalkError("/r", "x").message == "Cannot walk history: /r"
