"""Tests for logging setup."""

import logging

import pytest

from top_owners.logging_config import get_logger, setup_logging, warnings_visible


class TestSetupLogging:
    """Test verbosity levels and handlers."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == "top_owners"
        assert logger.level == level

    def test_warnings_visible_follows_verbosity(self):
        setup_logging("quiet")
        assert not warnings_visible()
        setup_logging("normal")
        assert warnings_visible()

    def test_reconfiguring_replaces_handlers(self):
        setup_logging("normal")
        setup_logging("verbose")
        assert len(logging.getLogger().handlers) == 1

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "owners.log"
        setup_logging("normal", log_file=str(log_file))
        get_logger("engine").warning("Skipping repository %s", "broken")
        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text()
        assert "top_owners.engine - WARNING - Skipping repository broken" in content


class TestGetLogger:
    """Test logger namespacing."""

    def test_root(self):
        assert get_logger().name == "top_owners"

    def test_prefixes_bare_names(self):
        assert get_logger("engine").name == "top_owners.engine"

    def test_keeps_qualified_names(self):
        assert get_logger("top_owners.history.git_reader").name == "top_owners.history.git_reader"
