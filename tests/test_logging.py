"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from archon_bridge.configs.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging handlers."""

    def test_file_and_stderr_handlers(self, temp_dir: Path):
        """A writable log file gets full output; stderr only warnings."""
        log_file = temp_dir / "logs" / "bridge.log"

        logger = setup_logging(debug=False, log_file=str(log_file))

        handlers = {type(handler): handler for handler in logger.handlers}
        assert handlers[logging.FileHandler].level == logging.INFO
        assert handlers[logging.StreamHandler].level == logging.WARNING
        assert log_file.parent.is_dir()

    def test_unwritable_log_file_falls_back_to_stderr(self, temp_dir: Path):
        """An unusable log path leaves a stderr-only logger instead of raising."""
        blocker = temp_dir / "not-a-dir"
        blocker.write_text("")

        logger = setup_logging(debug=True, log_file=str(blocker / "bridge.log"))

        assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
        assert logger.handlers[0].level == logging.DEBUG

    def test_empty_log_file_means_stderr_only(self):
        logger = setup_logging(debug=False, log_file="")

        assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
        assert logger.handlers[0].level == logging.INFO

    def test_get_logger_namespace(self):
        assert get_logger("dispatcher").name == "archon_bridge.dispatcher"
