"""Unit tests for the logging helpers."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from xrm_automation.log import LogCountFilter, setup_logging


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore the root logger configuration after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestLogCountFilter:
    """Tests for counting log messages."""

    def test_counts_by_level(self) -> None:
        """Each record is counted under its level and passes."""
        logger = logging.getLogger("tests.log_count")
        logger.setLevel(logging.DEBUG)
        log_filter = LogCountFilter()
        logger.addFilter(log_filter)

        try:
            logger.debug("debug")
            logger.warning("warning")
            logger.warning("another warning")
            logger.error("error")
        finally:
            logger.removeFilter(log_filter)

        assert log_filter.counts == {"debug": 1, "info": 0, "warning": 2, "error": 1, "critical": 0}

    def test_reset(self) -> None:
        """Counters can be reset."""
        log_filter = LogCountFilter()
        log_filter.counts["error"] = 3

        log_filter.reset()

        assert log_filter.counts["error"] == 0


class TestSetupLogging:
    """Tests for the root logger setup."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_writes_log_file(self, tmp_path: Path) -> None:
        """Messages end up in the log file with level and logger name."""
        log_file = tmp_path / "automation.log"

        setup_logging(level="DEBUG", log_file=str(log_file))
        logging.getLogger("xrm_automation.tests").debug("Dialog opened")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "DEBUG [xrm_automation.tests] Dialog opened" in content
        assert logging.getLogger().level == logging.DEBUG
