"""Common logging setup and the LogCountFilter."""

import logging
import sys


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for an automation run.

    Args:
        level (str, optional):
            Name of the log level. Defaults to "INFO".
        log_file (str | None, optional):
            If given, log messages are also written to this file.

    """

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%d-%b-%Y %H:%M:%S",
        level=logging.getLevelName(level),
        handlers=handlers,
        force=True,
    )


class LogCountFilter(logging.Filter):
    """LogFilter to be assigned to a logger to count the number of messages by level."""

    def __init__(self) -> None:
        """LogCountFilter initializer."""

        super().__init__()
        self.counts = {"debug": 0, "info": 0, "warning": 0, "error": 0, "critical": 0}

    def filter(self, record: logging.LogRecord) -> bool:
        """Count the record and let it pass.

        Args:
            record (logging.LogRecord):
                The log record to count.

        Returns:
            bool:
                Always True - no record is suppressed.

        """

        level_name = record.levelname.lower()
        self.counts[level_name] = self.counts.get(level_name, 0) + 1
        return True

    def reset(self) -> None:
        """Set all counters back to zero."""

        for level_name in self.counts:
            self.counts[level_name] = 0
