"""Logging utilities for devprint.

Print plans are logged as multi-line tables, so the formatter keeps the
table rows intact and puts record metadata at the end of the first line.
"""

import logging

__all__ = ["setup_logging", "MultilineFormatter"]


class MultilineFormatter(logging.Formatter):
    """Formatter that keeps multi-line messages readable.

    The first line is padded to ``msg_width`` and followed by the record
    metadata; continuation lines are indented by ``indent`` spaces.

    Attributes:
        msg_width: Width the first line is padded to before metadata.
        show_metadata: Whether to append timestamp/level/name metadata.
        indent: Spaces prefixed to continuation lines.
    """

    def __init__(self, msg_width: int = 100, show_metadata: bool = True, indent: int = 0) -> None:
        """Initialize the formatter.

        Args:
            msg_width: Width the first line is padded to before metadata.
            show_metadata: Whether to append timestamp/level/name metadata.
            indent: Spaces prefixed to continuation lines.
        """
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.msg_width = msg_width
        self.show_metadata = show_metadata
        self.indent = indent

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        lines = record.getMessage().split("\n")
        first_line = lines[0]
        if self.show_metadata:
            metadata = f"{self.formatTime(record)} - {record.levelname} - {record.name}"
            first_line = f"{first_line:<{self.msg_width}}{metadata}"
        pad = " " * self.indent
        return "\n".join([first_line] + [pad + line for line in lines[1:]])


def setup_logging(
    log_file: str | None = None,
    level: int = logging.DEBUG,
    msg_width: int = 100,
    show_metadata: bool = True,
    logger_name: str = "devprint",
) -> logging.Handler:
    """Attach a MultilineFormatter handler to the devprint logger.

    Args:
        log_file: Path of a log file to (over)write. ``None`` logs to stderr.
        level: Logging level for the logger.
        msg_width: Width for message alignment.
        show_metadata: Whether to append timestamp/level/name metadata.
        logger_name: Logger to configure; ``""`` configures the root logger.

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(log_file, mode="w")
    handler.setFormatter(MultilineFormatter(msg_width=msg_width, show_metadata=show_metadata))
    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
