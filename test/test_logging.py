"""Unit tests for devprint.utils.logging module.

Tests MultilineFormatter formatting and setup_logging configuration.

Run with: pytest test/test_logging.py -v
"""

import logging
from pathlib import Path

from conftest import make_operand

from devprint.formatter import plan_print
from devprint.request import ThreadIdentity, make_request
from devprint.types import I32
from devprint.utils.logging import MultilineFormatter, setup_logging


def _record(msg: str, level: int = logging.INFO, name: str = "devprint.test") -> logging.LogRecord:
    """Build a LogRecord without arguments."""
    return logging.LogRecord(name=name, level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None)


class TestMultilineFormatter:
    """Tests for MultilineFormatter."""

    def test_single_line_without_metadata(self) -> None:
        """Without metadata a single line passes through unchanged."""
        formatter = MultilineFormatter(msg_width=40, show_metadata=False)
        assert formatter.format(_record("hello world")) == "hello world"

    def test_single_line_with_metadata(self) -> None:
        """Metadata follows the message padded to msg_width."""
        formatter = MultilineFormatter(msg_width=30, show_metadata=True)
        result = formatter.format(_record("short", level=logging.WARNING))
        assert result.startswith("short" + " " * 25)
        assert result.endswith("WARNING - devprint.test")

    def test_continuation_lines_indented(self) -> None:
        """Continuation lines are kept and indented."""
        formatter = MultilineFormatter(msg_width=10, show_metadata=True, indent=4)
        lines = formatter.format(_record("plan:\nrow one\nrow two")).split("\n")
        assert len(lines) == 3
        assert "INFO" in lines[0]
        assert lines[1:] == ["    row one", "    row two"]

    def test_defaults(self) -> None:
        """Defaults show metadata without indentation."""
        formatter = MultilineFormatter()
        assert formatter.msg_width == 100
        assert formatter.show_metadata is True
        assert formatter.indent == 0


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_file_handler(self, tmp_path: Path) -> None:
        """A log file gets a FileHandler opened in write mode."""
        log_file = tmp_path / "devprint.log"
        log_file.write_text("old content\n")
        handler = setup_logging(str(log_file), level=logging.INFO, show_metadata=False)
        logger = logging.getLogger("devprint")
        try:
            assert isinstance(handler, logging.FileHandler)
            assert handler in logger.handlers
            assert logger.level == logging.INFO
            logging.getLogger("devprint.formatter").info("new content")
            handler.flush()
            content = log_file.read_text()
            assert "old content" not in content
            assert "new content" in content
        finally:
            logger.removeHandler(handler)
            handler.close()
            logger.setLevel(logging.NOTSET)

    def test_stream_handler_by_default(self) -> None:
        """Without a file, records go to a stream handler."""
        handler = setup_logging(msg_width=20)
        logger = logging.getLogger("devprint")
        try:
            assert type(handler) is logging.StreamHandler
            assert isinstance(handler.formatter, MultilineFormatter)
            assert handler.formatter.msg_width == 20
            assert logger.level == logging.DEBUG
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_plan_table_logged(self, tmp_path: Path) -> None:
        """Debug logging writes the plan table below its header line."""
        log_file = tmp_path / "plan.log"
        handler = setup_logging(str(log_file), show_metadata=False)
        logger = logging.getLogger("devprint")
        try:
            op = make_operand((4,), [(1,), (2,)], dtype=I32)
            plan_print(make_request("x", op), ThreadIdentity(0, 0, 0))
            handler.flush()
            content = log_file.read_text()
            assert "print plan for pid (0, 0, 0):" in content
            assert "pid (0, 0, 0) idx (2) x: 1" in content
            assert "widths=(1,)" in content
        finally:
            logger.removeHandler(handler)
            handler.close()
            logger.setLevel(logging.NOTSET)
