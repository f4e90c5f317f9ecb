"""
Tests for the colored, timestamped logger.
"""

import io
from unittest.mock import patch

import pytest

from qutils.config import LoggerConfig
from qutils.ui.colors import Colors
from qutils.ui.logger import Logger, create_logger, empty_log

STAMP = "[6/16/2024, 2:23:18 AM]"


@pytest.fixture
def frozen_date():
    """Pin the logger's timestamp."""
    with patch("qutils.ui.logger.get_local_date", return_value="6/16/2024, 2:23:18 AM") as mock_date:
        yield mock_date


def green(text):
    return f"{Colors.GREEN}{text}{Colors.RESET}"


def red(text):
    return f"{Colors.RED}{text}{Colors.RESET}"


def yellow(text):
    return f"{Colors.YELLOW}{text}{Colors.RESET}"


class TestLogger:
    """Tests for Logger output lines."""

    def test_all_levels(self, capsys, frozen_date):
        log = create_logger(time_zone="Australia/Sydney")

        log.text("test")
        log.warning("test 2")
        log.error("test 3")
        log.success("test 4")

        assert capsys.readouterr().out.splitlines() == [
            f"{STAMP} test",
            f"{yellow(STAMP)} {yellow('test 2')}",
            f"{red(STAMP)} {red('test 3')}",
            f"{green(STAMP)} {green('test 4')}",
        ]
        frozen_date.assert_called_with("Australia/Sydney")
        assert frozen_date.call_count == 4

    def test_multiple_items(self, capsys, frozen_date):
        create_logger().success("done", 3, "files")
        assert capsys.readouterr().out == f"{green(STAMP)} {green('done')} {green('3')} {green('files')}\n"

    def test_structured_items_not_colored(self, capsys, frozen_date):
        create_logger().error("bad", {"a": 1}, [1, 2])
        assert capsys.readouterr().out == f"{red(STAMP)} {red('bad')} {{'a': 1}} [1, 2]\n"

    def test_without_time(self, capsys, frozen_date):
        log = create_logger(include_time=False)
        log.text("plain")
        log.warning("careful")

        assert capsys.readouterr().out.splitlines() == ["plain", yellow("careful")]
        frozen_date.assert_not_called()

    def test_custom_stream(self, capsys, frozen_date):
        stream = io.StringIO()
        Logger(LoggerConfig(), stream=stream).text("hi")

        assert stream.getvalue() == f"{STAMP} hi\n"
        assert capsys.readouterr().out == ""

    def test_real_timestamp(self, capsys):
        create_logger(time_zone="UTC").text("now")
        line = capsys.readouterr().out
        assert line.startswith("[") and line.endswith("] now\n")


class TestEmptyLog:
    """empty_log has the same methods and prints nothing."""

    def test_silent(self, capsys):
        empty_log.text("test")
        empty_log.warning("test")
        empty_log.error("test")
        empty_log.success("test")

        assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
