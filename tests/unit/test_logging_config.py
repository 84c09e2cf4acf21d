"""Tests for termstatus.logging_config module."""

import io
import logging
from unittest.mock import patch

import pytest

from termstatus.logging_config import (
    CONSOLE_HANDLER,
    PACKAGE_LOGGER,
    ColorFormatter,
    setup_logging,
)


def _record(level, msg, args=()):
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0,
        msg=msg, args=args, exc_info=None,
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


class TestColorFormatter:
    """Tests for ColorFormatter."""

    def test_format_info(self):
        result = ColorFormatter().format(_record(logging.INFO, "hello world"))
        assert "[INFO]" in result
        assert "hello world" in result

    def test_format_warning_uses_short_tag(self):
        result = ColorFormatter().format(_record(logging.WARNING, "watch out"))
        assert "[WARN]" in result

    def test_colored_output_has_ansi(self):
        result = ColorFormatter(use_color=True).format(_record(logging.ERROR, "boom"))
        assert "\033[" in result

    def test_plain_output_has_no_ansi(self):
        result = ColorFormatter(use_color=False).format(_record(logging.ERROR, "boom"))
        assert result == "[ERROR] boom"

    def test_message_args_applied(self):
        record = _record(logging.INFO, "%d steps", args=(3,))
        assert ColorFormatter(use_color=False).format(record) == "[INFO] 3 steps"

    def test_unknown_level(self):
        result = ColorFormatter(use_color=False).format(_record(25, "custom"))
        assert result == "[LOG] custom"

    def test_all_levels_have_colors(self):
        for level in (logging.DEBUG, logging.INFO, logging.WARNING,
                      logging.ERROR, logging.CRITICAL):
            assert level in ColorFormatter.LEVEL_COLORS


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_returns_package_logger(self):
        assert setup_logging(stream=io.StringIO()).name == PACKAGE_LOGGER

    @pytest.mark.parametrize("kwargs, level", [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
    ])
    def test_levels(self, kwargs, level):
        logger = setup_logging(stream=io.StringIO(), **kwargs)
        assert logger.level == level
        assert logger.handlers[0].level == level

    def test_writes_plain_tags_to_redirected_stream(self):
        out = io.StringIO()
        setup_logging(stream=out)
        logging.getLogger("termstatus.demo").info("%d steps", 4)
        assert out.getvalue() == "[INFO] 4 steps\n"

    def test_color_follows_terminal(self):
        with patch("termstatus.logging_config.is_terminal", return_value=True):
            logger = setup_logging(stream=io.StringIO())
        assert logger.handlers[0].formatter.use_color is True

    def test_defaults_to_stderr(self, capsys):
        setup_logging()
        logging.getLogger("termstatus.demo").warning("careful")
        assert "[WARN] careful" in capsys.readouterr().err

    def test_second_call_replaces_console_handler(self):
        first, second = io.StringIO(), io.StringIO()
        setup_logging(stream=first)
        logger = setup_logging(stream=second, quiet=True)
        assert [h.get_name() for h in logger.handlers] == [CONSOLE_HANDLER]
        logger.warning("once")
        assert first.getvalue() == ""
        assert second.getvalue() == "[WARN] once\n"
