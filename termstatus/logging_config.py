"""Logging for termstatus: a console handler and an optional event log.

Everything hangs off the "termstatus" package logger, so an application
embedding StatusLine keeps full control of the root logger.
"""

import logging
import os
import sys

from termstatus.config import ConfigError, config_section
from termstatus.terminal import is_terminal

PACKAGE_LOGGER = "termstatus"

CONSOLE_HANDLER = "termstatus.console"
EVENT_HANDLER = "termstatus.events"

# One line per setup event: when, which module, and what got bound.
EVENT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Level-tagged formatter, colored only when writing to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: ("\033[0;36m", "[DEBUG]"),
        logging.INFO: ("\033[0;32m", "[INFO]"),
        logging.WARNING: ("\033[1;33m", "[WARN]"),
        logging.ERROR: ("\033[0;31m", "[ERROR]"),
        logging.CRITICAL: ("\033[0;31m", "[CRITICAL]"),
    }

    def __init__(self, use_color=True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        color, prefix = self.LEVEL_COLORS.get(record.levelno, ("", "[LOG]"))
        if not self.use_color:
            return f"{prefix} {record.getMessage()}"
        return f"{color}{prefix}{RESET} {record.getMessage()}"


def _handler(logger, name):
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _replace_handler(logger, handler):
    old = _handler(logger, handler.get_name())
    if old is not None:
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)


def setup_logging(verbose=False, quiet=False, stream=None):
    """Route package log records to the console (stderr by default).

    verbose shows DEBUG, quiet only WARNING and above. Calling again
    replaces the console handler instead of adding a second one.

    Returns:
        The "termstatus" logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    stream = stream if stream is not None else sys.stderr
    console = logging.StreamHandler(stream)
    console.set_name(CONSOLE_HANDLER)
    console.setLevel(level)
    console.setFormatter(ColorFormatter(use_color=is_terminal(stream)))

    logger = logging.getLogger(PACKAGE_LOGGER)
    _replace_handler(logger, console)
    logger.setLevel(level)
    return logger


def open_event_log(config):
    """Append status line setup events to the file named in config.

    Reads the 'logging' section: 'file' enables the log, 'level' (default
    debug) filters it. The file never receives ANSI codes. Console output
    keeps its own level when the file asks for more detail.

    Returns:
        The file handler, or None when no file is configured.

    Raises:
        ConfigError: if the section or its level is malformed.
    """
    section = config_section(config, "logging")
    path = section.get("file")
    if not path:
        return None

    level_name = str(section.get("level", "debug")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"logging.level: unknown level {section.get('level')!r}")

    path = os.path.expanduser(str(path))
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.set_name(EVENT_HANDLER)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(EVENT_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    _replace_handler(logger, handler)
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    logger.debug("Event log opened at %s (level=%s)", path, level_name)
    return handler
