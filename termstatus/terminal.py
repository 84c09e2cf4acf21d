"""Terminal control sequences and TTY detection."""

import io
import os

# Erase the whole line, then carriage return to column 0.
ERASE_LINE = b"\x1b[2K\r"

NEWLINE = b"\n"


def is_terminal(stream):
    """Return True if stream's file descriptor refers to a terminal.

    Streams without a usable file descriptor (in-memory buffers, closed
    files, mocks) are never terminals.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation, OSError, ValueError):
        return False
    return os.isatty(fd)
