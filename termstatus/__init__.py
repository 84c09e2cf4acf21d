"""Print a single status line to the terminal, overwriting it on each update."""

from termstatus.line import StatusLine, StatusLineMisuseError

__all__ = ["StatusLine", "StatusLineMisuseError"]
