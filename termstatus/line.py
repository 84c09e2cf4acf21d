"""Single-line status output that overwrites itself in place.

Typical usage:

    line = StatusLine()
    for i in range(total):
        line.write_formatted("step %d out of %d", i, total)
        ...
    line.done()

Output uses VT100 escape sequences. When the destination is not a terminal
(for example, output redirected to a file or pipe), updates do nothing.
"""

import io
import logging
import sys
import threading

from termstatus.terminal import ERASE_LINE, NEWLINE, is_terminal

logger = logging.getLogger(__name__)


class StatusLineMisuseError(RuntimeError):
    """Raised when a StatusLine is rebound after it started writing."""


def _binary_stream(stream):
    """Return the byte-level stream behind a text stream, if there is one."""
    if isinstance(stream, io.TextIOBase) and hasattr(stream, "buffer"):
        # Anything already written as text must land before our bytes.
        stream.flush()
        return stream.buffer
    return stream


class StatusLine:
    """Prints one status line, rewriting it on every update.

    Writes to standard output unless set_destination() is called first.
    Finish with done() to move the cursor to a fresh line, or use the
    instance as a context manager.

    Not safe for concurrent updates; only the first-use setup is guarded.
    """

    def __init__(self):
        self._destination = None
        self._initialized = False
        self._interactive = False
        self._lock = threading.Lock()
        self._buf = bytearray()

    @property
    def initialized(self):
        return self._initialized

    @property
    def is_interactive(self):
        """Cached terminal check. Only meaningful once initialized."""
        return self._interactive

    def set_destination(self, stream):
        """Bind the output stream. Must be called before any other method.

        Raises:
            StatusLineMisuseError: if setup already ran, either from an
                earlier write/done call or a previous set_destination().
        """
        with self._lock:
            if self._initialized:
                raise StatusLineMisuseError(
                    "StatusLine.set_destination() must be called before any "
                    "other StatusLine method"
                )
            self._destination = stream
            self._setup_locked()

    def _setup(self):
        if self._initialized:
            return
        with self._lock:
            if not self._initialized:
                self._setup_locked()

    def _setup_locked(self):
        if self._destination is None:
            self._destination = sys.stdout
        self._destination = _binary_stream(self._destination)
        self._interactive = is_terminal(self._destination)
        self._initialized = True
        logger.debug(
            "Status line bound to %r (interactive=%s)",
            self._destination, self._interactive,
        )

    def write(self, text):
        """Replace the status line with text.

        text may be str, bytes or any object rendered with str(); it must
        not contain line breaks. Returns the number of bytes written, 0 when
        the destination is not a terminal. Errors from the destination
        propagate unchanged.
        """
        self._setup()
        if not self._interactive:
            return 0
        return self._emit(text)

    def write_formatted(self, template, *args):
        """Like write(), with printf-style formatting: template % args.

        With no args the template is written as is, so a literal "%" needs
        no escaping.
        """
        self._setup()
        if not self._interactive:
            return 0
        return self._emit(template % args if args else template)

    def _emit(self, text):
        if not isinstance(text, (bytes, bytearray)):
            text = str(text).encode("utf-8")
        buf = self._buf
        buf[:] = ERASE_LINE
        buf += text
        return self._send(buf)

    def _send(self, data):
        # One write() per update so the redraw reaches the terminal whole.
        n = self._destination.write(data)
        flush = getattr(self._destination, "flush", None)
        if flush is not None:
            flush()
        return n

    def done(self):
        """Move the cursor below the status line. No-op off a terminal."""
        self._setup()
        if not self._interactive:
            return 0
        return self._send(NEWLINE)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        # A failed write means the destination is gone; leave its error alone.
        if exc_type is None or not issubclass(exc_type, OSError):
            self.done()
        return False
