"""Shared pytest fixtures for termstatus tests."""

import sys
import threading
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class RecordingStream:
    """Binary stream that keeps every write() call as a separate chunk."""

    def __init__(self, error=None):
        self.chunks = []
        self.flushes = 0
        self.error = error
        self._lock = threading.Lock()

    def write(self, data):
        if self.error is not None:
            raise self.error
        with self._lock:
            self.chunks.append(bytes(data))
        return len(data)

    def flush(self):
        self.flushes += 1

    def getvalue(self):
        return b"".join(self.chunks)


@pytest.fixture
def recording_stream():
    """A fresh RecordingStream."""
    return RecordingStream()


@pytest.fixture
def stream_cls():
    """The RecordingStream class, for tests that need custom instances."""
    return RecordingStream
