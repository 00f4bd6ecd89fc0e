"""Terminal output abstraction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal`` that
writes straight to ``sys.stdout``.  Writes are unbuffered and ordered; there
is no locking, so callers sharing a terminal must serialise their writes.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO


class Terminal(Protocol):
    """Interface for terminal output."""

    def write(self, data: str) -> None: ...


class ProcessTerminal:
    """Terminal backed by ``sys.stdout`` (or another text stream).

    If ``PI_PROMPT_WRITE_LOG`` is set, everything written is also appended
    to that file.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._write_log_path: str = os.environ.get("PI_PROMPT_WRITE_LOG", "")

    def write(self, data: str) -> None:
        """Write data to the stream and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    def _raw_write(self, data: str) -> None:
        """Write directly to the stream, bypassing buffering."""
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(data)
            stream.flush()
        except OSError:
            pass
