"""Access to the process environment for prompt segments.

Segments only see the ``Environment`` protocol so they can be exercised
with a fake in tests; ``ProcessEnvironment`` is the real implementation.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

COMMAND_TIMEOUT = 2.0


class Environment(Protocol):
    """What a segment may ask about its surroundings."""

    def getenv(self, key: str) -> str: ...

    def run_command(self, command: str, *args: str) -> str: ...

    def has_files(self, pattern: str) -> bool: ...


class ProcessEnvironment:
    """``Environment`` backed by ``os.environ``, subprocesses and the cwd."""

    def __init__(self, cwd: str | Path | None = None) -> None:
        self._cwd = Path(cwd) if cwd is not None else Path.cwd()

    def getenv(self, key: str) -> str:
        return os.environ.get(key, "")

    def run_command(self, command: str, *args: str) -> str:
        """Run *command* and return its stripped stdout, or ``""`` on failure."""
        try:
            proc = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
                timeout=COMMAND_TIMEOUT,
                cwd=self._cwd,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Running %s failed: %s", command, exc)
            return ""
        if proc.returncode != 0:
            logger.debug("%s exited with status %d", command, proc.returncode)
            return ""
        return proc.stdout.strip()

    def has_files(self, pattern: str) -> bool:
        return any(True for _ in self._cwd.glob(pattern))


def base(path: str) -> str:
    """Return the last component of *path*, ignoring trailing separators."""
    stripped = path.rstrip("/\\")
    if not stripped:
        return path[:1]
    return stripped.replace("\\", "/").rsplit("/", 1)[-1]
