"""Visible width measurement for rendered prompt text.

Strips ANSI control sequences and the shell's zero-width wrapper markers,
then counts normalization segments of the NFD-normalized remainder: each
starter together with the combining marks that follow it counts once.
Wide characters and emoji are not given double width: prompt alignment
downstream is calibrated to this count.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache

from pi.prompt.formats import ANSI_PATTERN, Shell, get_formats

_ANSI_RE = re.compile(ANSI_PATTERN)


# ---------------------------------------------------------------------------
# strip_ansi
# ---------------------------------------------------------------------------

def strip_ansi(text: str, shell: Shell | str = Shell.PLAIN) -> str:
    """Remove escape sequences and *shell*'s zero-width markers from *text*.

    The escape pattern is shell-agnostic.  Markers such as zsh's ``%{`` or
    bash's ``\\[`` are not escape sequences, so they are removed separately
    and only for the dialect that emits them.
    """
    stripped = _ANSI_RE.sub("", text)
    for marker in get_formats(shell).zero_width_markers:
        stripped = stripped.replace(marker, "")
    return stripped


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

@lru_cache(maxsize=512)
def _nfd_width(text: str) -> int:
    """Count NFD segments: a starter plus any non-starters after it.

    A non-starter at the very beginning still counts as one segment.
    """
    count = 0
    for i, ch in enumerate(unicodedata.normalize("NFD", text)):
        if i == 0 or unicodedata.combining(ch) == 0:
            count += 1
    return count


def visible_width(text: str, shell: Shell | str = Shell.PLAIN) -> int:
    """Return the visible width of *text* as rendered for *shell*.

    * Strips ANSI escape sequences and zero-width markers.
    * Uses a fast ASCII path when possible.
    * Otherwise counts NFD segments, caching the result.
    """
    if not text:
        return 0

    stripped = strip_ansi(text, shell)
    if not stripped:
        return 0

    if stripped.isascii():
        return len(stripped)

    return _nfd_width(stripped)
