"""Inline color markup parsing.

Text may contain ``<fg>text</>`` or ``<fg,bg>text</>`` tags.  Either side of
the color spec may be left empty to inherit the *ambient* color of the
enclosing write, e.g. ``<,blue>text</>`` keeps the ambient foreground and
sets a blue background.  Tags do not nest: an omitted side always inherits
from the ambient colors, never from an outer tag.

A tag whose color does not resolve is left in place as literal text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pi.prompt.colors import TRANSPARENT, resolve_color

logger = logging.getLogger(__name__)

TAG_RE = re.compile(r"<([#A-Za-z0-9]+)?(?:,([#A-Za-z0-9]+))?>(.*?)</>")


@dataclass(frozen=True)
class ColoredText:
    """A run of text together with the colors it is rendered in."""

    background: str
    foreground: str
    text: str


def _is_unresolvable(token: str, other: str) -> bool:
    """Return ``True`` if a tag side makes the whole tag invalid.

    A side only invalidates the tag when it was given, does not resolve,
    is not ``transparent``, and the other side was left empty.
    """
    if not token or token == TRANSPARENT or other:
        return False
    return resolve_color(token) is None


def parse_markup(text: str, background: str, foreground: str) -> list[ColoredText]:
    """Split *text* into colored runs.

    Untagged text is assigned the ambient *background* / *foreground*; the
    inner text of each valid tag gets the tag's colors, with empty sides
    inherited from the ambient colors.  Runs are returned in left-to-right
    order and empty runs are dropped.
    """
    chunks: list[ColoredText] = []
    cursor = 0

    def emit(bg: str, fg: str, run: str) -> None:
        if run:
            chunks.append(ColoredText(bg, fg, run))

    for match in TAG_RE.finditer(text):
        tag_fg = match.group(1) or ""
        tag_bg = match.group(2) or ""
        inner = match.group(3)

        if _is_unresolvable(tag_fg, tag_bg) or _is_unresolvable(tag_bg, tag_fg):
            logger.debug("Leaving tag %r as literal text", match.group(0))
            continue

        emit(background, foreground, text[cursor:match.start()])
        emit(tag_bg or background, tag_fg or foreground, inner)
        cursor = match.end()

    emit(background, foreground, text[cursor:])
    return chunks
