"""Color token resolution: named ANSI colors and hex colors to SGR codes.

A color token is one of the sixteen ANSI color names (plus ``default``), a
hex color such as ``#ff8800``, or the ``transparent`` sentinel.  Resolution
never raises; a token that cannot be resolved yields ``None``.
"""

from __future__ import annotations

import re
from types import MappingProxyType

TRANSPARENT = "transparent"

# ---------------------------------------------------------------------------
# Named colors: name -> (foreground code, background code)
# ---------------------------------------------------------------------------

COLOR_NAMES: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "black": ("30", "40"),
    "red": ("31", "41"),
    "green": ("32", "42"),
    "yellow": ("33", "43"),
    "blue": ("34", "44"),
    "magenta": ("35", "45"),
    "cyan": ("36", "46"),
    "white": ("37", "47"),
    "default": ("39", "49"),
    "darkGray": ("90", "100"),
    "lightRed": ("91", "101"),
    "lightGreen": ("92", "102"),
    "lightYellow": ("93", "103"),
    "lightBlue": ("94", "104"),
    "lightMagenta": ("95", "105"),
    "lightCyan": ("96", "106"),
    "lightWhite": ("97", "107"),
})

_HEX_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def color_from_name(name: str, is_background: bool = False) -> str | None:
    """Return the fixed SGR code for a named color, or ``None``."""
    codes = COLOR_NAMES.get(name)
    if codes is None:
        return None
    return codes[1] if is_background else codes[0]


def parse_hex(token: str) -> tuple[int, int, int] | None:
    """Parse ``#RRGGBB`` / ``#RGB`` (``#`` optional) into an RGB triple."""
    if not _HEX_RE.fullmatch(token):
        return None
    digits = token.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def resolve_color(token: str, is_background: bool = False) -> str | None:
    """Resolve a color *token* to an SGR parameter string.

    Named colors map to their fixed 16-color codes.  Hex colors map to a
    24-bit code (``38;2;R;G;B`` or ``48;2;R;G;B``).  Everything else,
    including the empty string and ``transparent``, resolves to ``None``.
    """
    named = color_from_name(token, is_background)
    if named is not None:
        return named

    rgb = parse_hex(token)
    if rgb is None:
        return None
    r, g, b = rgb
    prefix = "48" if is_background else "38"
    return f"{prefix};2;{r};{g};{b}"
