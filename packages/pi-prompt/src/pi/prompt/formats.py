"""Per-shell escape sequence templates.

Each supported shell owns exactly one complete :class:`Formats` instance.
zsh and bash need every run of escape sequences wrapped in markers their
line editors recognise (``%{``/``%}`` and ``\\[``/``\\]``) so that the prompt
width they compute excludes the invisible bytes.  The templates below must
stay byte-exact for that reason.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Shell(enum.Enum):
    """Target shell dialect."""

    PLAIN = "plain"
    ZSH = "zsh"
    BASH = "bash"

    @classmethod
    def from_name(cls, name: str | None) -> Shell:
        """Map a shell name (``"zsh"``, ``"/bin/bash"``...) to a dialect.

        Unknown names fall back to :attr:`PLAIN`.
        """
        if not name:
            return cls.PLAIN
        key = name.strip().rsplit("/", 1)[-1].lower()
        try:
            return cls(key)
        except ValueError:
            logger.debug("Unknown shell %r, using plain escape sequences", name)
            return cls.PLAIN


# ---------------------------------------------------------------------------
# ANSI control sequence pattern (shared by every dialect)
# ---------------------------------------------------------------------------

ANSI_PATTERN = (
    "[\x1b\x9b][\\[\\]()#;?]*"
    "(?:(?:(?:[a-zA-Z0-9]*(?:;[a-zA-Z0-9]*)*)?\x07)"
    "|(?:(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-PRZcf-ntqry=><~]))"
)


@dataclass(frozen=True)
class Formats:
    """Printf-style templates for one shell dialect.

    ``single``       -- ``(code, text)``
    ``full``         -- ``(background code, foreground code, text)``
    ``transparent``  -- ``(code, text)``, reverse video on the default bg
    ``linechange``   -- ``(count, "B" | "F")``
    ``left``         -- ``(columns)``, cursor forward
    ``right``        -- ``(columns)``, cursor backward
    ``title``        -- ``(title)``
    ``creset`` and ``clear_eol`` are literal sequences.
    """

    single: str
    full: str
    transparent: str
    linechange: str
    left: str
    right: str
    title: str
    creset: str
    clear_eol: str
    ansi: str = ANSI_PATTERN
    zero_width_markers: tuple[str, ...] = ()


PLAIN_FORMATS = Formats(
    single="\x1b[%sm%s\x1b[0m",
    full="\x1b[%sm\x1b[%sm%s\x1b[0m",
    transparent="\x1b[%s;49m\x1b[7m%s\x1b[m\x1b[0m",
    linechange="\x1b[%d%s",
    left="\x1b[%dC",
    right="\x1b[%dD",
    title="\x1b]0;%s\x07",
    creset="\x1b[0m",
    clear_eol="\x1b[K",
)

ZSH_FORMATS = Formats(
    single="%%{\x1b[%sm%%}%s%%{\x1b[0m%%}",
    full="%%{\x1b[%sm\x1b[%sm%%}%s%%{\x1b[0m%%}",
    transparent="%%{\x1b[%s;49m\x1b[7m%%}%s%%{\x1b[m\x1b[0m%%}",
    linechange="%%{\x1b[%d%s%%}",
    left="%%{\x1b[%dC%%}",
    right="%%{\x1b[%dD%%}",
    title="%%{\x1b]0;%s\x07%%}",
    creset="%{\x1b[0m%}",
    clear_eol="%{\x1b[K%}",
    zero_width_markers=("%{", "%}"),
)

BASH_FORMATS = Formats(
    single="\\[\x1b[%sm\\]%s\\[\x1b[0m\\]",
    full="\\[\x1b[%sm\x1b[%sm\\]%s\\[\x1b[0m\\]",
    transparent="\\[\x1b[%s;49m\x1b[7m\\]%s\\[\x1b[m\x1b[0m\\]",
    linechange="\\[\x1b[%d%s\\]",
    left="\\[\x1b[%dC\\]",
    right="\\[\x1b[%dD\\]",
    title="\\[\x1b]0;%s\x07\\]",
    creset="\\[\x1b[0m\\]",
    clear_eol="\\[\x1b[K\\]",
    zero_width_markers=("\\[", "\\]"),
)

_FORMATS_BY_SHELL = {
    Shell.PLAIN: PLAIN_FORMATS,
    Shell.ZSH: ZSH_FORMATS,
    Shell.BASH: BASH_FORMATS,
}


def get_formats(shell: Shell | str) -> Formats:
    """Return the template set for *shell* (a :class:`Shell` or a name)."""
    if not isinstance(shell, Shell):
        shell = Shell.from_name(shell)
    return _FORMATS_BY_SHELL[shell]
