"""Renderer: turns marked-up prompt text into shell-specific escape sequences.

A ``Renderer`` is created per prompt render pass for one shell dialect.
``write`` calls accumulate colorized output in an internal buffer that is
read back with ``string()`` and emptied with ``reset()``.  Cursor helpers
return escape sequences; title, print and reset helpers write straight to
the terminal.
"""

from __future__ import annotations

from pi.prompt.colors import TRANSPARENT, resolve_color
from pi.prompt.formats import Formats, Shell, get_formats
from pi.prompt.markup import parse_markup
from pi.prompt.terminal import ProcessTerminal, Terminal
from pi.prompt.width import visible_width as _visible_width

# Column count large enough that the terminal clamps the cursor at the
# right edge of the line.
CARRIAGE_FORWARD_COLUMNS = 1000


class Renderer:
    """Render colored prompt segments for a single shell dialect."""

    def __init__(
        self,
        shell: Shell | str = Shell.PLAIN,
        terminal: Terminal | None = None,
    ) -> None:
        if not isinstance(shell, Shell):
            shell = Shell.from_name(shell)
        self._shell = shell
        self._formats = get_formats(shell)
        self._terminal: Terminal = terminal if terminal is not None else ProcessTerminal()
        self._buffer: list[str] = []

    # -- properties ---------------------------------------------------------

    @property
    def shell(self) -> Shell:
        return self._shell

    @property
    def formats(self) -> Formats:
        return self._formats

    # -- colorized writes ---------------------------------------------------

    def write(self, background: str, foreground: str, text: str) -> None:
        """Append *text* to the buffer, expanding inline color tags.

        Untagged text is colored with the ambient *background* and
        *foreground*.
        """
        for chunk in parse_markup(text, background, foreground):
            self.write_colored(chunk.background, chunk.foreground, chunk.text)

    def write_colored(self, background: str, foreground: str, text: str) -> None:
        """Append *text* colored with exactly the given colors.

        * A ``transparent`` foreground on a set background draws the text in
          reverse video so the background color shows through as the glyphs.
        * Without a background only the foreground code is applied.
        * With both, the background code goes first.
        """
        fmt = self._formats
        if foreground == TRANSPARENT and background:
            colored = fmt.transparent % (_code(background), text)
        elif not background or background == TRANSPARENT:
            colored = fmt.single % (_code(foreground), text)
        elif foreground:
            colored = fmt.full % (
                _code(background, is_background=True),
                _code(foreground),
                text,
            )
        else:
            colored = fmt.single % (_code(background, is_background=True), text)
        self._buffer.append(colored)

    def string(self) -> str:
        """Return everything written since the last ``reset``."""
        return "".join(self._buffer)

    def reset(self) -> None:
        self._buffer.clear()

    # -- width / cursor helpers ---------------------------------------------

    def visible_width(self, text: str) -> int:
        """Visible width of *text* as the renderer's shell would count it."""
        return _visible_width(text, self._shell)

    def carriage_forward(self) -> str:
        """Sequence moving the cursor to the right edge of the line."""
        return self._formats.left % CARRIAGE_FORWARD_COLUMNS

    def set_cursor_for_right_write(self, text: str, offset: int) -> str:
        """Sequence moving the cursor back by the width of *text* less *offset*.

        Call after :meth:`carriage_forward` to right-align *text*.
        """
        return self._formats.right % (self.visible_width(text) - offset)

    def change_line(self, number_of_lines: int) -> str:
        """Sequence moving the cursor down (positive) or up (negative)."""
        if number_of_lines < 0:
            return self._formats.linechange % (-number_of_lines, "F")
        return self._formats.linechange % (number_of_lines, "B")

    # -- direct terminal writes ---------------------------------------------

    def set_console_title(self, title: str) -> None:
        self._terminal.write(self._formats.title % title)

    def print(self, text: str) -> None:
        """Write *text* followed by a clear-to-end-of-line sequence."""
        self._terminal.write(text)
        self.clear_eol()

    def clear_eol(self) -> None:
        self._terminal.write(self._formats.clear_eol)

    def creset(self) -> None:
        self._terminal.write(self._formats.creset)


def _code(color: str, is_background: bool = False) -> str:
    # Unresolvable colors render with an empty SGR parameter.
    return resolve_color(color, is_background) or ""
