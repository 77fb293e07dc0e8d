"""
Measured blocks of rendered terminal text.

Widths are counted in terminal cells, not bytes or code points, so
box-drawing glyphs, CJK and emoji pad correctly next to ASCII.
"""

import io
from dataclasses import dataclass
from typing import Tuple

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

TAB_SIZE = 8

_HTML_FORMAT = (
    '<pre class="tfx-block" style="font-family: \'JetBrains Mono\', '
    "'IBM Plex Mono', 'Consolas', monospace; line-height: 1.2;\">{code}</pre>"
)


def expand_tabs(line: str) -> str:
    """Replace tabs with spaces up to the next ``TAB_SIZE`` cell stop.

    Stops are counted in cells of visible text, so wide glyphs and escape
    codes in styled lines do not shift them.
    """
    if "\t" not in line:
        return line
    if "\x1b" not in line:
        text = Text(line, end="")
        text.expand_tabs(TAB_SIZE)
        return text.plain
    text = Text.from_ansi(line, end="")
    text.expand_tabs(TAB_SIZE)
    console = Console(
        file=io.StringIO(),
        width=max(text.cell_len, 1),
        color_system="truecolor",
        force_terminal=True,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def visual_width(line: str) -> int:
    """Number of terminal cells a single line occupies (ANSI codes ignored)."""
    if "\x1b" in line:
        line = Text.from_ansi(line).plain
    return cell_len(expand_tabs(line))


def measure(text: str) -> Tuple[int, int]:
    """Return ``(width, height)`` of a rendered string.

    The empty string measures ``(0, 0)``.
    """
    if not text:
        return 0, 0
    lines = text.split("\n")
    return max(visual_width(line) for line in lines), len(lines)


def pad_line(line: str, width: int, align: str = "left") -> str:
    """Pad ``line`` with spaces to ``width`` cells.

    Lines already at least ``width`` cells wide are returned unchanged.
    ``align`` is one of "left", "center" or "right"; centering puts the
    odd cell on the right.
    """
    short = width - visual_width(line)
    if short <= 0:
        return line
    if align == "right":
        return " " * short + line
    if align == "center":
        left = short // 2
        return " " * left + line + " " * (short - left)
    return line + " " * short


@dataclass(frozen=True)
class RenderedBlock:
    """An immutable rectangle of display lines."""

    lines: Tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "RenderedBlock":
        """Split ``text`` into lines, expanding tabs so padding stays exact."""
        if not text:
            return cls()
        return cls(tuple(expand_tabs(line) for line in text.split("\n")))

    @classmethod
    def blank(cls, width: int, height: int) -> "RenderedBlock":
        """A block of ``height`` lines, each ``width`` spaces."""
        return cls(tuple(" " * max(width, 0) for _ in range(max(height, 0))))

    @property
    def width(self) -> int:
        return max((visual_width(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)

    def size(self, direction) -> int:
        """Extent along ``direction``'s main axis."""
        return direction.main_size(self)

    def cross_size(self, direction) -> int:
        """Extent along ``direction``'s cross axis."""
        return direction.cross_size(self)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def __str__(self) -> str:
        return self.text

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_html()

    def to_html(self) -> str:
        """Render the block, styles included, as an HTML ``<pre>`` element."""
        console = Console(
            record=True,
            file=io.StringIO(),
            width=max(self.width, 1),
            color_system="truecolor",
            force_terminal=True,
        )
        for line in self.lines:
            console.print(Text.from_ansi(line), soft_wrap=True)
        return console.export_html(inline_styles=True, code_format=_HTML_FORMAT)

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import HTML
        from IPython.display import display as ipy_display

        ipy_display(HTML(self.to_html()))
