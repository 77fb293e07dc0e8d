"""Terminal theme, glyph defaults and style application."""

import io
import logging
from dataclasses import dataclass
from typing import Optional, Union

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

logger = logging.getLogger(__name__)

StyleLike = Union[Style, str, None]

DEFAULT_HSTACK_DIVIDER_CHAR = "\u2502"  # box drawings light vertical
DEFAULT_VSTACK_DIVIDER_CHAR = "\u2500"  # box drawings light horizontal
DEFAULT_STACK_SPACING = 1


@dataclass(frozen=True)
class Theme:
    """Colors used by layout chrome.

    Attributes
    ----------
    muted : str
        Foreground color for dividers.
    background : str, optional
        Background color painted behind dividers.
    """

    muted: str = "#888888"
    background: Optional[str] = None

    @property
    def divider_style(self) -> Style:
        return Style(color=self.muted, bgcolor=self.background)


DEFAULT_THEME = Theme()
DARK_THEME = Theme(muted="#6C6C6C", background="#1C1C1C")
LIGHT_THEME = Theme(muted="#A8A8A8", background="#FFFFFF")
HIGH_CONTRAST_THEME = Theme(muted="#FFFFFF", background="#000000")


def to_style(value: StyleLike) -> Optional[Style]:
    """Normalize a style argument; invalid definitions are ignored."""
    if value is None or isinstance(value, Style):
        return value
    try:
        return Style.parse(value)
    except StyleSyntaxError:
        logger.warning("Ignoring invalid style definition %r", value)
        return None


def apply_style(text: str, style: StyleLike) -> str:
    """Paint ``style`` beneath each line of ``text``.

    Styles already in the line are layered on top, so an inner reset never
    ends the outer style partway through a line. Lines are styled one at a
    time so escape sequences never span a line break.
    """
    resolved = to_style(style)
    if resolved is None or not text:
        return text
    return "\n".join(_stylize_line(line, resolved) for line in text.split("\n"))


def _stylize_line(line: str, style: Style) -> str:
    styled = Text.from_ansi(line, end="")
    styled.stylize_before(style)
    console = Console(
        file=io.StringIO(),
        width=max(styled.cell_len, 1),
        color_system="truecolor",
        force_terminal=True,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(styled, end="", soft_wrap=True)
    return capture.get()
