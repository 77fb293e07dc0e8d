"""Layout components for terminal text: Flex, HStack, VStack, Center and Spacer."""

from typing import Any, Iterable, List, Optional, Protocol, Union, runtime_checkable

from text_flexbox.core.block import RenderedBlock
from text_flexbox.core.layout_spec import Align, Direction, Justify, LayoutSpec, clamp_size
from text_flexbox.layouts.compose import divider_thickness, layout
from text_flexbox.layouts.distribute import natural_size
from text_flexbox.styles.theme import (
    DEFAULT_HSTACK_DIVIDER_CHAR,
    DEFAULT_STACK_SPACING,
    DEFAULT_VSTACK_DIVIDER_CHAR,
    StyleLike,
    Theme,
    apply_style,
)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders itself to a display string."""

    def render(self) -> str: ...


Item = Union[str, RenderedBlock, Renderable, None]


def _check_item(item: Any) -> None:
    if item is None or isinstance(item, (str, RenderedBlock, Renderable)):
        return
    raise TypeError(f"Cannot lay out item of type {type(item).__name__}")


def to_block(item: Item) -> RenderedBlock:
    """Reduce a layout item to a measured block."""
    if item is None:
        return RenderedBlock()
    if isinstance(item, RenderedBlock):
        return item
    if isinstance(item, str):
        return RenderedBlock.from_text(item)
    return RenderedBlock.from_text(item.render())


class _Displayable:
    """Mixin giving components string, Jupyter and IPython output."""

    def to_block(self) -> RenderedBlock:
        raise NotImplementedError

    def render(self) -> str:
        """Render to a ``\\n``-separated string with no trailing newline."""
        return self.to_block().text

    def __str__(self) -> str:
        return self.render()

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_block().to_html()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        self.to_block().display()


class Spacer(_Displayable):
    """Blank space between items.

    Parameters
    ----------
    width : int
        Fixed width in cells.
    height : int
        Fixed height in lines.
    flex : bool
        Grow to absorb leftover main-axis space when the enclosing layout
        has a fixed size. Flexible spacers share the space evenly.
    """

    def __init__(self, width: int = 0, height: int = 0, flex: bool = False) -> None:
        self.width = clamp_size("width", width)
        self.height = clamp_size("height", height)
        self.flex = flex

    def to_block(self) -> RenderedBlock:
        # a width-only spacer is one line tall so rows can measure it
        height = self.height or (1 if self.width else 0)
        return RenderedBlock.blank(self.width, height)

    def grown(self, extra: int, direction: Direction) -> RenderedBlock:
        """Block for this spacer with ``extra`` added along ``direction``."""
        if direction is Direction.COLUMN:
            return RenderedBlock.blank(self.width, self.height + extra)
        return RenderedBlock.blank(self.width + extra, max(self.height, 1))


class Flex(_Displayable):
    """Flexbox-style container arranging items in a row or a column.

    Parameters
    ----------
    items : Iterable[Item]
        Children: strings, RenderedBlocks, or objects with ``render()``.
        ``None`` entries are skipped. A bare string or RenderedBlock is one
        child, not a sequence of children.
    direction : Direction or str
        "row" (default) or "column".
    justify : Justify or str
        Main-axis distribution: "start" (default), "center", "end",
        "space-between", "space-around", "space-evenly".
    align : Align or str
        Cross-axis alignment: "start" (default), "center", "end", "stretch".
    gap : int
        Explicit spacing between items.
    width, height : int
        Fixed container size; 0 means auto. The main-axis value drives
        justify, the cross-axis value is a minimum.
    divider : bool
        Draw a divider between adjacent items.
    divider_char : str, optional
        Divider glyph; "│" for rows and "─" for columns by default.
    style : Style or str, optional
        Override style applied to the composed output.
    theme : Theme, optional
        Colors for dividers.

    Examples
    --------
    >>> print(Flex(["A", "B"], justify="space-between", width=5))
    A   B
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        direction: Union[Direction, str] = Direction.ROW,
        justify: Union[Justify, str] = Justify.START,
        align: Union[Align, str] = Align.START,
        gap: int = 0,
        width: int = 0,
        height: int = 0,
        divider: bool = False,
        divider_char: Optional[str] = None,
        style: StyleLike = None,
        theme: Optional[Theme] = None,
    ) -> None:
        if isinstance(items, (str, RenderedBlock)):
            items = [items]
        self.items: List[Item] = list(items or [])
        for item in self.items:
            _check_item(item)
        self.direction = Direction.coerce(direction)
        self.justify = Justify.coerce(justify)
        self.align = Align.coerce(align)
        self.gap = clamp_size("gap", gap)
        self.width = clamp_size("width", width)
        self.height = clamp_size("height", height)
        self.divider = divider
        self.divider_char = divider_char
        self.style = style
        self.theme = theme

    @property
    def main_size(self) -> int:
        return self.width if self.direction is Direction.ROW else self.height

    @property
    def cross_size(self) -> int:
        return self.height if self.direction is Direction.ROW else self.width

    def to_spec(self) -> LayoutSpec:
        """Render children and build the LayoutSpec for one layout pass."""
        present = [item for item in self.items if item is not None]
        blocks = [to_block(item) for item in present]
        spec = LayoutSpec(
            items=blocks,
            direction=self.direction,
            justify=self.justify,
            align=self.align,
            gap=self.gap,
            container_main_size=self.main_size,
            container_cross_size=self.cross_size,
            divider=self.divider,
            divider_char=self.divider_char,
        )
        spec.items = self._grow_spacers(present, spec)
        return spec

    def _grow_spacers(self, present: List[Item], spec: LayoutSpec) -> List[RenderedBlock]:
        blocks = list(spec.items)
        flexible = [i for i, item in enumerate(present) if isinstance(item, Spacer) and item.flex]
        if not flexible or not spec.container_main_size:
            return blocks

        used = natural_size(spec.item_sizes, spec.gap)
        if spec.divider and len(blocks) > 1:
            used += divider_thickness(spec.direction, spec.resolved_divider_char) * (len(blocks) - 1)
        leftover = spec.container_main_size - used
        if leftover <= 0:
            return blocks

        share, remainder = divmod(leftover, len(flexible))
        for n, index in enumerate(flexible):
            extra = share + (1 if n < remainder else 0)
            blocks[index] = present[index].grown(extra, spec.direction)
        return blocks

    def to_block(self) -> RenderedBlock:
        block = layout(self.to_spec(), self.theme)
        if self.style is None or block.is_empty():
            return block
        return RenderedBlock.from_text(apply_style(block.text, self.style))


class HStack(Flex):
    """Row of items with uniform spacing.

    Parameters
    ----------
    items : Iterable[Item]
        Children, left to right.
    spacing : int
        Cells between items (default 1).
    divider_char : str
        Divider glyph (default "│").
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        spacing: int = DEFAULT_STACK_SPACING,
        justify: Union[Justify, str] = Justify.START,
        align: Union[Align, str] = Align.START,
        width: int = 0,
        height: int = 0,
        divider: bool = False,
        divider_char: str = DEFAULT_HSTACK_DIVIDER_CHAR,
        style: StyleLike = None,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(
            items,
            direction=Direction.ROW,
            justify=justify,
            align=align,
            gap=spacing,
            width=width,
            height=height,
            divider=divider,
            divider_char=divider_char,
            style=style,
            theme=theme,
        )

    @property
    def spacing(self) -> int:
        return self.gap


class VStack(Flex):
    """Column of items with uniform spacing.

    Parameters
    ----------
    items : Iterable[Item]
        Children, top to bottom.
    spacing : int
        Lines between items (default 1).
    divider_char : str
        Divider glyph (default "─").
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        spacing: int = DEFAULT_STACK_SPACING,
        justify: Union[Justify, str] = Justify.START,
        align: Union[Align, str] = Align.START,
        width: int = 0,
        height: int = 0,
        divider: bool = False,
        divider_char: str = DEFAULT_VSTACK_DIVIDER_CHAR,
        style: StyleLike = None,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(
            items,
            direction=Direction.COLUMN,
            justify=justify,
            align=align,
            gap=spacing,
            width=width,
            height=height,
            divider=divider,
            divider_char=divider_char,
            style=style,
            theme=theme,
        )

    @property
    def spacing(self) -> int:
        return self.gap


class Center(_Displayable):
    """Center a child inside a fixed-size box.

    With neither ``horizontal`` nor ``vertical`` set, both apply. A size of
    0 shrinks that axis to the child.
    """

    def __init__(
        self,
        child: Item = None,
        width: int = 0,
        height: int = 0,
        horizontal: bool = False,
        vertical: bool = False,
        style: StyleLike = None,
    ) -> None:
        _check_item(child)
        self.child = child
        self.width = clamp_size("width", width)
        self.height = clamp_size("height", height)
        if not horizontal and not vertical:
            horizontal = vertical = True
        self.horizontal = horizontal
        self.vertical = vertical
        self.style = style

    def to_block(self) -> RenderedBlock:
        if self.child is None:
            block = RenderedBlock.blank(self.width, self.height)
        else:
            block = Flex(
                [self.child],
                direction=Direction.ROW,
                justify=Justify.CENTER if self.horizontal else Justify.START,
                align=Align.CENTER if self.vertical else Align.START,
                width=self.width,
                height=self.height,
            ).to_block()
        if self.style is None or block.is_empty():
            return block
        return RenderedBlock.from_text(apply_style(block.text, self.style))
