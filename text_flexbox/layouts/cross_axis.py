"""Cross-axis alignment (align-items) of a single block."""

from text_flexbox.core.block import RenderedBlock, pad_line
from text_flexbox.core.layout_spec import Align, Direction

_COLUMN_ALIGN = {
    Align.START: "left",
    Align.CENTER: "center",
    Align.END: "right",
    Align.STRETCH: "left",
}


def align_cross(
    block: RenderedBlock,
    target: int,
    align: Align = Align.START,
    direction: Direction = Direction.ROW,
) -> RenderedBlock:
    """Grow ``block`` to ``target`` along the cross axis.

    For rows the cross axis is height: blank lines of the block's width are
    added above and/or below. For columns it is width: every line is padded
    to ``target`` cells. Blocks already at least ``target`` are returned
    unchanged, and the main-axis extent is never altered.
    """
    align = Align.coerce(align)
    direction = Direction.coerce(direction)
    if direction.cross_size(block) >= target:
        return block
    if direction is Direction.COLUMN:
        how = _COLUMN_ALIGN[align]
        return RenderedBlock(tuple(pad_line(line, target, how) for line in block.lines))
    return _align_row(block, target, align)


def _align_row(block: RenderedBlock, target: int, align: Align) -> RenderedBlock:
    width = block.width
    lines = [pad_line(line, width) for line in block.lines]
    blank = " " * width
    diff = target - block.height

    if align is Align.STRETCH:
        # filler lines take the container background when styled
        return RenderedBlock(tuple(lines + [blank] * (target - len(lines))))
    if align is Align.CENTER:
        top = diff // 2
    elif align is Align.END:
        top = diff
    else:
        top = 0
    return RenderedBlock(tuple([blank] * top + lines + [blank] * (diff - top)))
