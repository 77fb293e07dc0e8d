"""Composition of aligned blocks into one block along the main axis."""

import logging
from typing import List, Optional, Sequence

from text_flexbox.core.block import RenderedBlock, pad_line, visual_width
from text_flexbox.core.layout_spec import Direction, GapPlan, LayoutSpec
from text_flexbox.layouts.cross_axis import align_cross
from text_flexbox.layouts.distribute import distribute, natural_size
from text_flexbox.styles.theme import StyleLike, Theme, apply_style

logger = logging.getLogger(__name__)


def divider_thickness(direction: Direction, divider_char: str) -> int:
    """Main-axis space one divider occupies."""
    if direction is Direction.COLUMN:
        return 1
    return max(visual_width(divider_char), 1)


def compose(
    blocks: Sequence[RenderedBlock],
    plan: GapPlan,
    direction: Direction = Direction.ROW,
    divider: bool = False,
    divider_char: Optional[str] = None,
    divider_style: StyleLike = None,
) -> RenderedBlock:
    """Join cross-aligned blocks using the spacing in ``plan``.

    Parameters
    ----------
    blocks : Sequence[RenderedBlock]
        Blocks in order, already aligned on the cross axis.
    plan : GapPlan
        Gaps and edge padding from ``distribute``.
    direction : Direction
        ROW joins side by side, COLUMN stacks top to bottom.
    divider : bool
        Draw ``divider_char`` in the middle of every gap.
    divider_char : str, optional
        Divider glyph; defaults by direction.
    divider_style : Style or str, optional
        Style applied to the divider glyphs only.
    """
    blocks = list(blocks)
    if not blocks:
        return RenderedBlock()
    if len(blocks) == 1 and not plan.leading and not plan.trailing:
        return blocks[0]

    direction = Direction.coerce(direction)
    glyph = divider_char or direction.default_divider_char
    if not divider or len(blocks) < 2:
        glyph = None
    gaps = [plan.gaps[i] if i < len(plan.gaps) else 0 for i in range(len(blocks) - 1)]

    if direction is Direction.COLUMN:
        return _compose_column(blocks, gaps, plan, glyph, divider_style)
    return _compose_row(blocks, gaps, plan, glyph, divider_style)


def _compose_row(
    blocks: List[RenderedBlock],
    gaps: List[int],
    plan: GapPlan,
    glyph: Optional[str],
    style: StyleLike,
) -> RenderedBlock:
    height = max(block.height for block in blocks)
    widths = [block.width for block in blocks]
    separators = []
    for gap in gaps:
        if glyph is None:
            separators.append(" " * gap)
        else:
            before = gap // 2
            drawn = apply_style(pad_line(glyph, divider_thickness(Direction.ROW, glyph)), style)
            separators.append(" " * before + drawn + " " * (gap - before))

    rows = []
    for y in range(height):
        parts = [" " * plan.leading]
        for i, block in enumerate(blocks):
            line = block.lines[y] if y < block.height else ""
            parts.append(pad_line(line, widths[i]))
            if i < len(separators):
                parts.append(separators[i])
        parts.append(" " * plan.trailing)
        rows.append("".join(parts))
    return RenderedBlock(tuple(rows))


def _compose_column(
    blocks: List[RenderedBlock],
    gaps: List[int],
    plan: GapPlan,
    glyph: Optional[str],
    style: StyleLike,
) -> RenderedBlock:
    width = max(block.width for block in blocks)
    blank = " " * width
    rule = None
    if glyph is not None:
        count = width // max(visual_width(glyph), 1)
        rule = apply_style(pad_line(glyph * count, width), style)

    lines = [blank] * plan.leading
    for i, block in enumerate(blocks):
        lines.extend(pad_line(line, width) for line in block.lines)
        if i < len(gaps):
            gap = gaps[i]
            if rule is None:
                lines.extend([blank] * gap)
            else:
                before = gap // 2
                lines.extend([blank] * before + [rule] + [blank] * (gap - before))
    lines.extend([blank] * plan.trailing)
    return RenderedBlock(tuple(lines))


def layout(spec: LayoutSpec, theme: Optional[Theme] = None) -> RenderedBlock:
    """Run a full layout pass: align, distribute, compose.

    Parameters
    ----------
    spec : LayoutSpec
        Items and layout options.
    theme : Theme, optional
        Colors for dividers. Dividers are left unstyled without a theme.

    Returns
    -------
    RenderedBlock
        The composed block. With an explicit ``container_main_size`` at
        least the natural size, its main-axis size equals that value.
    """
    blocks = spec.items
    if not blocks:
        return RenderedBlock()

    direction = spec.direction
    target = max(max(direction.cross_size(block) for block in blocks), spec.container_cross_size)
    aligned = [align_cross(block, target, spec.align, direction) for block in blocks]
    sizes = [direction.main_size(block) for block in aligned]

    glyph = spec.resolved_divider_char
    reserved = 0
    if spec.divider and len(aligned) > 1:
        reserved = divider_thickness(direction, glyph) * (len(aligned) - 1)

    if spec.container_main_size:
        container = max(spec.container_main_size - reserved, 0)
    else:
        container = natural_size(sizes, spec.gap)

    plan = distribute(sizes, container, spec.justify, spec.gap)
    logger.debug(
        "Layout %s of %d items: container=%d justify=%s plan=%s",
        direction.value,
        len(aligned),
        container,
        spec.justify.value,
        plan,
    )
    return compose(
        aligned,
        plan,
        direction,
        divider=spec.divider,
        divider_char=glyph,
        divider_style=theme.divider_style if theme else None,
    )
