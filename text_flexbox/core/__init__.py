"""Core data model for text layouts."""

from text_flexbox.core.block import RenderedBlock, expand_tabs, measure, pad_line, visual_width
from text_flexbox.core.layout_spec import (
    LAYOUT_SPEC_SCHEMA,
    Align,
    Direction,
    GapPlan,
    Justify,
    LayoutSpec,
)

__all__ = [
    "RenderedBlock",
    "measure",
    "visual_width",
    "expand_tabs",
    "pad_line",
    "Direction",
    "Justify",
    "Align",
    "GapPlan",
    "LayoutSpec",
    "LAYOUT_SPEC_SCHEMA",
]
