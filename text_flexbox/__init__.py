"""
Text Flexbox: flexbox-style layout of multi-line terminal text blocks.
"""

__version__ = "0.1.0"

from text_flexbox.core.block import RenderedBlock, measure
from text_flexbox.core.flex import Center, Flex, HStack, Renderable, Spacer, VStack
from text_flexbox.core.layout_spec import Align, Direction, GapPlan, Justify, LayoutSpec
from text_flexbox.layouts.compose import compose, layout
from text_flexbox.layouts.cross_axis import align_cross
from text_flexbox.layouts.distribute import distribute
from text_flexbox.styles.theme import DEFAULT_THEME, Theme


def hstack(*items, **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to render items side by side."""
    return HStack(items, **kwargs).render()


def vstack(*items, **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to render items top to bottom."""
    return VStack(items, **kwargs).render()


__all__ = [
    "RenderedBlock",
    "measure",
    "Direction",
    "Justify",
    "Align",
    "GapPlan",
    "LayoutSpec",
    "Flex",
    "HStack",
    "VStack",
    "Center",
    "Spacer",
    "Renderable",
    "Theme",
    "DEFAULT_THEME",
    "align_cross",
    "distribute",
    "compose",
    "layout",
    "hstack",
    "vstack",
    "__version__",
]
