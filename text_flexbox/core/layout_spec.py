"""
Layout data structures for flexbox-style text composition.

These dataclasses describe one layout pass: the measured items, the
axis and alignment modes, and the space plan computed along the main axis.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema

from text_flexbox.core.block import RenderedBlock
from text_flexbox.styles.theme import DEFAULT_HSTACK_DIVIDER_CHAR, DEFAULT_VSTACK_DIVIDER_CHAR

logger = logging.getLogger(__name__)


class _LayoutEnum(Enum):
    """Enum whose first member is the fallback for unrecognized values."""

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Resolve a member or its string value; unknown values fall back to the default."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == key:
                    return member
        default = next(iter(cls))
        logger.warning("Unknown %s %r, falling back to %s", cls.__name__, value, default.value)
        return default


class Direction(_LayoutEnum):
    """Main axis of a layout."""

    ROW = "row"
    COLUMN = "column"

    def main_size(self, block: RenderedBlock) -> int:
        return block.width if self is Direction.ROW else block.height

    def cross_size(self, block: RenderedBlock) -> int:
        return block.height if self is Direction.ROW else block.width

    @property
    def default_divider_char(self) -> str:
        if self is Direction.ROW:
            return DEFAULT_HSTACK_DIVIDER_CHAR
        return DEFAULT_VSTACK_DIVIDER_CHAR


class Justify(_LayoutEnum):
    """Distribution of leftover main-axis space."""

    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class Align(_LayoutEnum):
    """Placement of each item along the cross axis."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


def clamp_size(name: str, value: Any) -> int:
    """Coerce a gap or size to a non-negative int, 0 when malformed."""
    if value is None:
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("Malformed %s %r, using 0", name, value)
        return 0
    if number < 0:
        logger.warning("Negative %s %d clamped to 0", name, number)
        return 0
    return number


LAYOUT_SPEC_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "LayoutSpec",
    "type": "object",
    "required": ["items"],
    "additionalProperties": False,
    "properties": {
        "items": {"type": "array", "items": {"type": "string"}},
        "direction": {"enum": [d.value for d in Direction]},
        "justify": {"enum": [j.value for j in Justify]},
        "align": {"enum": [a.value for a in Align]},
        "gap": {"type": "integer", "minimum": 0},
        "container_main_size": {"type": "integer", "minimum": 0},
        "container_cross_size": {"type": "integer", "minimum": 0},
        "divider": {"type": "boolean"},
        "divider_char": {"type": ["string", "null"], "minLength": 1},
    },
}


@dataclass(frozen=True)
class GapPlan:
    """Main-axis spacing for one layout pass.

    Attributes
    ----------
    gaps : Tuple[int, ...]
        Space between consecutive items (one fewer than the item count).
    leading : int
        Space before the first item.
    trailing : int
        Space after the last item.
    """

    gaps: Tuple[int, ...] = ()
    leading: int = 0
    trailing: int = 0

    @property
    def total(self) -> int:
        return self.leading + sum(self.gaps) + self.trailing


@dataclass
class LayoutSpec:
    """Everything one layout pass needs.

    Attributes
    ----------
    items : List[RenderedBlock]
        Blocks in main-axis order. Strings are converted, ``None`` dropped.
    direction : Direction
        Main axis.
    justify : Justify
        Main-axis distribution of leftover space.
    align : Align
        Cross-axis placement of each block.
    gap : int
        Explicit spacing between items (cells for rows, lines for columns).
    container_main_size : int
        Fixed main-axis size; 0 means the natural size.
    container_cross_size : int
        Minimum cross-axis size; 0 means the tallest/widest item.
    divider : bool
        Draw a divider between adjacent items.
    divider_char : str, optional
        Divider glyph; defaults by direction.
    """

    items: List[RenderedBlock] = field(default_factory=list)
    direction: Direction = Direction.ROW
    justify: Justify = Justify.START
    align: Align = Align.START
    gap: int = 0
    container_main_size: int = 0
    container_cross_size: int = 0
    divider: bool = False
    divider_char: Optional[str] = None

    def __post_init__(self) -> None:
        self.items = [
            item if isinstance(item, RenderedBlock) else RenderedBlock.from_text(item)
            for item in self.items
            if item is not None
        ]
        self.direction = Direction.coerce(self.direction)
        self.justify = Justify.coerce(self.justify)
        self.align = Align.coerce(self.align)
        self.gap = clamp_size("gap", self.gap)
        self.container_main_size = clamp_size("container_main_size", self.container_main_size)
        self.container_cross_size = clamp_size("container_cross_size", self.container_cross_size)
        self.divider = bool(self.divider)

    @property
    def resolved_divider_char(self) -> str:
        return self.divider_char or self.direction.default_divider_char

    @property
    def item_sizes(self) -> List[int]:
        return [self.direction.main_size(item) for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.text for item in self.items],
            "direction": self.direction.value,
            "justify": self.justify.value,
            "align": self.align.value,
            "gap": self.gap,
            "container_main_size": self.container_main_size,
            "container_cross_size": self.container_cross_size,
            "divider": self.divider,
            "divider_char": self.divider_char,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], validate: bool = False) -> "LayoutSpec":
        """Build a spec from a dict.

        Parameters
        ----------
        data : dict
            Serialized spec, as produced by ``to_dict``.
        validate : bool
            If True, check ``data`` against ``LAYOUT_SPEC_SCHEMA`` first and
            raise ``jsonschema.ValidationError`` on failure.
        """
        if validate:
            jsonschema.validate(data, LAYOUT_SPEC_SCHEMA)
        return cls(
            items=list(data["items"]),
            direction=data.get("direction", Direction.ROW),
            justify=data.get("justify", Justify.START),
            align=data.get("align", Align.START),
            gap=data.get("gap", 0),
            container_main_size=data.get("container_main_size", 0),
            container_cross_size=data.get("container_cross_size", 0),
            divider=data.get("divider", False),
            divider_char=data.get("divider_char"),
        )

    def validate(self, strict: bool = False) -> bool:
        """Validate the serialized spec against the JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise ValidationError on failure.
            If False, return bool.
        """
        try:
            jsonschema.validate(self.to_dict(), LAYOUT_SPEC_SCHEMA)
            return True
        except jsonschema.ValidationError:
            if strict:
                raise
            return False

    def to_json(self, path: Union[str, Path]) -> None:
        """Save spec to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, path: Union[str, Path], validate: bool = False) -> "LayoutSpec":
        """Load spec from JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f), validate=validate)
