"""
Design document types for framesync IR.

A DesignNode is one element of the externally authored design document.
Field names follow Python conventions; the design tool's camelCase keys are
accepted as aliases so exported JSON validates directly.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .geometry import Vector2


class NodeType(StrEnum):
    """Kinds of design nodes exported by the design tool."""

    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    GROUP = "GROUP"
    SECTION = "SECTION"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    VECTOR = "VECTOR"
    TEXT = "TEXT"


class LayoutMode(StrEnum):
    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class LayoutWrap(StrEnum):
    NO_WRAP = "NO_WRAP"
    WRAP = "WRAP"


class PrimaryAxisAlignItems(StrEnum):
    MIN = "MIN"
    CENTER = "CENTER"
    MAX = "MAX"
    SPACE_BETWEEN = "SPACE_BETWEEN"


class CounterAxisAlignItems(StrEnum):
    MIN = "MIN"
    CENTER = "CENTER"
    MAX = "MAX"
    BASELINE = "BASELINE"


class OverflowDirection(StrEnum):
    NONE = "NONE"
    HORIZONTAL_SCROLLING = "HORIZONTAL_SCROLLING"
    VERTICAL_SCROLLING = "VERTICAL_SCROLLING"
    HORIZONTAL_AND_VERTICAL_SCROLLING = "HORIZONTAL_AND_VERTICAL_SCROLLING"


# Node types that can host a scroll view when overflow is enabled
SCROLLABLE_NODE_TYPES = frozenset({NodeType.FRAME})


class DesignNode(BaseModel):
    """
    One element of the design document.

    Attributes:
        id: Design tool node identifier
        name: Node name, used to name generated runtime objects
        type: Node kind
        layout_mode: Auto-layout direction (NONE disables auto-layout)
        layout_wrap: Whether children wrap onto new rows
        primary_axis_align_items: Alignment along the layout direction
        counter_axis_align_items: Alignment across the layout direction
        item_spacing: Gap between children
        padding_left/right/top/bottom: Inner padding
        overflow_direction: Scroll behaviour of the frame
        clips_content: Whether content outside the frame is clipped
        size: Authored width/height
        children: Ordered child nodes
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    name: str = ""
    type: NodeType = NodeType.FRAME
    layout_mode: LayoutMode = LayoutMode.NONE
    layout_wrap: LayoutWrap = LayoutWrap.NO_WRAP
    primary_axis_align_items: PrimaryAxisAlignItems = PrimaryAxisAlignItems.MIN
    counter_axis_align_items: CounterAxisAlignItems = CounterAxisAlignItems.MIN
    item_spacing: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    overflow_direction: OverflowDirection = OverflowDirection.NONE
    clips_content: bool = False
    size: Vector2 = Field(default_factory=Vector2)
    children: list[DesignNode] = Field(default_factory=list)

    @property
    def is_scrollable(self) -> bool:
        """True when this node needs a scroll view."""
        return (
            self.type in SCROLLABLE_NODE_TYPES
            and self.overflow_direction != OverflowDirection.NONE
        )


__all__ = [
    "CounterAxisAlignItems",
    "DesignNode",
    "LayoutMode",
    "LayoutWrap",
    "NodeType",
    "OverflowDirection",
    "PrimaryAxisAlignItems",
    "SCROLLABLE_NODE_TYPES",
]
