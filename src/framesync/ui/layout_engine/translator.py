"""
Layout translation.

Maps a design node's auto-layout description onto runtime layout components:
scroll views for overflowing frames, box or grid layout groups, child
alignment and padding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from framesync.core.ir import (
    TOP_LEFT,
    ZERO,
    ContentSizeFitter,
    DesignNode,
    FitMode,
    GridLayoutGroup,
    HorizontalLayoutGroup,
    HorizontalOrVerticalLayoutGroup,
    LayoutGroup,
    LayoutMode,
    LayoutWrap,
    OverflowDirection,
    RectMask2D,
    RectOffset,
    RuntimeObject,
    ScrollRect,
    Vector2,
    VerticalLayoutGroup,
)
from framesync.ui.layout_engine.alignment import resolve_child_alignment

logger = logging.getLogger(__name__)

SCROLL_CONTENT_SUFFIX = "_ScrollContent"

HORIZONTAL_OVERFLOW = frozenset(
    {
        OverflowDirection.HORIZONTAL_SCROLLING,
        OverflowDirection.HORIZONTAL_AND_VERTICAL_SCROLLING,
    }
)
VERTICAL_OVERFLOW = frozenset(
    {
        OverflowDirection.VERTICAL_SCROLLING,
        OverflowDirection.HORIZONTAL_AND_VERTICAL_SCROLLING,
    }
)


class LayoutSettings(Protocol):
    enable_auto_layout: bool


def apply_layout(
    node: DesignNode, host: RuntimeObject, settings: LayoutSettings
) -> RuntimeObject | None:
    """
    Apply a design node's layout properties to a runtime object.

    Steps:
    1. Scroll view setup when the node is a scrolling frame
    2. Layout group selection (vertical, horizontal or grid)
    3. Child alignment
    4. Padding

    Args:
        node: Design node to translate (never modified)
        host: Runtime object generated for ``node``
        settings: Import settings; layout groups are skipped when
            ``enable_auto_layout`` is false

    Returns:
        The generated scroll content holder, or None when the node does not
        scroll. When returned, the node's children belong under it.

    Raises:
        UnsupportedLayoutConfigurationError: If the primary axis alignment
            has no anchor mapping
    """
    target = host
    content = None

    # Step 1: scrolling
    if node.is_scrollable:
        content = _build_scroll_view(node, host)
        target = content

    # Step 2: layout group
    if node.layout_mode == LayoutMode.NONE or not settings.enable_auto_layout:
        return content

    for existing in target.get_components(LayoutGroup):
        target.remove_component(existing)

    layout_group: LayoutGroup
    if node.layout_mode == LayoutMode.VERTICAL and node.layout_wrap == LayoutWrap.NO_WRAP:
        layout_group = target.add_component(VerticalLayoutGroup)  # type: ignore[assignment]
    elif node.layout_mode == LayoutMode.HORIZONTAL and node.layout_wrap == LayoutWrap.NO_WRAP:
        layout_group = target.add_component(HorizontalLayoutGroup)  # type: ignore[assignment]
    elif node.layout_wrap == LayoutWrap.WRAP:
        layout_group = target.add_component(GridLayoutGroup)  # type: ignore[assignment]
    else:
        logger.warning(
            "Unresolved layout for %s: mode=%s wrap=%s, no layout group attached",
            node.name,
            node.layout_mode,
            node.layout_wrap,
        )
        return content

    if isinstance(layout_group, HorizontalOrVerticalLayoutGroup):
        # The group sizes its children instead of letting them stretch
        layout_group.child_control_width = True
        layout_group.child_control_height = True
        layout_group.child_force_expand_width = False
        layout_group.child_force_expand_height = False
        layout_group.spacing = node.item_spacing
    elif isinstance(layout_group, GridLayoutGroup):
        layout_group.spacing = Vector2(x=node.item_spacing, y=node.item_spacing)
        if node.children:
            layout_group.cell_size = node.children[0].size

    # Step 3: alignment
    layout_group.child_alignment = resolve_child_alignment(
        node.primary_axis_align_items,
        node.counter_axis_align_items,
        current=layout_group.child_alignment,
        node_name=node.name,
    )

    # Step 4: padding (round() matches the runtime's half-to-even rounding)
    layout_group.padding = RectOffset(
        left=round(node.padding_left),
        right=round(node.padding_right),
        top=round(node.padding_top),
        bottom=round(node.padding_bottom),
    )

    logger.debug(
        "Applied %s to %s (spacing=%s, alignment=%s)",
        layout_group.kind,
        target.name,
        node.item_spacing,
        layout_group.child_alignment,
    )
    return content


def _build_scroll_view(node: DesignNode, host: RuntimeObject) -> RuntimeObject:
    """Attach scroll behaviour to ``host`` and create its content holder."""
    if node.clips_content:
        host.get_or_add_component(RectMask2D)

    content = RuntimeObject(name=f"{node.name}{SCROLL_CONTENT_SUFFIX}")
    transform = content.rect_transform
    transform.pivot = TOP_LEFT
    transform.anchor_min = TOP_LEFT
    transform.anchor_max = TOP_LEFT
    transform.anchored_position = ZERO
    content.set_parent(host)

    scroll_rect = host.get_or_add_component(ScrollRect)
    scroll_rect.content = content.name
    scroll_rect.horizontal = node.overflow_direction in HORIZONTAL_OVERFLOW
    scroll_rect.vertical = node.overflow_direction in VERTICAL_OVERFLOW

    # Content grows to its children's natural size even though it is clipped
    if node.layout_mode != LayoutMode.NONE:
        fitter = content.get_or_add_component(ContentSizeFitter)
        fitter.horizontal_fit = FitMode.PREFERRED_SIZE
        fitter.vertical_fit = FitMode.PREFERRED_SIZE

    return content


def default_object_factory(node: DesignNode) -> RuntimeObject:
    """Create a bare runtime object sized like ``node``."""
    obj = RuntimeObject(name=node.name)
    obj.rect_transform.size_delta = node.size
    return obj


def apply_layout_tree(
    node: DesignNode,
    host: RuntimeObject,
    settings: LayoutSettings,
    build_child: Callable[[DesignNode], RuntimeObject] = default_object_factory,
) -> RuntimeObject:
    """
    Generate ``node``'s descendants under ``host`` and lay out every level.

    Children are parented to the scroll content holder when ``apply_layout``
    returns one, otherwise to ``host``.

    Returns:
        ``host``
    """
    parent = apply_layout(node, host, settings) or host
    for child_node in node.children:
        child = build_child(child_node)
        child.set_parent(parent)
        apply_layout_tree(child_node, child, settings, build_child)
    return host


__all__ = [
    "LayoutSettings",
    "SCROLL_CONTENT_SUFFIX",
    "apply_layout",
    "apply_layout_tree",
    "default_object_factory",
]
