"""
Child alignment mapping.

The design tool describes alignment per axis (primary = layout direction,
counter = across it). The runtime uses a single anchor point. Primary axis
maps to the horizontal component, counter axis to the vertical component.
"""

from framesync.core.errors import UnsupportedLayoutConfigurationError
from framesync.core.ir import CounterAxisAlignItems, PrimaryAxisAlignItems, TextAnchor

ALIGNMENT_TABLE: dict[PrimaryAxisAlignItems, dict[CounterAxisAlignItems, TextAnchor]] = {
    PrimaryAxisAlignItems.MIN: {
        CounterAxisAlignItems.MIN: TextAnchor.UPPER_LEFT,
        CounterAxisAlignItems.CENTER: TextAnchor.MIDDLE_LEFT,
        CounterAxisAlignItems.MAX: TextAnchor.LOWER_LEFT,
    },
    PrimaryAxisAlignItems.CENTER: {
        CounterAxisAlignItems.MIN: TextAnchor.UPPER_CENTER,
        CounterAxisAlignItems.CENTER: TextAnchor.MIDDLE_CENTER,
        CounterAxisAlignItems.MAX: TextAnchor.LOWER_CENTER,
    },
    PrimaryAxisAlignItems.MAX: {
        CounterAxisAlignItems.MIN: TextAnchor.UPPER_RIGHT,
        CounterAxisAlignItems.CENTER: TextAnchor.MIDDLE_RIGHT,
        CounterAxisAlignItems.MAX: TextAnchor.LOWER_RIGHT,
    },
}


def resolve_child_alignment(
    primary: PrimaryAxisAlignItems,
    counter: CounterAxisAlignItems,
    current: TextAnchor,
    node_name: str | None = None,
) -> TextAnchor:
    """
    Combine per-axis alignment into a single anchor.

    Args:
        primary: Alignment along the layout direction
        counter: Alignment across the layout direction
        current: Anchor kept when ``counter`` has no mapping (e.g. BASELINE)
        node_name: Design node name reported in errors

    Returns:
        The anchor to assign to the layout group

    Raises:
        UnsupportedLayoutConfigurationError: If ``primary`` is not MIN, CENTER or MAX
    """
    row = ALIGNMENT_TABLE.get(primary)
    if row is None:
        raise UnsupportedLayoutConfigurationError(
            f"Unsupported primary axis alignment: {primary}", node=node_name
        )
    return row.get(counter, current)


__all__ = ["ALIGNMENT_TABLE", "resolve_child_alignment"]
