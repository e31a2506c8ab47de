"""
framesync Layout Translation Engine.

Maps design-tool auto-layout onto runtime layout components.

Key components:
- Layout application per node (translator.py)
- Per-axis alignment to anchor mapping (alignment.py)
"""

from framesync.ui.layout_engine.alignment import ALIGNMENT_TABLE, resolve_child_alignment
from framesync.ui.layout_engine.translator import (
    SCROLL_CONTENT_SUFFIX,
    LayoutSettings,
    apply_layout,
    apply_layout_tree,
    default_object_factory,
)

__all__ = [
    # Core functions
    "apply_layout",
    "apply_layout_tree",
    "default_object_factory",
    # Alignment
    "ALIGNMENT_TABLE",
    "resolve_child_alignment",
    # Types and constants
    "LayoutSettings",
    "SCROLL_CONTENT_SUFFIX",
]
