"""
framesync Internal Representation.

Two halves:
- design: the immutable design document (input)
- scene: the generated runtime hierarchy and its components (output)
"""

from .design import (
    SCROLLABLE_NODE_TYPES,
    CounterAxisAlignItems,
    DesignNode,
    LayoutMode,
    LayoutWrap,
    NodeType,
    OverflowDirection,
    PrimaryAxisAlignItems,
)
from .geometry import TOP_LEFT, ZERO, RectOffset, Vector2
from .scene import (
    CLONE_SUFFIX,
    COMPONENT_REGISTRY,
    OBJECT_KIND,
    Button,
    CanvasGroup,
    Component,
    ComponentKind,
    ContentSizeFitter,
    FitMode,
    GridLayoutGroup,
    HorizontalLayoutGroup,
    HorizontalOrVerticalLayoutGroup,
    Image,
    LayoutElement,
    LayoutGroup,
    MovementType,
    RectMask2D,
    RectTransform,
    RuntimeObject,
    ScrollRect,
    Text,
    TextAnchor,
    VerticalLayoutGroup,
    component_class,
    create_component,
    register_component,
    strip_clone_suffix,
)

__all__ = [
    # Design
    "DesignNode",
    "NodeType",
    "LayoutMode",
    "LayoutWrap",
    "PrimaryAxisAlignItems",
    "CounterAxisAlignItems",
    "OverflowDirection",
    "SCROLLABLE_NODE_TYPES",
    # Geometry
    "Vector2",
    "RectOffset",
    "ZERO",
    "TOP_LEFT",
    # Scene
    "RuntimeObject",
    "Component",
    "ComponentKind",
    "COMPONENT_REGISTRY",
    "OBJECT_KIND",
    "CLONE_SUFFIX",
    "register_component",
    "component_class",
    "create_component",
    "strip_clone_suffix",
    "TextAnchor",
    "FitMode",
    "MovementType",
    # Components
    "RectTransform",
    "RectMask2D",
    "ScrollRect",
    "ContentSizeFitter",
    "LayoutGroup",
    "HorizontalOrVerticalLayoutGroup",
    "VerticalLayoutGroup",
    "HorizontalLayoutGroup",
    "GridLayoutGroup",
    "Image",
    "Text",
    "Button",
    "CanvasGroup",
    "LayoutElement",
]
