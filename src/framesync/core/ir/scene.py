"""
Runtime scene graph types for framesync IR.

RuntimeObjects form the generated hierarchy. Each object carries an ordered
list of components; every concrete component class is registered under a
stable string identifier so that hierarchies can be matched, rebuilt and
stored without comparing Python classes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ComponentConflictError, FramesyncError
from .geometry import RectOffset, Vector2

CLONE_SUFFIX = "(Clone)"

# Kind identifier used for structural entries (objects, not components)
OBJECT_KIND = "RuntimeObject"


class ComponentKind(StrEnum):
    """Identifiers of the built-in component kinds."""

    RECT_TRANSFORM = "RectTransform"
    RECT_MASK_2D = "RectMask2D"
    SCROLL_RECT = "ScrollRect"
    CONTENT_SIZE_FITTER = "ContentSizeFitter"
    VERTICAL_LAYOUT_GROUP = "VerticalLayoutGroup"
    HORIZONTAL_LAYOUT_GROUP = "HorizontalLayoutGroup"
    GRID_LAYOUT_GROUP = "GridLayoutGroup"
    IMAGE = "Image"
    TEXT = "Text"
    BUTTON = "Button"
    CANVAS_GROUP = "CanvasGroup"
    LAYOUT_ELEMENT = "LayoutElement"


class TextAnchor(StrEnum):
    """Anchor point used for child alignment inside a layout group."""

    UPPER_LEFT = "UpperLeft"
    UPPER_CENTER = "UpperCenter"
    UPPER_RIGHT = "UpperRight"
    MIDDLE_LEFT = "MiddleLeft"
    MIDDLE_CENTER = "MiddleCenter"
    MIDDLE_RIGHT = "MiddleRight"
    LOWER_LEFT = "LowerLeft"
    LOWER_CENTER = "LowerCenter"
    LOWER_RIGHT = "LowerRight"


class FitMode(StrEnum):
    UNCONSTRAINED = "Unconstrained"
    MIN_SIZE = "MinSize"
    PREFERRED_SIZE = "PreferredSize"


class MovementType(StrEnum):
    UNRESTRICTED = "Unrestricted"
    ELASTIC = "Elastic"
    CLAMPED = "Clamped"


class Component(BaseModel):
    """
    Base class for everything attachable to a RuntimeObject.

    Model fields are the component's serialized state. Assignments are
    validated so a copied value that does not fit the field fails loudly.

    A class that sets ``disallow_multiple`` may appear at most once per object,
    and the restriction covers its subclasses: an object holds one layout
    group of any flavour.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    kind: ClassVar[str] = ""
    disallow_multiple: ClassVar[bool] = False

    @classmethod
    def exclusive_base(cls) -> type[Component] | None:
        """Outermost class declaring ``disallow_multiple``, or None if repeats are allowed."""
        if not cls.disallow_multiple:
            return None
        for base in reversed(cls.__mro__):
            if issubclass(base, Component) and base.__dict__.get("disallow_multiple"):
                return base
        return cls

    def serialized_fields(self) -> list[str]:
        """Names of the fields that make up this component's persisted state."""
        return list(type(self).model_fields)


C = TypeVar("C", bound=Component)

COMPONENT_REGISTRY: dict[str, type[Component]] = {}


def register_component(kind: str) -> Callable[[type[C]], type[C]]:
    """
    Class decorator registering a component class under ``kind``.

    Raises:
        ValueError: If ``kind`` is already registered to another class.
    """

    def decorator(cls: type[C]) -> type[C]:
        existing = COMPONENT_REGISTRY.get(kind)
        if existing is not None and existing is not cls:
            raise ValueError(f"Component kind {kind!r} already registered to {existing.__name__}")
        cls.kind = str(kind)
        COMPONENT_REGISTRY[str(kind)] = cls
        return cls

    return decorator


def component_class(kind: str) -> type[Component]:
    """Look up the class registered for ``kind``."""
    try:
        return COMPONENT_REGISTRY[kind]
    except KeyError:
        raise KeyError(f"Unknown component kind: {kind}") from None


def create_component(kind: str, **values) -> Component:
    """Instantiate a registered component kind."""
    return component_class(kind)(**values)


# =============================================================================
# Built-in components
# =============================================================================


@register_component(ComponentKind.RECT_TRANSFORM)
class RectTransform(Component):
    """Position, size and anchoring of an object within its parent."""

    disallow_multiple = True

    pivot: Vector2 = Field(default_factory=lambda: Vector2(x=0.5, y=0.5))
    anchor_min: Vector2 = Field(default_factory=lambda: Vector2(x=0.5, y=0.5))
    anchor_max: Vector2 = Field(default_factory=lambda: Vector2(x=0.5, y=0.5))
    anchored_position: Vector2 = Field(default_factory=Vector2)
    size_delta: Vector2 = Field(default_factory=lambda: Vector2(x=100.0, y=100.0))


@register_component(ComponentKind.RECT_MASK_2D)
class RectMask2D(Component):
    """Clips children to the object's rectangle."""

    enabled: bool = True
    softness: Vector2 = Field(default_factory=Vector2)


@register_component(ComponentKind.SCROLL_RECT)
class ScrollRect(Component):
    """Scroll view behaviour. ``content`` names the scrolled child object."""

    disallow_multiple = True

    content: str | None = None
    horizontal: bool = True
    vertical: bool = True
    movement_type: MovementType = MovementType.ELASTIC
    inertia: bool = True
    deceleration_rate: float = 0.135
    scroll_sensitivity: float = 1.0


@register_component(ComponentKind.CONTENT_SIZE_FITTER)
class ContentSizeFitter(Component):
    horizontal_fit: FitMode = FitMode.UNCONSTRAINED
    vertical_fit: FitMode = FitMode.UNCONSTRAINED


class LayoutGroup(Component):
    """Common base of the layout group kinds. Not registered itself."""

    disallow_multiple = True

    padding: RectOffset = Field(default_factory=RectOffset)
    child_alignment: TextAnchor = TextAnchor.UPPER_LEFT


class HorizontalOrVerticalLayoutGroup(LayoutGroup):
    spacing: float = 0.0
    child_force_expand_width: bool = True
    child_force_expand_height: bool = True
    child_control_width: bool = False
    child_control_height: bool = False


@register_component(ComponentKind.VERTICAL_LAYOUT_GROUP)
class VerticalLayoutGroup(HorizontalOrVerticalLayoutGroup):
    pass


@register_component(ComponentKind.HORIZONTAL_LAYOUT_GROUP)
class HorizontalLayoutGroup(HorizontalOrVerticalLayoutGroup):
    pass


@register_component(ComponentKind.GRID_LAYOUT_GROUP)
class GridLayoutGroup(LayoutGroup):
    cell_size: Vector2 = Field(default_factory=lambda: Vector2(x=100.0, y=100.0))
    spacing: Vector2 = Field(default_factory=Vector2)


@register_component(ComponentKind.IMAGE)
class Image(Component):
    disallow_multiple = True

    sprite: str | None = None
    color: str = "#FFFFFFFF"
    raycast_target: bool = True


@register_component(ComponentKind.TEXT)
class Text(Component):
    disallow_multiple = True

    text: str = ""
    font: str | None = None
    font_size: int = 14
    color: str = "#000000FF"


@register_component(ComponentKind.BUTTON)
class Button(Component):
    """Clickable control. ``on_click`` lists handler identifiers."""

    interactable: bool = True
    on_click: list[str] = Field(default_factory=list)


@register_component(ComponentKind.CANVAS_GROUP)
class CanvasGroup(Component):
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    interactable: bool = True
    blocks_raycasts: bool = True


@register_component(ComponentKind.LAYOUT_ELEMENT)
class LayoutElement(Component):
    ignore_layout: bool = False
    min_width: float = -1.0
    min_height: float = -1.0
    preferred_width: float = -1.0
    preferred_height: float = -1.0
    flexible_width: float = -1.0
    flexible_height: float = -1.0


# =============================================================================
# Runtime objects
# =============================================================================


@dataclass(eq=False)
class RuntimeObject:
    """
    A node of the generated scene graph.

    Every object owns a RectTransform, created on construction when the
    caller does not supply one. Children keep a back-reference to their
    parent; use ``add_child``/``set_parent`` rather than editing ``children``.
    """

    name: str
    components: list[Component] = field(default_factory=list)
    children: list[RuntimeObject] = field(default_factory=list)
    parent: RuntimeObject | None = field(default=None, repr=False)
    destroyed: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if not any(isinstance(c, RectTransform) for c in self.components):
            self.components.insert(0, RectTransform())
        for child in self.children:
            child.parent = self

    @property
    def rect_transform(self) -> RectTransform:
        transform = self.get_component(RectTransform)
        if transform is None:
            raise FramesyncError("Object has no RectTransform", node=self.name)
        return transform

    # Components

    def get_component(self, component_type: type[C]) -> C | None:
        """First attached component that is an instance of ``component_type``."""
        for component in self.components:
            if isinstance(component, component_type):
                return component
        return None

    def get_components(self, component_type: type[C]) -> list[C]:
        return [c for c in self.components if isinstance(c, component_type)]

    def conflicting_component(self, component_type: type[Component]) -> Component | None:
        """Attached component that rules out adding another ``component_type``."""
        base = component_type.exclusive_base()
        if base is None:
            return None
        return self.get_component(base)

    def add_component(self, component: type[C] | str | Component) -> Component:
        """
        Attach a component.

        Accepts a component class, a registered kind identifier, or an
        already built instance.

        Raises:
            ComponentConflictError: If the object already holds a component
                that does not allow another of this kind next to it.
        """
        if isinstance(component, Component):
            instance = component
        elif isinstance(component, str):
            instance = create_component(component)
        else:
            instance = component()

        existing = self.conflicting_component(type(instance))
        if existing is not None:
            raise ComponentConflictError(
                f"Cannot add {instance.kind}: already has {existing.kind}", node=self.name
            )
        self.components.append(instance)
        return instance

    def get_or_add_component(self, component_type: type[C]) -> C:
        existing = self.get_component(component_type)
        if existing is not None:
            return existing
        return self.add_component(component_type)  # type: ignore[return-value]

    def remove_component(self, component: Component) -> None:
        if isinstance(component, RectTransform):
            raise ValueError("RectTransform cannot be removed")
        self.components = [c for c in self.components if c is not component]

    # Hierarchy

    def add_child(self, child: RuntimeObject) -> RuntimeObject:
        child.set_parent(self)
        return child

    def set_parent(self, parent: RuntimeObject | None) -> None:
        if self.parent is not None:
            self.parent.children = [c for c in self.parent.children if c is not self]
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    def walk(self) -> Iterator[RuntimeObject]:
        """Yield this object and all descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    # Lifecycle

    def clone(self) -> RuntimeObject:
        """Deep copy of this hierarchy, detached from any parent."""
        return RuntimeObject(
            name=self.name,
            components=[c.model_copy(deep=True) for c in self.components],
            children=[child.clone() for child in self.children],
        )

    def instantiate(self) -> RuntimeObject:
        """Clone this hierarchy the way the runtime does, suffixing the root name."""
        copy = self.clone()
        copy.name = f"{self.name}{CLONE_SUFFIX}"
        return copy

    def destroy(self) -> None:
        """Release this hierarchy. The object must not be used afterwards."""
        if self.parent is not None:
            self.set_parent(None)
        for child in list(self.children):
            child.parent = None
            child.destroy()
        self.children = []
        self.components = []
        self.destroyed = True


def strip_clone_suffix(name: str) -> str:
    """Remove every clone marker from an object name."""
    return name.replace(CLONE_SUFFIX, "")


__all__ = [
    "CLONE_SUFFIX",
    "COMPONENT_REGISTRY",
    "Button",
    "CanvasGroup",
    "Component",
    "ComponentKind",
    "ContentSizeFitter",
    "FitMode",
    "GridLayoutGroup",
    "HorizontalLayoutGroup",
    "HorizontalOrVerticalLayoutGroup",
    "Image",
    "LayoutElement",
    "LayoutGroup",
    "MovementType",
    "OBJECT_KIND",
    "RectMask2D",
    "RectTransform",
    "RuntimeObject",
    "ScrollRect",
    "Text",
    "TextAnchor",
    "VerticalLayoutGroup",
    "component_class",
    "create_component",
    "register_component",
    "strip_clone_suffix",
]
