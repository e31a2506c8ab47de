"""
Hierarchy flattening.

Turns an object tree into an ordered list of entries: each object followed by
its components, then its children, depth-first.
"""

from __future__ import annotations

from dataclasses import dataclass

from framesync.core.ir import OBJECT_KIND, Component, RuntimeObject


@dataclass(frozen=True)
class FlattenedEntry:
    """
    One object or component of a flattened hierarchy.

    Attributes:
        name: Name of the owning object
        kind: OBJECT_KIND for objects, the component kind otherwise
        owner: The object itself, or the object the component is attached to
        component: The component instance, None for object entries
    """

    name: str
    kind: str
    owner: RuntimeObject
    component: Component | None = None

    @property
    def is_node(self) -> bool:
        return self.component is None

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.kind)


def flatten(root: RuntimeObject) -> list[FlattenedEntry]:
    """Flatten ``root`` and all its descendants, preserving traversal order."""
    entries: list[FlattenedEntry] = []
    for obj in root.walk():
        entries.append(FlattenedEntry(name=obj.name, kind=OBJECT_KIND, owner=obj))
        for component in obj.components:
            entries.append(
                FlattenedEntry(name=obj.name, kind=component.kind, owner=obj, component=component)
            )
    return entries


__all__ = ["FlattenedEntry", "flatten"]
