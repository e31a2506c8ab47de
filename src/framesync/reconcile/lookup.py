"""Name-based object lookup within a hierarchy."""

from __future__ import annotations

from framesync.core.ir import RuntimeObject


def find_child(root: RuntimeObject, name: str) -> RuntimeObject | None:
    """
    Find the first object called ``name`` in ``root``'s hierarchy.

    The search is depth-first pre-order and includes ``root`` itself. With
    duplicate names the first object in traversal order wins.
    """
    for obj in root.walk():
        if obj.name == name:
            return obj
    return None


__all__ = ["find_child"]
