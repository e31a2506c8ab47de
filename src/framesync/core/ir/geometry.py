"""
Small value types shared by the design and scene models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Vector2(BaseModel):
    """Immutable 2D vector (sizes, pivots, anchors, spacing)."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class RectOffset(BaseModel):
    """Integer padding on the four edges of a layout group."""

    model_config = ConfigDict(frozen=True)

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


ZERO = Vector2()
TOP_LEFT = Vector2(x=0.0, y=1.0)


__all__ = ["RectOffset", "TOP_LEFT", "Vector2", "ZERO"]
