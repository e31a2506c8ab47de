"""Serialized-state copying between components of the same kind."""

from __future__ import annotations

import copy
import logging

from pydantic import ValidationError

from framesync.core.errors import ComponentCopyError
from framesync.core.ir import Component

logger = logging.getLogger(__name__)


def copy_serialized_if_different(source: Component, destination: Component) -> list[str]:
    """
    Copy every serialized field of ``source`` onto ``destination``.

    Fields whose values are already equal are left untouched, so copying a
    component onto an identical one performs no writes.

    Args:
        source: Component to read from
        destination: Component of the same kind to write to

    Returns:
        Names of the fields that were written

    Raises:
        ComponentCopyError: If the kinds differ or a field rejects the value
    """
    if source.kind != destination.kind:
        raise ComponentCopyError(
            f"Cannot copy {source.kind} onto {destination.kind}",
        )

    written: list[str] = []
    for name in source.serialized_fields():
        value = getattr(source, name)
        if getattr(destination, name) == value:
            continue
        try:
            setattr(destination, name, copy.deepcopy(value))
        except ValidationError as e:
            raise ComponentCopyError(f"{source.kind}.{name} rejected {value!r}: {e}") from e
        written.append(name)

    if written:
        logger.debug("Copied %s fields: %s", source.kind, ", ".join(written))
    return written


__all__ = ["copy_serialized_if_different"]
