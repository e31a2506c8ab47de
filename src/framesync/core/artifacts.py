"""
Artifact storage for generated hierarchies.

A stored artifact is a JSON document describing one RuntimeObject tree:

    {
      "name": "Screen",
      "components": [{"kind": "RectTransform", "pivot": {"x": 0.5, "y": 0.5}, ...}],
      "children": [ ... ]
    }

Component entries are rebuilt through the component registry, so every kind
in a file must be registered before loading.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ArtifactError
from .ir import COMPONENT_REGISTRY, DesignNode, RuntimeObject

logger = logging.getLogger(__name__)


def object_to_dict(obj: RuntimeObject) -> dict[str, Any]:
    """Serialize a hierarchy to plain JSON-compatible data."""
    return {
        "name": obj.name,
        "components": [
            {"kind": component.kind, **component.model_dump(mode="json")}
            for component in obj.components
        ],
        "children": [object_to_dict(child) for child in obj.children],
    }


def object_from_dict(data: dict[str, Any]) -> RuntimeObject:
    """Rebuild a hierarchy from ``object_to_dict`` output."""
    name = data.get("name")
    if not isinstance(name, str):
        raise ArtifactError("Object entry is missing a string 'name'")

    components = []
    for entry in data.get("components", []):
        fields = dict(entry)
        kind = fields.pop("kind", None)
        component_type = COMPONENT_REGISTRY.get(kind) if isinstance(kind, str) else None
        if component_type is None:
            raise ArtifactError(f"Unknown component kind: {kind!r}", node=name)
        try:
            components.append(component_type.model_validate(fields))
        except ValidationError as e:
            raise ArtifactError(f"Invalid {kind} fields: {e}", node=name) from e

    children = [object_from_dict(child) for child in data.get("children", [])]
    return RuntimeObject(name=name, components=components, children=children)


def load_artifact(path: Path) -> RuntimeObject:
    """Load a stored hierarchy from ``path``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ArtifactError(f"Artifact {path} must contain a JSON object")
    root = object_from_dict(data)
    logger.debug("Loaded artifact %s (root %s)", path, root.name)
    return root


def save_artifact(obj: RuntimeObject, path: Path) -> None:
    """Write a hierarchy to ``path`` as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(object_to_dict(obj), f, indent=2)
    logger.debug("Saved artifact %s", path)


def load_design(path: Path) -> DesignNode:
    """Load a design node tree exported by the design tool."""
    try:
        return DesignNode.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ArtifactError(f"Invalid design document {path}: {e}") from e


__all__ = [
    "load_artifact",
    "load_design",
    "object_from_dict",
    "object_to_dict",
    "save_artifact",
]
