"""
framesync - design-to-runtime UI bridge.

Translates design-tool auto-layout onto runtime layout components and keeps
hand-authored customizations alive across repeated regeneration.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ArtifactError,
    ComponentConflictError,
    ComponentCopyError,
    FramesyncError,
    ManifestError,
    SnapshotError,
    UnsupportedLayoutConfigurationError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "FramesyncError",
    "UnsupportedLayoutConfigurationError",
    "ComponentCopyError",
    "ArtifactError",
    "ComponentConflictError",
    "ManifestError",
    "SnapshotError",
]
