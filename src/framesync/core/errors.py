"""
Error types for framesync layout translation and hierarchy reconciliation.
"""

from dataclasses import dataclass
from enum import StrEnum


class FramesyncError(Exception):
    """Base exception for all framesync errors."""

    def __init__(self, message: str, node: str | None = None):
        self.message = message
        self.node = node
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending node name if available."""
        if self.node:
            return f"[{self.node}] {self.message}"
        return self.message


class UnsupportedLayoutConfigurationError(FramesyncError):
    """
    Raised when a design node carries a layout value the translator cannot map.

    This is a contract violation: a well-formed design document never
    produces it, so it is surfaced to the caller instead of being logged.
    """

    pass


class ComponentCopyError(FramesyncError):
    """
    Raised when serialized state cannot be copied between two components.

    Examples:
    - Source and destination have different kinds
    - A field rejects the copied value
    """

    pass


class ArtifactError(FramesyncError):
    """
    Raised when a stored artifact cannot be read or written.

    Examples:
    - Malformed JSON
    - Unknown component kind
    - Missing object name
    """

    pass


class ComponentConflictError(FramesyncError):
    """
    Raised when a component cannot be attached next to those already present.

    Examples:
    - A second RectTransform
    - A HorizontalLayoutGroup on an object that has a VerticalLayoutGroup
    """

    pass


class SnapshotError(FramesyncError):
    """Raised when a snapshot is used after it has been released."""

    pass


class ManifestError(FramesyncError):
    """Raised when framesync.toml contains invalid settings."""

    pass


class ReconcileIssueKind(StrEnum):
    """Recoverable problems recorded while reconciling hierarchies."""

    MISSING_SNAPSHOT = "missing_snapshot"
    NULL_ARTIFACT = "null_artifact"
    COMPONENT_COPY_FAILURE = "component_copy_failure"
    HOST_NODE_NOT_FOUND = "host_node_not_found"
    NODE_DROPPED = "node_dropped"
    COMPONENT_CONFLICT = "component_conflict"


@dataclass
class ReconcileIssue:
    """
    A logged, non-fatal reconciliation problem.

    Attributes:
        kind: Issue category
        name: Object name the issue refers to
        component_kind: Component kind involved, if any
        detail: Human-readable description
    """

    kind: ReconcileIssueKind
    name: str
    component_kind: str | None = None
    detail: str = ""

    def format(self) -> str:
        """Format as a single log-friendly line."""
        target = f"{self.name}:{self.component_kind}" if self.component_kind else self.name
        if self.detail:
            return f"{self.kind.value} {target}: {self.detail}"
        return f"{self.kind.value} {target}"
