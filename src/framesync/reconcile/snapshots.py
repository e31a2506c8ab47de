"""
Snapshot storage for hierarchies about to be replaced.

Snapshot lifecycle:

    CAPTURED --(merged into a new root)--> MERGED
    CAPTURED --(session closed)----------> UNMATCHED
    CAPTURED --(same name captured again)-> REPLACED

Every terminal transition releases the cloned hierarchy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from framesync.core.errors import SnapshotError
from framesync.core.ir import RuntimeObject, strip_clone_suffix

logger = logging.getLogger(__name__)


class SnapshotState(StrEnum):
    CAPTURED = "captured"
    MERGED = "merged"
    UNMATCHED = "unmatched"
    REPLACED = "replaced"


@dataclass
class Snapshot:
    """An in-memory clone of a hierarchy captured before regeneration."""

    name: str
    root: RuntimeObject
    source: Path | None = None
    state: SnapshotState = SnapshotState.CAPTURED

    @property
    def released(self) -> bool:
        return self.state != SnapshotState.CAPTURED

    def release(self, state: SnapshotState) -> None:
        if self.released:
            raise SnapshotError(f"Snapshot already released ({self.state})", node=self.name)
        self.root.destroy()
        self.state = state


class SnapshotStore:
    """Pending snapshots keyed by root name (clone suffix stripped)."""

    def __init__(self) -> None:
        self._pending: dict[str, Snapshot] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, name: object) -> bool:
        return name in self._pending

    def names(self) -> list[str]:
        return list(self._pending)

    def get(self, name: str) -> Snapshot | None:
        return self._pending.get(name)

    def capture(self, root: RuntimeObject, source: Path | None = None) -> Snapshot:
        """
        Store ``root`` as a pending snapshot.

        The clone suffix is stripped from the root's name. A pending snapshot
        with the same name is replaced and released.
        """
        root.name = strip_clone_suffix(root.name)
        previous = self._pending.pop(root.name, None)
        if previous is not None:
            logger.warning(
                "Snapshot %s captured twice; releasing the earlier capture from %s",
                root.name,
                previous.source,
            )
            previous.release(SnapshotState.REPLACED)

        snapshot = Snapshot(name=root.name, root=root, source=source)
        self._pending[root.name] = snapshot
        logger.debug("Captured snapshot %s from %s", root.name, source)
        return snapshot

    def take(self, name: str) -> Snapshot | None:
        """Remove and return the pending snapshot called ``name``."""
        return self._pending.pop(name, None)

    def release_all(self) -> list[Snapshot]:
        """Release every pending snapshot as UNMATCHED and empty the store."""
        released = list(self._pending.values())
        self._pending.clear()
        for snapshot in released:
            snapshot.release(SnapshotState.UNMATCHED)
        return released


__all__ = ["Snapshot", "SnapshotState", "SnapshotStore"]
