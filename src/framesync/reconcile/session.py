"""
Regeneration sessions.

A RegenerationSession holds the state of one regeneration batch: the pending
snapshots captured before artifacts are replaced, and the reports of the
merges performed once the new roots exist.

Sessions are single-writer. Callers must serialize regeneration passes and
deliver an artifact's before-event before its after-event; an after-event
with no prior capture finds no snapshot and the new root keeps its
generated state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from framesync.core.artifacts import load_artifact
from framesync.core.errors import FramesyncError, ReconcileIssue, ReconcileIssueKind
from framesync.core.ir import RuntimeObject
from framesync.core.manifest import ReconcileSettings
from framesync.reconcile.merger import MergeReport, merge_hierarchy
from framesync.reconcile.snapshots import Snapshot, SnapshotState, SnapshotStore

logger = logging.getLogger(__name__)

ArtifactLoader = Callable[[Path], RuntimeObject]


class RegenerationSession:
    """Snapshot capture and merge state for one regeneration batch."""

    def __init__(
        self,
        loader: ArtifactLoader = load_artifact,
        settings: ReconcileSettings | None = None,
    ) -> None:
        self.loader = loader
        self.settings = settings or ReconcileSettings()
        self.store = SnapshotStore()
        self.reports: list[MergeReport] = []
        self.issues: list[ReconcileIssue] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise FramesyncError("Regeneration session is closed")

    def before_regeneration(self, descriptor: Path) -> Snapshot | None:
        """
        Capture the artifact at ``descriptor`` before it is replaced.

        Metadata sidecars are ignored. Loader errors propagate.

        Returns:
            The captured snapshot, or None for a sidecar
        """
        self._ensure_open()
        if descriptor.name.endswith(self.settings.metadata_suffix):
            logger.debug("Ignoring metadata sidecar %s", descriptor)
            return None

        clone = self.loader(descriptor).instantiate()
        return self.store.capture(clone, source=descriptor)

    def after_regeneration(self, new_root: RuntimeObject | None) -> MergeReport | None:
        """
        Merge the pending snapshot matching ``new_root`` into it.

        Returns:
            The merge report, or None when nothing was merged
        """
        self._ensure_open()
        if new_root is None:
            logger.error("Requested merge for a missing root")
            self.issues.append(
                ReconcileIssue(kind=ReconcileIssueKind.NULL_ARTIFACT, name="")
            )
            return None

        if not self.store:
            logger.warning("No saved roots for %s", new_root.name)
            self._missing(new_root)
            return None

        snapshot = self.store.take(new_root.name)
        if snapshot is None:
            logger.warning(
                "No snapshot named %s (pending: %s)",
                new_root.name,
                ", ".join(self.store.names()),
            )
            self._missing(new_root)
            return None

        try:
            report = merge_hierarchy(new_root, snapshot.root)
        finally:
            snapshot.release(SnapshotState.MERGED)
        self.reports.append(report)
        return report

    def _missing(self, new_root: RuntimeObject) -> None:
        self.issues.append(
            ReconcileIssue(kind=ReconcileIssueKind.MISSING_SNAPSHOT, name=new_root.name)
        )

    def close(self) -> list[Snapshot]:
        """
        End the batch.

        Unmatched snapshots are released when ``release_unmatched`` is set;
        otherwise they stay in the store for the caller to inspect.

        Returns:
            Snapshots released as unmatched
        """
        if self._closed:
            return []
        self._closed = True

        if not self.settings.release_unmatched:
            if self.store:
                logger.warning("%d snapshot(s) left pending", len(self.store))
            return []

        released = self.store.release_all()
        for snapshot in released:
            logger.warning("Releasing unmatched snapshot %s (%s)", snapshot.name, snapshot.source)
        return released

    def __enter__(self) -> RegenerationSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ArtifactLoader", "RegenerationSession"]
