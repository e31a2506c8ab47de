"""
framesync Hierarchy Reconciliation Engine.

Preserves hand-authored customizations across destructive regeneration.

Key components:
- Serialized-state copying (copier.py)
- Name lookup (lookup.py)
- Hierarchy flattening (flatten.py)
- Pending snapshot storage (snapshots.py)
- Old-into-new merging (merger.py)
- Per-batch session state (session.py)
- Pipeline event wiring (events.py)
"""

from framesync.reconcile.copier import copy_serialized_if_different
from framesync.reconcile.events import (
    EventChannel,
    RegenerationEvents,
    Subscription,
    connect_tracker,
)
from framesync.reconcile.flatten import FlattenedEntry, flatten
from framesync.reconcile.lookup import find_child
from framesync.reconcile.merger import MergeReport, merge_hierarchy
from framesync.reconcile.session import ArtifactLoader, RegenerationSession
from framesync.reconcile.snapshots import Snapshot, SnapshotState, SnapshotStore

__all__ = [
    # Core functions
    "merge_hierarchy",
    "copy_serialized_if_different",
    "find_child",
    "flatten",
    # Session and events
    "RegenerationSession",
    "ArtifactLoader",
    "RegenerationEvents",
    "EventChannel",
    "Subscription",
    "connect_tracker",
    # Types
    "FlattenedEntry",
    "MergeReport",
    "Snapshot",
    "SnapshotState",
    "SnapshotStore",
]
