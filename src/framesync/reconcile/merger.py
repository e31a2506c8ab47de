"""
Hierarchy merging.

Reapplies the serialized state of an old hierarchy onto a freshly generated
one. Objects and components are paired by (name, kind); the k-th old
occurrence of a pair maps to the k-th new occurrence. Components that exist
only in the old hierarchy (hand-added customizations) are reattached to the
corresponding new object when one can be found and it holds nothing that
excludes them, such as a layout group of another flavour.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field

from framesync.core.errors import ComponentCopyError, ReconcileIssue, ReconcileIssueKind
from framesync.core.ir import Component, RuntimeObject
from framesync.reconcile.copier import copy_serialized_if_different
from framesync.reconcile.flatten import FlattenedEntry, flatten
from framesync.reconcile.lookup import find_child

logger = logging.getLogger(__name__)


@dataclass
class MergeReport:
    """
    Outcome of merging one old hierarchy into a new root.

    Attributes:
        root_name: Name of the new root
        nodes_matched: Old objects paired with a new object
        components_matched: Old components paired with a new component
        fields_written: Field writes performed on matched components
        attached: (object name, kind) of every reattached orphan component
        issues: Recoverable problems met during the merge
    """

    root_name: str
    nodes_matched: int = 0
    components_matched: int = 0
    fields_written: int = 0
    attached: list[tuple[str, str]] = field(default_factory=list)
    issues: list[ReconcileIssue] = field(default_factory=list)

    def issues_of(self, kind: ReconcileIssueKind) -> list[ReconcileIssue]:
        return [issue for issue in self.issues if issue.kind == kind]

    def summary(self) -> dict[str, int]:
        return {
            "nodes_matched": self.nodes_matched,
            "components_matched": self.components_matched,
            "fields_written": self.fields_written,
            "attached": len(self.attached),
            "issues": len(self.issues),
        }


def merge_hierarchy(new_root: RuntimeObject, old_root: RuntimeObject) -> MergeReport:
    """
    Merge ``old_root``'s serialized state into ``new_root`` in place.

    Per-entry failures are logged and recorded in the report; the merge
    always runs over every old entry. ``old_root`` is not modified.

    Args:
        new_root: Freshly generated hierarchy (patched)
        old_root: Hierarchy captured before regeneration

    Returns:
        MergeReport describing what was matched, written and reattached
    """
    report = MergeReport(root_name=new_root.name)

    new_index: dict[tuple[str, str], list[FlattenedEntry]] = defaultdict(list)
    for entry in flatten(new_root):
        new_index[entry.key].append(entry)

    occurrences: Counter[tuple[str, str]] = Counter()
    # Old object -> new object, recorded as objects are paired
    hosts: dict[RuntimeObject, RuntimeObject] = {}

    logger.debug("Merging %s into %s", old_root.name, new_root.name)
    for old in flatten(old_root):
        occurrence = occurrences[old.key]
        occurrences[old.key] += 1
        candidates = new_index.get(old.key, [])
        match = candidates[occurrence] if occurrence < len(candidates) else None

        try:
            if match is None:
                if old.component is None:
                    _drop_node(old, report)
                else:
                    _reattach(old, old.component, new_root, hosts, report)
            elif old.component is not None and match.component is not None:
                written = copy_serialized_if_different(old.component, match.component)
                report.components_matched += 1
                report.fields_written += len(written)
            else:
                hosts[old.owner] = match.owner
                report.nodes_matched += 1
        except ComponentCopyError as e:
            logger.error("Error while copying %s on %s: %s", old.kind, old.name, e.message)
            report.issues.append(
                ReconcileIssue(
                    kind=ReconcileIssueKind.COMPONENT_COPY_FAILURE,
                    name=old.name,
                    component_kind=old.kind,
                    detail=e.message,
                )
            )

    logger.info("Merged %s: %s", new_root.name, report.summary())
    return report


def _drop_node(old: FlattenedEntry, report: MergeReport) -> None:
    logger.info("Object %s is no longer generated; dropping it", old.name)
    report.issues.append(ReconcileIssue(kind=ReconcileIssueKind.NODE_DROPPED, name=old.name))


def _reattach(
    old: FlattenedEntry,
    source: Component,
    new_root: RuntimeObject,
    hosts: dict[RuntimeObject, RuntimeObject],
    report: MergeReport,
) -> None:
    """Attach an old component with no counterpart to its object in the new hierarchy."""
    host = hosts.get(old.owner) or find_child(new_root, old.name)
    if host is None:
        logger.warning(
            "Could not find object to add component %s of type %s as child of %s",
            old.name,
            old.kind,
            new_root.name,
        )
        report.issues.append(
            ReconcileIssue(
                kind=ReconcileIssueKind.HOST_NODE_NOT_FOUND,
                name=old.name,
                component_kind=old.kind,
                detail=f"no object named {old.name} under {new_root.name}",
            )
        )
        return

    existing = host.conflicting_component(type(source))
    if existing is not None:
        logger.warning(
            "Not adding %s from %s: %s already has %s",
            old.kind,
            old.name,
            host.name,
            existing.kind,
        )
        report.issues.append(
            ReconcileIssue(
                kind=ReconcileIssueKind.COMPONENT_CONFLICT,
                name=old.name,
                component_kind=old.kind,
                detail=f"{host.name} already has {existing.kind}",
            )
        )
        return

    try:
        component = host.add_component(old.kind)
    except KeyError as e:
        raise ComponentCopyError(f"Cannot add {old.kind} to {host.name}: {e}") from e
    try:
        copy_serialized_if_different(source, component)
    except ComponentCopyError:
        host.remove_component(component)
        raise
    report.attached.append((host.name, old.kind))
    logger.debug("Added %s from %s to %s", old.kind, old.name, host.name)


__all__ = ["MergeReport", "merge_hierarchy"]
