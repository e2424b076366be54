"""Custom-patch inclusion status for commit files and directories.

A directory's status is folded bottom-up from its children: WHOLE when every
child is WHOLE, UNSELECTED when every child is UNSELECTED, PART otherwise.
This agrees with evaluating the same rule over all leaf descendants.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import Any

from ..file_tree.types import DirectoryNode, FileNode, Node


class PatchStatus(enum.Enum):
    WHOLE = "whole"
    PART = "part"
    UNSELECTED = "unselected"


StatusLookup = Callable[[str, str], PatchStatus]


def fold_statuses(statuses: Iterable[PatchStatus]) -> PatchStatus:
    """Combine child statuses into their parent directory's status."""
    seen = set(statuses)
    if seen <= {PatchStatus.WHOLE}:
        return PatchStatus.WHOLE
    if seen == {PatchStatus.UNSELECTED}:
        return PatchStatus.UNSELECTED
    return PatchStatus.PART


def patch_statuses(root: Node[Any], lookup: StatusLookup, ref_name: str) -> dict[str, PatchStatus]:
    """Return the status of every node below and including ``root``, keyed by path.

    Leaves are resolved with ``lookup(payload.name, ref_name)``; one post-order
    pass visits every node once. Directory folds read leaf statuses directly,
    so two leaves sharing a path cannot hide one another.
    """
    if isinstance(root, FileNode):
        return {root.path: leaf_status(root, lookup, ref_name)}

    result: dict[str, PatchStatus] = {}
    stack: list[tuple[DirectoryNode[Any], bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            child_statuses: list[PatchStatus] = []
            for child in node.children:
                if isinstance(child, FileNode):
                    status = leaf_status(child, lookup, ref_name)
                    result[child.path] = status
                else:
                    status = result[child.path]
                child_statuses.append(status)
            result[node.path] = fold_statuses(child_statuses)
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in node.children if isinstance(child, DirectoryNode))
    return result


def leaf_status(node: FileNode[Any], lookup: StatusLookup, ref_name: str) -> PatchStatus:
    return lookup(node.payload.name, ref_name)


def patch_status(node: Node[Any], lookup: StatusLookup, ref_name: str) -> PatchStatus:
    return patch_statuses(node, lookup, ref_name)[node.path]


class PatchSelection:
    """In-memory per-ref record of which files are included in a custom patch.

    Files never marked are UNSELECTED.
    """

    def __init__(self) -> None:
        self._statuses: dict[str, dict[str, PatchStatus]] = {}

    def set_file_status(self, file_name: str, ref_name: str, status: PatchStatus) -> None:
        by_file = self._statuses.setdefault(ref_name, {})
        if status is PatchStatus.UNSELECTED:
            by_file.pop(file_name, None)
            return
        by_file[file_name] = status

    def get_file_status(self, file_name: str, ref_name: str) -> PatchStatus:
        return self._statuses.get(ref_name, {}).get(file_name, PatchStatus.UNSELECTED)


__all__ = [
    "PatchStatus",
    "StatusLookup",
    "fold_statuses",
    "patch_statuses",
    "patch_status",
    "leaf_status",
    "PatchSelection",
]
