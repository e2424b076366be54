"""Custom-patch selection state and per-node inclusion status."""

from __future__ import annotations

from .status import (
    PatchSelection,
    PatchStatus,
    StatusLookup,
    fold_statuses,
    leaf_status,
    patch_status,
    patch_statuses,
)

__all__ = [
    "PatchStatus",
    "PatchSelection",
    "StatusLookup",
    "fold_statuses",
    "leaf_status",
    "patch_status",
    "patch_statuses",
]
