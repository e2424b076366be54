"""File-tree model: nodes, building, collapse state, flattening and naming.

Trees are immutable snapshots; ``CollapsedPaths`` is the only mutable piece
and belongs to the caller.
"""

from __future__ import annotations

from .build import ROOT_PATH, build_file_tree, compress
from .collapsed import CollapsedPaths
from .flatten import ROOT_DEPTH, FlatRow, flatten_tree, render_tree
from .naming import RENAME_ARROW, commit_file_name_at_depth, file_name_at_depth
from .types import DirectoryNode, FileNode, Node, is_file, iter_files

__all__ = [
    "Node",
    "FileNode",
    "DirectoryNode",
    "is_file",
    "iter_files",
    "ROOT_PATH",
    "build_file_tree",
    "compress",
    "CollapsedPaths",
    "ROOT_DEPTH",
    "FlatRow",
    "flatten_tree",
    "render_tree",
    "RENAME_ARROW",
    "file_name_at_depth",
    "commit_file_name_at_depth",
]
