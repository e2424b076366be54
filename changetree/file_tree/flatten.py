"""Pre-order flattening of a (possibly compressed) file tree into rows.

Two depths are tracked per row. ``tree_depth`` counts raw path segments
consumed so far and drives name truncation; ``visual_depth`` counts rendered
rows and drives indentation. They diverge whenever a directory row absorbs a
chain of single-child directories (``compression_level > 0``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .collapsed import CollapsedPaths
from .types import FileNode, Node

T = TypeVar("T")

ROOT_DEPTH = -1

RenderLine = Callable[[Node[T], int, int, bool], str]


@dataclass(frozen=True)
class FlatRow(Generic[T]):
    """One visible non-root node with the depths it is rendered at."""

    node: Node[T]
    tree_depth: int
    visual_depth: int
    collapsed: bool = False


def flatten_tree(root: Optional[Node[T]], collapsed_paths: CollapsedPaths) -> list[FlatRow[T]]:
    """Return visible rows in pre-order, skipping the root itself.

    Descendants of a collapsed directory are omitted but the directory row
    stays. A root that is itself a file yields no rows.
    """
    if root is None:
        return []

    rows: list[FlatRow[T]] = []
    stack: list[tuple[Node[T], int, int]] = [(root, ROOT_DEPTH, ROOT_DEPTH)]
    while stack:
        node, tree_depth, visual_depth = stack.pop()
        is_root = tree_depth == ROOT_DEPTH

        if isinstance(node, FileNode):
            if not is_root:
                rows.append(FlatRow(node, tree_depth, visual_depth, False))
            continue

        is_collapsed = collapsed_paths.is_collapsed(node.path)
        if not is_root:
            rows.append(FlatRow(node, tree_depth, visual_depth, is_collapsed))
        if is_collapsed:
            continue

        child_tree_depth = tree_depth + 1 + node.compression_level
        child_visual_depth = visual_depth + 1
        for child in reversed(node.children):
            stack.append((child, child_tree_depth, child_visual_depth))

    return rows


def render_tree(
    root: Optional[Node[T]],
    collapsed_paths: CollapsedPaths,
    render_line: RenderLine[T],
) -> list[str]:
    """Render each visible row through ``render_line`` in display order."""
    return [
        render_line(row.node, row.tree_depth, row.visual_depth, row.collapsed)
        for row in flatten_tree(root, collapsed_paths)
    ]


__all__ = ["ROOT_DEPTH", "FlatRow", "RenderLine", "flatten_tree", "render_tree"]
