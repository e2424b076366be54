"""Display names for tree rows.

A row only shows the path segments its ancestors have not already shown, so
names are the path suffix starting at the row's tree depth.
"""

from __future__ import annotations

from typing import Any

from .types import Node, is_file

RENAME_ARROW = " → "


def split_path(path: str) -> list[str]:
    return path.split("/")


def join_path(segments: list[str]) -> str:
    return "/".join(segments)


def _suffix_at_depth(segments: list[str], depth: int) -> str:
    if depth < 0 or depth > len(segments):
        raise IndexError(f"depth {depth} out of range for {len(segments)} path segments")
    return join_path(segments[depth:])


def commit_file_name_at_depth(node: Node[Any], depth: int) -> str:
    """Return ``node.path`` with the first ``depth`` segments removed."""
    return _suffix_at_depth(split_path(node.path), depth)


def file_name_at_depth(node: Node[Any], depth: int) -> str:
    """Return the row name, annotated with the previous path for renames.

    When the file was renamed inside the same parent directory the previous
    name is shortened the same way as the current one; otherwise the previous
    path is shown in full.
    """
    segments = split_path(node.path)
    name = _suffix_at_depth(segments, depth)

    if not (is_file(node) and node.payload.is_rename()):
        return name

    previous_name = node.payload.previous_name
    previous_segments = split_path(previous_name)
    same_parent_dir = len(segments) == len(previous_segments) and segments[:depth] == previous_segments[:depth]
    if same_parent_dir:
        previous_name = join_path(previous_segments[depth:])
    return previous_name + RENAME_ARROW + name


__all__ = [
    "RENAME_ARROW",
    "split_path",
    "join_path",
    "file_name_at_depth",
    "commit_file_name_at_depth",
]
