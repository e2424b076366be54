"""Build display trees from flat lists of changed files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from .naming import join_path, split_path
from .types import DirectoryNode, FileNode, Node

ROOT_PATH = ""


class NamedFile(Protocol):
    name: str


F = TypeVar("F", bound=NamedFile)


@dataclass
class _DirectoryBuilder:
    path: str
    directories: dict[str, _DirectoryBuilder] = field(default_factory=dict)
    files: list[FileNode] = field(default_factory=list)

    def freeze(self) -> DirectoryNode:
        children: list[Node] = [
            self.directories[key].freeze() for key in sorted(self.directories)
        ]
        children.extend(sorted(self.files, key=lambda node: node.path))
        return DirectoryNode(self.path, tuple(children))


def build_file_tree(files: Iterable[F], show_tree: bool = True) -> DirectoryNode[F]:
    """Return a root directory holding ``files``.

    In tree mode intermediate directories are created per path segment,
    directories sort before files, and single-child directory chains are
    compressed. In flat mode every file is a direct child of the root.
    """
    if not show_tree:
        leaves = sorted((FileNode(file.name, file) for file in files), key=lambda node: node.path)
        return DirectoryNode(ROOT_PATH, tuple(leaves))

    root = _DirectoryBuilder(ROOT_PATH)
    for file in files:
        segments = split_path(file.name)
        current = root
        for end in range(1, len(segments)):
            segment = segments[end - 1]
            child = current.directories.get(segment)
            if child is None:
                child = _DirectoryBuilder(join_path(segments[:end]))
                current.directories[segment] = child
            current = child
        current.files.append(FileNode(file.name, file))

    frozen = root.freeze()
    return DirectoryNode(ROOT_PATH, tuple(compress(child) for child in frozen.children))


def compress(node: Node[F]) -> Node[F]:
    """Merge each directory with its sole directory child, bottom-up.

    The merged row takes the deepest path and records the absorbed segments
    in ``compression_level``. Files are returned unchanged.
    """
    if isinstance(node, FileNode):
        return node

    children = tuple(compress(child) for child in node.children)
    path = node.path
    level = node.compression_level
    while len(children) == 1 and isinstance(children[0], DirectoryNode):
        only = children[0]
        level += 1 + only.compression_level
        path = only.path
        children = only.children
    return DirectoryNode(path, children, level)


__all__ = ["ROOT_PATH", "NamedFile", "build_file_tree", "compress"]
