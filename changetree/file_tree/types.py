"""Tree node datatypes shared by builders, flatteners and renderers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class FileNode(Generic[T]):
    """Leaf row carrying one file payload."""

    path: str
    payload: T


@dataclass(frozen=True)
class DirectoryNode(Generic[T]):
    """Directory row; ``compression_level`` counts extra segments merged into it."""

    path: str
    children: tuple[Node[T], ...] = ()
    compression_level: int = 0

    def __post_init__(self) -> None:
        if self.compression_level < 0:
            raise ValueError("compression_level must be >= 0")


Node = Union[DirectoryNode[T], FileNode[T]]


def is_file(node: Node[T]) -> bool:
    """Return whether ``node`` is a leaf carrying a payload."""
    return isinstance(node, FileNode)


def iter_files(node: Node[T]) -> Iterator[T]:
    """Yield leaf payloads below ``node`` in display order."""
    stack: list[Node[T]] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, FileNode):
            yield current.payload
            continue
        stack.extend(reversed(current.children))


__all__ = ["Node", "FileNode", "DirectoryNode", "is_file", "iter_files"]
