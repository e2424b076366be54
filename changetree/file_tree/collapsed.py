"""Caller-owned set of directory paths whose descendants are hidden."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CollapsedPaths:
    """Membership set of collapsed directory paths.

    Renderers only query it; the owning view mutates it between refreshes.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def is_collapsed(self, path: str) -> bool:
        return path in self._paths

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def collapse(self, path: str) -> None:
        self._paths.add(path)

    def expand(self, path: str) -> None:
        self._paths.discard(path)

    def toggle(self, path: str) -> bool:
        """Flip ``path`` and return whether it is now collapsed."""
        if path in self._paths:
            self._paths.discard(path)
            return False
        self._paths.add(path)
        return True

    def expand_to_path(self, path: str) -> None:
        """Expand every ancestor directory of ``path`` so its row becomes visible."""
        segments = path.split("/")
        for end in range(1, len(segments)):
            self._paths.discard("/".join(segments[:end]))


__all__ = ["CollapsedPaths"]
