"""File-change payloads carried by tree leaves.

``WorkingFile`` mirrors one ``git status --porcelain`` record, ``CommitFile``
one ``git diff-tree --name-status`` record. Both expose ``name`` so tree
building can treat them uniformly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SubmoduleConfig:
    """One submodule entry from ``.gitmodules``."""

    name: str
    path: str
    url: str = ""


@dataclass(frozen=True)
class WorkingFile:
    """Working-tree file with its two-character porcelain status."""

    name: str
    short_status: str
    previous_name: str = ""
    is_worktree: bool = False

    def __post_init__(self) -> None:
        if len(self.short_status) != 2:
            raise ValueError(f"short_status must be two characters, got {self.short_status!r}")

    @property
    def has_staged_changes(self) -> bool:
        # Unmerged entries (U in the index column) are conflicts, not staged work.
        return self.short_status[0] not in {" ", "?", "U"}

    @property
    def has_unstaged_changes(self) -> bool:
        return self.short_status[1] != " "

    def is_rename(self) -> bool:
        return bool(self.previous_name)

    def is_submodule(self, configs: Iterable[SubmoduleConfig]) -> bool:
        return any(config.path == self.name for config in configs)


@dataclass(frozen=True)
class CommitFile:
    """File touched by a commit, with its one-character change status."""

    name: str
    change_status: str
    previous_name: str = ""

    def __post_init__(self) -> None:
        if len(self.change_status) != 1:
            raise ValueError(f"change_status must be one character, got {self.change_status!r}")


__all__ = ["SubmoduleConfig", "WorkingFile", "CommitFile"]
