"""Styled row rendering for working-tree and commit-file trees.

Each row is a pure function of its node, depths and flags; icons and colors
come from explicit ``show_icons`` and ``theme`` arguments.
"""

from __future__ import annotations

from .commit_files import commit_file_line, render_commit_file_tree
from .files import COLLAPSED_ARROW, EXPANDED_ARROW, change_flags, file_line, render_file_tree
from .icons import IconSpec, icon_for_file
from .text import escape_special_chars

__all__ = [
    "EXPANDED_ARROW",
    "COLLAPSED_ARROW",
    "change_flags",
    "file_line",
    "render_file_tree",
    "commit_file_line",
    "render_commit_file_tree",
    "IconSpec",
    "icon_for_file",
    "escape_special_chars",
]
