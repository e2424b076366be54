"""Nerd-font icon lookup for tree rows.

Glyphs are private-use codepoints and only render with a patched font, so
callers gate icon output behind an explicit ``show_icons`` flag.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass


@dataclass(frozen=True)
class IconSpec:
    """Glyph plus 256-color palette index."""

    glyph: str
    color: int


DEFAULT_FILE_ICON = IconSpec("\U000f0214", 241)
DEFAULT_DIRECTORY_ICON = IconSpec("", 241)
SUBMODULE_ICON = IconSpec("\U000f02a2", 241)
LINKED_WORKTREE_ICON = IconSpec("\U000f0339", 241)

NAME_ICONS: dict[str, IconSpec] = {
    ".gitignore": IconSpec("", 202),
    ".gitmodules": IconSpec("", 202),
    ".gitattributes": IconSpec("", 202),
    "Dockerfile": IconSpec("\U000f0868", 32),
    "Makefile": IconSpec("", 239),
    "LICENSE": IconSpec("", 185),
    "go.mod": IconSpec("", 74),
    "go.sum": IconSpec("", 74),
    "pyproject.toml": IconSpec("", 214),
    "requirements.txt": IconSpec("", 214),
}

EXTENSION_ICONS: dict[str, IconSpec] = {
    ".py": IconSpec("", 214),
    ".pyi": IconSpec("", 214),
    ".go": IconSpec("", 74),
    ".rs": IconSpec("", 216),
    ".js": IconSpec("", 185),
    ".ts": IconSpec("", 74),
    ".c": IconSpec("", 111),
    ".h": IconSpec("", 140),
    ".html": IconSpec("", 196),
    ".css": IconSpec("", 75),
    ".md": IconSpec("", 255),
    ".json": IconSpec("", 185),
    ".toml": IconSpec("", 124),
    ".yml": IconSpec("", 160),
    ".yaml": IconSpec("", 160),
    ".sh": IconSpec("", 113),
    ".txt": IconSpec("\U000f0219", 113),
    ".lock": IconSpec("", 250),
}


def icon_for_file(name: str, is_submodule: bool, is_linked_worktree: bool, is_directory: bool) -> IconSpec:
    """Return the icon for a row named ``name``.

    Submodule, linked-worktree and directory icons win over name lookups.
    Files match an exact base name first, then a lowercased extension.
    """
    if is_submodule:
        return SUBMODULE_ICON
    if is_linked_worktree:
        return LINKED_WORKTREE_ICON
    if is_directory:
        return DEFAULT_DIRECTORY_ICON

    base = posixpath.basename(name)
    by_name = NAME_ICONS.get(base)
    if by_name is not None:
        return by_name
    _stem, ext = posixpath.splitext(base)
    return EXTENSION_ICONS.get(ext.lower(), DEFAULT_FILE_ICON)


__all__ = [
    "IconSpec",
    "DEFAULT_FILE_ICON",
    "DEFAULT_DIRECTORY_ICON",
    "SUBMODULE_ICON",
    "LINKED_WORKTREE_ICON",
    "icon_for_file",
]
