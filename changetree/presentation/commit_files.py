"""Commit-file rows colored by custom-patch inclusion."""

from __future__ import annotations

from ..file_tree import CollapsedPaths, DirectoryNode, FileNode, Node, commit_file_name_at_depth, render_tree
from ..models import CommitFile
from ..patch import PatchStatus, StatusLookup, leaf_status, patch_statuses
from ..ui_theme import DEFAULT_THEME, UITheme, paint, paint_256
from .files import COLLAPSED_ARROW, EXPANDED_ARROW
from .icons import icon_for_file
from .text import escape_special_chars

WHOLE_SYMBOL = "●"
PART_SYMBOL = "◐"


def color_for_change_status(change_status: str, theme: UITheme) -> str:
    if change_status == "A":
        return theme.green
    if change_status in {"M", "R"}:
        return theme.yellow
    if change_status == "D":
        return theme.unstaged
    if change_status == "C":
        return theme.cyan
    if change_status == "T":
        return theme.magenta
    return theme.default_text


def commit_file_line(
    node: Node[CommitFile],
    tree_depth: int,
    visual_depth: int,
    is_collapsed: bool,
    status: PatchStatus,
    *,
    show_icons: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one commit-file row as ANSI-styled text.

    Directories show an arrow, green when any descendant is in the patch.
    Files show a filled or half-filled circle when (partly) included, and
    their change-status letter otherwise.
    """
    active_theme = theme or DEFAULT_THEME
    output = "  " * visual_depth
    name = commit_file_name_at_depth(node, tree_depth)
    name_color = active_theme.default_text

    if isinstance(node, DirectoryNode):
        is_directory = True
        arrow = COLLAPSED_ARROW if is_collapsed else EXPANDED_ARROW
        arrow_color = active_theme.default_text
        if status is PatchStatus.WHOLE:
            arrow_color = active_theme.staged
            name_color = active_theme.staged
        elif status is PatchStatus.PART:
            arrow_color = active_theme.staged
        output += paint(arrow, arrow_color, active_theme) + " "
    else:
        is_directory = False
        if status is PatchStatus.WHOLE:
            symbol = WHOLE_SYMBOL
            symbol_color = active_theme.staged
            name_color = active_theme.staged
        elif status is PatchStatus.PART:
            symbol = PART_SYMBOL
            symbol_color = active_theme.staged
        else:
            symbol = node.payload.change_status
            symbol_color = color_for_change_status(symbol, active_theme)
        output += paint(symbol, symbol_color, active_theme) + " "

    name = escape_special_chars(name)

    if show_icons:
        icon = icon_for_file(name, False, False, is_directory)
        output += paint_256(icon.glyph, icon.color, active_theme) + " "

    return output + paint(name, name_color, active_theme)


def render_commit_file_tree(
    root: DirectoryNode[CommitFile] | None,
    collapsed_paths: CollapsedPaths,
    lookup: StatusLookup,
    ref_name: str,
    *,
    show_icons: bool = False,
    theme: UITheme | None = None,
) -> list[str]:
    """Render all visible commit-file rows for ``ref_name`` in display order.

    ``lookup(file_name, ref_name)`` gives each file's patch status; directory
    statuses are folded from their children once per call.
    """
    if root is None:
        return []
    statuses = patch_statuses(root, lookup, ref_name)

    def render_line(node: Node[CommitFile], tree_depth: int, visual_depth: int, is_collapsed: bool) -> str:
        return commit_file_line(
            node,
            tree_depth,
            visual_depth,
            is_collapsed,
            leaf_status(node, lookup, ref_name) if isinstance(node, FileNode) else statuses[node.path],
            show_icons=show_icons,
            theme=theme,
        )

    return render_tree(root, collapsed_paths, render_line)


__all__ = [
    "WHOLE_SYMBOL",
    "PART_SYMBOL",
    "color_for_change_status",
    "commit_file_line",
    "render_commit_file_tree",
]
