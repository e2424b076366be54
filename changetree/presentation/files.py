"""Working-tree file rows.

By default folder and file names use the default text color. A fully staged
file or directory gets a staged-colored name; a directory with any staged
change gets a staged-colored arrow. Status characters are colored per side:
index changes green, worktree changes in the unstaged accent.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..file_tree import CollapsedPaths, DirectoryNode, FileNode, Node, file_name_at_depth, render_tree
from ..models import SubmoduleConfig, WorkingFile
from ..ui_theme import DEFAULT_THEME, UITheme, paint, paint_256
from .icons import icon_for_file
from .text import escape_special_chars

EXPANDED_ARROW = "▼"
COLLAPSED_ARROW = "▶"
SUBMODULE_SUFFIX = " (submodule)"


@dataclass(frozen=True)
class ChangeFlags:
    has_staged_changes: bool = False
    has_unstaged_changes: bool = False


def file_flags(file: WorkingFile) -> ChangeFlags:
    return ChangeFlags(file.has_staged_changes, file.has_unstaged_changes)


def change_flags(root: Node[WorkingFile]) -> dict[str, ChangeFlags]:
    """Return any-leaf staged/unstaged flags for every directory, keyed by path.

    git can report one path twice (``D  foo`` plus ``?? foo``), so file flags
    are read from each leaf's own payload and never from this map.
    """
    if isinstance(root, FileNode):
        return {}
    result: dict[str, ChangeFlags] = {}
    stack: list[tuple[DirectoryNode[WorkingFile], bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            child_flags = [
                file_flags(child.payload) if isinstance(child, FileNode) else result[child.path]
                for child in node.children
            ]
            result[node.path] = ChangeFlags(
                any(flags.has_staged_changes for flags in child_flags),
                any(flags.has_unstaged_changes for flags in child_flags),
            )
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in node.children if isinstance(child, DirectoryNode))
    return result


def format_file_status(file: WorkingFile, theme: UITheme) -> str:
    """Color the two porcelain status characters independently."""
    first_char = file.short_status[0]
    first_color = theme.green
    if first_char == "?":
        first_color = theme.untracked
    elif first_char == " ":
        first_color = theme.default_text

    second_char = file.short_status[1]
    second_color = theme.unstaged
    if second_char == " ":
        second_color = theme.default_text

    return paint(first_char, first_color, theme) + paint(second_char, second_color, theme)


def file_line(
    node: Node[WorkingFile],
    tree_depth: int,
    visual_depth: int,
    is_collapsed: bool,
    has_unstaged_changes: bool,
    has_staged_changes: bool,
    submodule_configs: Iterable[SubmoduleConfig],
    *,
    show_icons: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one working-tree row as ANSI-styled text."""
    active_theme = theme or DEFAULT_THEME
    rest_color = active_theme.default_text
    name = file_name_at_depth(node, tree_depth)
    output = "  " * visual_depth

    name_color = rest_color
    if has_staged_changes and not has_unstaged_changes:
        name_color = active_theme.staged

    file = node.payload if isinstance(node, FileNode) else None
    if file is None:
        arrow = COLLAPSED_ARROW if is_collapsed else EXPANDED_ARROW
        arrow_color = active_theme.staged if has_staged_changes else rest_color
        output += paint(arrow, arrow_color, active_theme) + " "
    else:
        # The trailing space carries the rest color so reverse-video themes stay even.
        output += format_file_status(file, active_theme) + paint(" ", rest_color, active_theme)

    is_submodule = file is not None and file.is_submodule(submodule_configs)
    is_linked_worktree = file is not None and file.is_worktree
    is_directory = file is None

    if show_icons:
        icon = icon_for_file(name, is_submodule, is_linked_worktree, is_directory)
        output += paint_256(icon.glyph, icon.color, active_theme) + paint(" ", rest_color, active_theme)

    output += paint(escape_special_chars(name), name_color, active_theme)

    if is_submodule:
        output += paint(SUBMODULE_SUFFIX, rest_color, active_theme)

    return output


def render_file_tree(
    root: DirectoryNode[WorkingFile] | None,
    collapsed_paths: CollapsedPaths,
    submodule_configs: Iterable[SubmoduleConfig] = (),
    *,
    show_icons: bool = False,
    theme: UITheme | None = None,
) -> list[str]:
    """Render all visible working-tree rows in display order."""
    if root is None:
        return []
    flags_by_path = change_flags(root)
    configs = tuple(submodule_configs)

    def render_line(node: Node[WorkingFile], tree_depth: int, visual_depth: int, is_collapsed: bool) -> str:
        flags = file_flags(node.payload) if isinstance(node, FileNode) else flags_by_path[node.path]
        return file_line(
            node,
            tree_depth,
            visual_depth,
            is_collapsed,
            flags.has_unstaged_changes,
            flags.has_staged_changes,
            configs,
            show_icons=show_icons,
            theme=theme,
        )

    return render_tree(root, collapsed_paths, render_line)


__all__ = [
    "EXPANDED_ARROW",
    "COLLAPSED_ARROW",
    "SUBMODULE_SUFFIX",
    "ChangeFlags",
    "file_flags",
    "change_flags",
    "format_file_status",
    "file_line",
    "render_file_tree",
]
