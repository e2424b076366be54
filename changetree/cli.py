"""Command-line front door for changetree.

Collects working-tree or commit file changes from git, builds the display
tree, and prints one styled row per visible node.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .file_tree import CollapsedPaths, build_file_tree
from .git_status import (
    collect_commit_files,
    collect_submodule_configs,
    collect_working_tree_files,
    resolve_repo_root,
)
from .patch import PatchSelection, PatchStatus
from .presentation import render_commit_file_tree, render_file_tree
from .ui_theme import available_theme_names, resolve_theme


def _repo_relative_path(value: str) -> str:
    """argparse type for '/'-separated repo-relative paths."""
    normalized = value.strip().replace("\\", "/").strip("/")
    if not normalized:
        raise argparse.ArgumentTypeError(f"invalid repo-relative path: {value!r}")
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the changed files of a git working tree or commit as a styled tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Path inside the repository. Defaults to current directory.")
    parser.add_argument("--commit", metavar="REF", default=None, help="Show files changed by REF instead of the working tree.")
    parser.add_argument(
        "--collapse",
        metavar="DIR",
        action="append",
        default=[],
        type=_repo_relative_path,
        help="Collapse the directory row DIR (repeatable).",
    )
    parser.add_argument("--flat", action="store_true", help="List files flat instead of grouped by directory.")
    icons = parser.add_mutually_exclusive_group()
    icons.add_argument("--icons", dest="show_icons", action="store_true", default=None, help="Show nerd-font icons.")
    icons.add_argument("--no-icons", dest="show_icons", action="store_false", help="Hide nerd-font icons.")
    parser.set_defaults(show_icons=None)
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--include",
        metavar="FILE",
        action="append",
        default=[],
        type=_repo_relative_path,
        help="With --commit, mark FILE as wholly included in the custom patch (repeatable).",
    )
    parser.add_argument(
        "--include-part",
        metavar="FILE",
        action="append",
        default=[],
        type=_repo_relative_path,
        help="With --commit, mark FILE as partly included in the custom patch (repeatable).",
    )
    return parser


def render_lines(args: argparse.Namespace, repo_root: Path) -> list[str]:
    """Collect git state for ``repo_root`` and render it per parsed ``args``."""
    show_icons = args.show_icons if args.show_icons is not None else config.load_show_icons()
    show_tree = config.load_show_tree() and not args.flat
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    collapsed = CollapsedPaths(args.collapse)

    if args.commit is None:
        tree = build_file_tree(collect_working_tree_files(repo_root), show_tree=show_tree)
        return render_file_tree(
            tree,
            collapsed,
            collect_submodule_configs(repo_root),
            show_icons=show_icons,
            theme=theme,
        )

    selection = PatchSelection()
    for name in args.include:
        selection.set_file_status(name, args.commit, PatchStatus.WHOLE)
    for name in args.include_part:
        selection.set_file_status(name, args.commit, PatchStatus.PART)
    tree = build_file_tree(collect_commit_files(repo_root, args.commit), show_tree=show_tree)
    return render_commit_file_tree(
        tree,
        collapsed,
        selection.get_file_status,
        args.commit,
        show_icons=show_icons,
        theme=theme,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the change tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = build_parser()
    args = parser.parse_args()

    if (args.include or args.include_part) and args.commit is None:
        raise SystemExit("--include and --include-part require --commit.")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    start = path if path.is_dir() else path.parent

    repo_root = resolve_repo_root(start)
    if repo_root is None:
        raise SystemExit(f"Not a git repository: {path}")

    for line in render_lines(args, repo_root):
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
