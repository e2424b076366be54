"""Commit-file row rendering tests keyed by custom-patch status."""

from __future__ import annotations

import unittest

from changetree.file_tree import CollapsedPaths, DirectoryNode, FileNode, build_file_tree
from changetree.models import CommitFile
from changetree.patch import PatchSelection, PatchStatus
from changetree.presentation import commit_file_line, icon_for_file, render_commit_file_tree
from changetree.presentation.commit_files import color_for_change_status
from changetree.ui_theme import DEFAULT_THEME, PLAIN_THEME

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"
REF = "deadbeef"


class RenderCommitFileTreeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = build_file_tree(
            [
                CommitFile("src/a.py", "M"),
                CommitFile("src/b.py", "A"),
                CommitFile("README.md", "D"),
            ]
        )
        self.selection = PatchSelection()

    def _render(self, **kwargs) -> list[str]:
        return render_commit_file_tree(
            self.tree,
            kwargs.pop("collapsed", CollapsedPaths()),
            self.selection.get_file_status,
            REF,
            **kwargs,
        )

    def test_unselected_rows_show_change_status_letters(self) -> None:
        self.assertEqual(
            self._render(),
            [
                "▼ src",
                f"  {DEFAULT_THEME.yellow}M{RESET} a.py",
                f"  {GREEN}A{RESET} b.py",
                f"{RED}D{RESET} README.md",
            ],
        )

    def test_partly_selected_directory_has_staged_arrow_only(self) -> None:
        self.selection.set_file_status("src/a.py", REF, PatchStatus.WHOLE)

        lines = self._render()

        self.assertEqual(lines[0], f"{GREEN}▼{RESET} src")
        self.assertEqual(lines[1], f"  {GREEN}●{RESET} {GREEN}a.py{RESET}")
        self.assertEqual(lines[2], f"  {GREEN}A{RESET} b.py")

    def test_wholly_selected_directory_colors_arrow_and_name(self) -> None:
        self.selection.set_file_status("src/a.py", REF, PatchStatus.WHOLE)
        self.selection.set_file_status("src/b.py", REF, PatchStatus.WHOLE)

        lines = self._render(collapsed=CollapsedPaths(["src"]))

        self.assertEqual(lines, [f"{GREEN}▶{RESET} {GREEN}src{RESET}", f"{RED}D{RESET} README.md"])

    def test_part_file_uses_half_circle_and_default_name(self) -> None:
        self.selection.set_file_status("README.md", REF, PatchStatus.PART)

        self.assertEqual(self._render()[-1], f"{GREEN}◐{RESET} README.md")

    def test_selection_for_other_ref_is_ignored(self) -> None:
        self.selection.set_file_status("README.md", "other", PatchStatus.WHOLE)

        self.assertEqual(self._render()[-1], f"{RED}D{RESET} README.md")

    def test_icons_only_add_glyph_and_separator(self) -> None:
        self.selection.set_file_status("src/a.py", REF, PatchStatus.PART)
        plain = self._render()
        with_icons = self._render(show_icons=True)

        names = [("src", True), ("a.py", False), ("b.py", False), ("README.md", False)]
        for icon_line, plain_line, (name, is_directory) in zip(with_icons, plain, names):
            icon = icon_for_file(name, False, False, is_directory)
            segment = f"\033[38;5;{icon.color}m{icon.glyph}{RESET} "
            self.assertEqual(icon_line.replace(segment, "", 1), plain_line)

    def test_none_root_renders_nothing(self) -> None:
        self.assertEqual(render_commit_file_tree(None, CollapsedPaths(), self.selection.get_file_status, REF), [])


class CommitFileLineTests(unittest.TestCase):
    def test_change_status_color_map(self) -> None:
        theme = DEFAULT_THEME
        self.assertEqual(color_for_change_status("A", theme), theme.green)
        self.assertEqual(color_for_change_status("M", theme), theme.yellow)
        self.assertEqual(color_for_change_status("R", theme), theme.yellow)
        self.assertEqual(color_for_change_status("D", theme), theme.unstaged)
        self.assertEqual(color_for_change_status("C", theme), theme.cyan)
        self.assertEqual(color_for_change_status("T", theme), theme.magenta)
        self.assertEqual(color_for_change_status("X", theme), theme.default_text)

    def test_compressed_directory_line_uses_tree_depth_for_name(self) -> None:
        node = DirectoryNode("pkg/gui/blah", (), compression_level=1)

        line = commit_file_line(node, 1, 1, False, PatchStatus.UNSELECTED, theme=PLAIN_THEME)

        self.assertEqual(line, "  ▼ gui/blah")

    def test_commit_file_name_is_escaped(self) -> None:
        node = FileNode("tab\there.txt", CommitFile("tab\there.txt", "A"))

        line = commit_file_line(node, 0, 0, False, PatchStatus.UNSELECTED, theme=PLAIN_THEME)

        self.assertEqual(line, "A tab\\there.txt")


class DuplicateCommitPathTests(unittest.TestCase):
    def test_each_duplicate_leaf_is_resolved_through_lookup(self) -> None:
        tree = build_file_tree([CommitFile("dir/foo", "D"), CommitFile("dir/foo", "A"), CommitFile("dir/bar", "M")])
        calls: list[str] = []

        def lookup(file_name: str, ref_name: str) -> PatchStatus:
            calls.append(file_name)
            return PatchStatus.WHOLE if file_name == "dir/foo" else PatchStatus.UNSELECTED

        lines = render_commit_file_tree(tree, CollapsedPaths(), lookup, REF, theme=PLAIN_THEME)

        self.assertEqual(lines, ["▼ dir", "  M bar", "  ● foo", "  ● foo"])
        self.assertEqual(calls.count("dir/foo"), 4)


if __name__ == "__main__":
    unittest.main()
