"""Git output parsing and repository collection tests."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from changetree import git_status
from changetree.git_status import (
    collect_commit_files,
    collect_submodule_configs,
    collect_working_tree_files,
    parse_name_status,
    parse_porcelain_status,
    parse_submodule_paths,
    parse_worktree_paths,
    resolve_repo_root,
)
from changetree.models import CommitFile, SubmoduleConfig, WorkingFile


class ParseGitOutputTests(unittest.TestCase):
    def test_parse_porcelain_status_captures_rename_source(self) -> None:
        output = " M src/app.py\0R  new.txt\0old.txt\0?? notes/\0!! build/out.o\0A  lib/x.py\0"

        files = parse_porcelain_status(output)

        self.assertEqual(
            files,
            [
                WorkingFile("src/app.py", " M"),
                WorkingFile("new.txt", "R ", previous_name="old.txt"),
                WorkingFile("notes", "??"),
                WorkingFile("lib/x.py", "A "),
            ],
        )

    def test_parse_porcelain_status_ignores_empty_output(self) -> None:
        self.assertEqual(parse_porcelain_status(""), [])

    def test_parse_name_status_uses_rename_destination(self) -> None:
        output = "M\0src/app.py\0R087\0old/name.py\0new/name.py\0A\0added.txt\0D\0gone.txt\0"

        files = parse_name_status(output)

        self.assertEqual(
            files,
            [
                CommitFile("src/app.py", "M"),
                CommitFile("new/name.py", "R", previous_name="old/name.py"),
                CommitFile("added.txt", "A"),
                CommitFile("gone.txt", "D"),
            ],
        )

    def test_parse_submodule_paths(self) -> None:
        output = "submodule.vendor/lib.path vendor/lib\nsubmodule.docs.path ext/docs\nsomething.else value\n"

        self.assertEqual(
            parse_submodule_paths(output),
            [SubmoduleConfig("vendor/lib", "vendor/lib"), SubmoduleConfig("docs", "ext/docs")],
        )

    def test_parse_worktree_paths_keeps_nested_linked_worktrees(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            output = (
                f"worktree {root}\nHEAD abc\nbranch refs/heads/main\n\n"
                f"worktree {root / 'trees' / 'feature'}\nHEAD def\nbranch refs/heads/feature\n\n"
                f"worktree {root.parent / 'elsewhere'}\nHEAD 123\ndetached\n"
            )

            self.assertEqual(parse_worktree_paths(output, root), {"trees/feature"})

    def test_missing_git_yields_empty_results(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with mock.patch("changetree.git_status.subprocess.run", side_effect=FileNotFoundError("git")):
                self.assertIsNone(resolve_repo_root(root))
                self.assertEqual(collect_working_tree_files(root), [])
                self.assertEqual(collect_commit_files(root, "HEAD"), [])

    def test_submodules_skipped_without_gitmodules_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(git_status, "_run_git") as run_git:
                self.assertEqual(collect_submodule_configs(Path(tmp)), [])
            run_git.assert_not_called()


@unittest.skipIf(shutil.which("git") is None, "git is required for repository collection tests")
class GitRepositoryTests(unittest.TestCase):
    def _git(self, root: Path, *args: str) -> None:
        subprocess.run(["git", *args], cwd=root, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)

    def _init_repo(self, root: Path) -> None:
        self._git(root, "init", "-q")
        self._git(root, "config", "user.email", "tests@example.com")
        self._git(root, "config", "user.name", "Tests")
        self._git(root, "config", "commit.gpgsign", "false")

    def test_collect_working_tree_and_commit_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._init_repo(root)
            (root / "src").mkdir()
            (root / "src" / "app.py").write_text("x = 1\n", encoding="utf-8")
            (root / "keep.txt").write_text("keep\n", encoding="utf-8")
            self._git(root, "add", "-A")
            self._git(root, "commit", "-q", "-m", "initial")

            (root / "src" / "app.py").write_text("x = 2\n", encoding="utf-8")
            (root / "docs").mkdir()
            (root / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")
            (root / "staged.txt").write_text("s\n", encoding="utf-8")
            self._git(root, "add", "staged.txt")

            self.assertEqual(resolve_repo_root(root / "src"), root)
            working = {file.name: file.short_status for file in collect_working_tree_files(root)}
            self.assertEqual(working, {"src/app.py": " M", "docs/guide.md": "??", "staged.txt": "A "})

            commit_files = collect_commit_files(root, "HEAD")
            self.assertEqual(
                sorted((file.name, file.change_status) for file in commit_files),
                [("keep.txt", "A"), ("src/app.py", "A")],
            )

    def test_non_repository_resolves_to_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(Path(tmp).resolve().parent)}):
                self.assertIsNone(resolve_repo_root(Path(tmp)))


if __name__ == "__main__":
    unittest.main()
