"""Git data collection for working-tree and commit file trees.

Runs plain ``git`` subprocesses with short timeouts. Any failure (missing git,
non-zero exit, timeout) yields an empty result so callers render nothing
rather than crash.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .models import CommitFile, SubmoduleConfig, WorkingFile

GIT_TIMEOUT_SECONDS = 2.0


def _run_git(repo_root: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except Exception:
        return None


def resolve_repo_root(path: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> Path | None:
    """Return the top-level directory of the repo containing ``path``."""
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    top = proc.stdout.strip()
    if not top:
        return None
    return Path(top).resolve()


def parse_porcelain_status(output: str) -> list[WorkingFile]:
    """Parse ``git status --porcelain=v1 -z`` output into working files."""
    files: list[WorkingFile] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        name = token[3:].rstrip("/")
        previous_name = ""
        # Renamed/copied records carry the source path as the next token.
        if "R" in status or "C" in status:
            if index < len(tokens):
                previous_name = tokens[index]
            index += 1
        if status == "!!" or not name:
            continue
        files.append(WorkingFile(name=name, short_status=status, previous_name=previous_name))
    return files


def parse_name_status(output: str) -> list[CommitFile]:
    """Parse ``git diff-tree --name-status -z`` output into commit files."""
    files: list[CommitFile] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        status = tokens[index]
        index += 1
        if not status:
            continue
        change_status = status[0]
        if change_status in {"R", "C"}:
            if index + 1 >= len(tokens):
                break
            previous_name, name = tokens[index], tokens[index + 1]
            index += 2
        else:
            if index >= len(tokens):
                break
            previous_name, name = "", tokens[index]
            index += 1
        if name:
            files.append(CommitFile(name=name, change_status=change_status, previous_name=previous_name))
    return files


def parse_submodule_paths(output: str) -> list[SubmoduleConfig]:
    """Parse ``git config --get-regexp`` output of ``submodule.<name>.path`` keys."""
    configs: list[SubmoduleConfig] = []
    for line in output.splitlines():
        key, _sep, value = line.partition(" ")
        if not key.startswith("submodule.") or not key.endswith(".path") or not value:
            continue
        name = key[len("submodule.") : -len(".path")]
        configs.append(SubmoduleConfig(name=name, path=value.strip()))
    return configs


def parse_worktree_paths(output: str, repo_root: Path) -> set[str]:
    """Return linked worktree paths from ``git worktree list --porcelain``, relative to ``repo_root``."""
    paths: set[str] = set()
    for line in output.splitlines():
        if not line.startswith("worktree "):
            continue
        worktree = Path(line[len("worktree ") :]).resolve()
        if worktree == repo_root or not worktree.is_relative_to(repo_root):
            continue
        paths.add(worktree.relative_to(repo_root).as_posix())
    return paths


def collect_submodule_configs(repo_root: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> list[SubmoduleConfig]:
    if not (repo_root / ".gitmodules").is_file():
        return []
    proc = _run_git(
        repo_root,
        ["config", "--file", ".gitmodules", "--get-regexp", r"^submodule\..*\.path$"],
        timeout_seconds,
    )
    if proc is None or proc.returncode != 0:
        return []
    return parse_submodule_paths(proc.stdout)


def collect_linked_worktree_paths(repo_root: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> set[str]:
    proc = _run_git(repo_root, ["worktree", "list", "--porcelain"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return set()
    return parse_worktree_paths(proc.stdout, repo_root.resolve())


def collect_working_tree_files(repo_root: Path, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> list[WorkingFile]:
    """Return changed and untracked files of the working tree at ``repo_root``.

    Files sitting at a linked worktree path are flagged ``is_worktree``.
    """
    proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        timeout_seconds,
    )
    if proc is None or proc.returncode != 0:
        return []

    files = parse_porcelain_status(proc.stdout)
    worktree_paths = collect_linked_worktree_paths(repo_root, timeout_seconds)
    if not worktree_paths:
        return files
    return [
        WorkingFile(file.name, file.short_status, file.previous_name, is_worktree=file.name in worktree_paths)
        for file in files
    ]


def collect_commit_files(repo_root: Path, ref: str, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> list[CommitFile]:
    """Return files changed by commit ``ref`` (root commits diff against the empty tree)."""
    proc = _run_git(
        repo_root,
        ["diff-tree", "-r", "--root", "--no-commit-id", "--name-status", "-z", "-M", ref],
        timeout_seconds,
    )
    if proc is None or proc.returncode != 0:
        return []
    return parse_name_status(proc.stdout)


__all__ = [
    "GIT_TIMEOUT_SECONDS",
    "resolve_repo_root",
    "parse_porcelain_status",
    "parse_name_status",
    "parse_submodule_paths",
    "parse_worktree_paths",
    "collect_submodule_configs",
    "collect_linked_worktree_paths",
    "collect_working_tree_files",
    "collect_commit_files",
]
