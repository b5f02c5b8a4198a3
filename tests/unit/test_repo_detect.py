"""Tests for pygit2-backed repository detection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from repo.detect import Repository, detect_repository, ensure_tmp_dir
from repo.errors import RepositoryDetectionError

pygit2 = pytest.importorskip("pygit2")

if TYPE_CHECKING:
    from pygit2 import Repository as GitRepository


def _commit_file(repo: GitRepository, path: Path, content: str) -> str:
    path.write_text(content, encoding="utf-8")
    repo.index.add(path.name)
    repo.index.write()
    author = pygit2.Signature("Test User", "test@example.com")
    tree_id = repo.index.write_tree()
    commit_id = repo.create_commit("HEAD", author, author, "commit", tree_id, [])
    return str(commit_id)


def test_detects_commit_and_rewrites_github_ssh_remote(tmp_path: Path) -> None:
    """Commit id, root dir and origin URL are reported."""
    repo = pygit2.init_repository(str(tmp_path), bare=False)
    commit_id = _commit_file(repo, tmp_path / "main.go", "package main\n")
    repo.remotes.create("origin", "git@github.com:foo/bar.git")
    (tmp_path / "sub").mkdir()

    detected = detect_repository(tmp_path / "sub")
    assert detected.vcs_type == "git"
    assert detected.commit_id == commit_id
    assert detected.clone_url == "git://github.com/foo/bar.git"
    assert Path(detected.root_dir).resolve() == tmp_path.resolve()


def test_unborn_head_has_no_commit(tmp_path: Path) -> None:
    """Fresh repositories have a root dir but no commit or clone URL."""
    pygit2.init_repository(str(tmp_path), bare=False)
    detected = detect_repository(tmp_path)
    assert detected.vcs_type == "git"
    assert detected.commit_id == ""
    assert detected.clone_url == ""


def test_non_repository_dir_is_empty(tmp_path: Path) -> None:
    """Directories outside any repository yield empty metadata."""
    if pygit2.discover_repository(str(tmp_path)) is not None:
        pytest.skip("tmp_path is inside a git repository")
    assert detect_repository(tmp_path) == Repository()


def test_missing_dir_raises(tmp_path: Path) -> None:
    """A missing directory is an error."""
    with pytest.raises(RepositoryDetectionError):
        detect_repository(tmp_path / "nope")


def test_output_file_and_tmp_dir(tmp_path: Path) -> None:
    """Output files are named after the root dir and commit."""
    cache = ensure_tmp_dir(tmp_path / "cache")
    assert cache.is_dir()
    repository = Repository(root_dir=str(tmp_path / "proj"), commit_id="abc123")
    assert repository.output_file(cache) == cache / "proj-abc123.json"
