"""Tests for repository path resolution."""

from pathlib import Path

import pytest

from repolink.core.exceptions import NotARepositoryError
from repolink.git.paths import find_repo_root, relative_path


@pytest.fixture
def fake_repo(tmp_path: Path) -> Path:
    """A directory tree with a bare .git marker, no git needed."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "mod.py").write_text("x = 1\n")
    (root / "top.txt").write_text("top\n")
    return root


@pytest.mark.unit
class TestFindRepoRoot:
    """Tests for find_repo_root."""

    def test_from_nested_file(self, fake_repo: Path) -> None:
        assert find_repo_root(fake_repo / "src" / "pkg" / "mod.py") == fake_repo.resolve()

    def test_from_directory(self, fake_repo: Path) -> None:
        assert find_repo_root(fake_repo / "src") == fake_repo.resolve()

    def test_git_file_marker(self, tmp_path: Path) -> None:
        worktree = tmp_path / "worktree"
        worktree.mkdir()
        (worktree / ".git").write_text("gitdir: /elsewhere/.git/worktrees/w\n")
        (worktree / "file.txt").write_text("x\n")
        assert find_repo_root(worktree / "file.txt") == worktree.resolve()

    def test_nearest_ancestor_wins(self, fake_repo: Path) -> None:
        sub = fake_repo / "src" / "pkg"
        (sub / ".git").mkdir()
        assert find_repo_root(sub / "mod.py") == sub.resolve()

    def test_not_a_repository(self, tmp_path: Path) -> None:
        target = tmp_path / "loose.txt"
        target.write_text("x\n")
        if any((p / ".git").exists() for p in tmp_path.resolve().parents):
            pytest.skip("temporary directory lives inside a repository")
        with pytest.raises(NotARepositoryError):
            find_repo_root(target)


@pytest.mark.unit
class TestRelativePath:
    """Tests for relative_path."""

    def test_two_levels_deep(self, fake_repo: Path) -> None:
        assert relative_path(fake_repo / "src" / "pkg" / "mod.py") == "src/pkg/mod.py"

    def test_top_level(self, fake_repo: Path) -> None:
        assert relative_path(str(fake_repo / "top.txt")) == "top.txt"

    def test_with_known_root(self, fake_repo: Path) -> None:
        path = fake_repo / "src" / "pkg" / "mod.py"
        assert relative_path(path, fake_repo) == "src/pkg/mod.py"

    def test_outside_known_root(self, fake_repo: Path, tmp_path: Path) -> None:
        stray = tmp_path / "stray.txt"
        stray.write_text("x\n")
        with pytest.raises(NotARepositoryError) as exc_info:
            relative_path(stray, fake_repo)
        assert exc_info.value.details["root"] == str(fake_repo.resolve())
