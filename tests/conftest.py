"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from git_helpers import run_git
from repolink.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Settings and logging config are process-wide; tests may change both."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository on branch main with a GitHub origin."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    run_git(repo_path, "init")
    run_git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    run_git(repo_path, "config", "user.email", "test@test.com")
    run_git(repo_path, "config", "user.name", "Test")
    run_git(repo_path, "remote", "add", "origin", "git@github.com:org/repo.git")

    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")
    (repo_path / "src" / "pkg").mkdir(parents=True)
    (repo_path / "src" / "pkg" / "main.py").write_text(
        "import sys\n\n\ndef main():\n    print('hello')\n"
    )

    run_git(repo_path, "add", ".")
    run_git(repo_path, "commit", "-m", "Initial commit")

    return repo_path
