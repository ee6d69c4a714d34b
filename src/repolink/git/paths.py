"""Locate repository roots and repo-relative file paths."""

from pathlib import Path

from repolink.core.exceptions import NotARepositoryError


def find_repo_root(path: str | Path) -> Path:
    """Return the nearest ancestor of ``path`` that contains a ``.git`` entry.

    The search starts at ``path`` itself when it is a directory, otherwise at
    its parent. ``.git`` may be a directory or a file (worktrees, submodules).
    """
    start = Path(path).expanduser().resolve()
    if not start.is_dir():
        start = start.parent

    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate

    raise NotARepositoryError(
        f"Not inside a Git repository: {path}",
        details={"path": str(path)},
    )


def relative_path(file_absolute_path: str | Path, root: str | Path | None = None) -> str:
    """Return ``file_absolute_path`` relative to its repository root.

    ``root`` skips the upward search when the caller already found it.
    Always joined with forward slashes.
    """
    path = Path(file_absolute_path).expanduser().resolve()
    root = find_repo_root(path) if root is None else Path(root).resolve()
    try:
        return path.relative_to(root).as_posix()
    except ValueError as e:
        raise NotARepositoryError(
            f"{file_absolute_path} is not inside repository {root}",
            details={"path": str(file_absolute_path), "root": str(root)},
        ) from e
