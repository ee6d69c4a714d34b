"""Repository inspection through the git CLI."""

import re
import subprocess
from pathlib import Path
from typing import Protocol

import structlog

from repolink.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)


class RepositoryInspector(Protocol):
    """What link building needs to know about a repository."""

    def get_remote_url(self, name: str = "origin") -> str | None: ...

    def get_current_branch(self) -> str: ...


class GitRepoInspector:
    """Reads remote and branch information from a local repository.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, repo_path: str | Path, git_executable: str = "git") -> None:
        self._repo_path = Path(repo_path).resolve()
        self._git = git_executable

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        command = [self._git, *args]
        try:
            result = subprocess.run(
                command,
                cwd=self._repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(
                f"git executable not found: {self._git}",
                details={"command": command},
            ) from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {' '.join(args)} failed with exit code {e.returncode}",
                details={
                    "command": command,
                    "returncode": e.returncode,
                    "stderr": (e.stderr or "").strip(),
                },
            ) from e
        return result.stdout.strip()

    def get_remote_url(self, name: str = "origin") -> str | None:
        """Get the URL of the named remote, if configured.

        Parses ``git remote -v`` lines of the form ``<name>\\t<url> (fetch)``
        and returns the first URL listed for ``name``.
        """
        output = self._run_git("remote", "-v")
        pattern = re.compile(rf"^{re.escape(name)}\s+(\S+)")
        for line in output.splitlines():
            match = pattern.match(line)
            if match:
                return match.group(1)

        logger.debug("Remote not configured", remote=name, repo=str(self._repo_path))
        return None

    def get_current_branch(self) -> str:
        """Get the checked-out branch name.

        Raises GitCommandError when HEAD is detached.
        """
        return self._run_git("symbolic-ref", "--short", "HEAD")
