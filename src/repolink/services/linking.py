"""Link service."""

from collections.abc import Callable
from pathlib import Path

import structlog

from repolink.config.logging import ensure_logging_configured
from repolink.config.settings import Settings, get_settings
from repolink.core.exceptions import RemoteNotFoundError, UnsupportedProviderError
from repolink.core.models.link import LinkContext
from repolink.git.inspector import GitRepoInspector, RepositoryInspector
from repolink.git.link_builder import LinkBuilder, classify_provider, normalize_remote_url
from repolink.git.paths import find_repo_root, relative_path

logger = structlog.get_logger(__name__)

InspectorFactory = Callable[[Path], RepositoryInspector]


class LinkService:
    """Turns editor context into a shareable link."""

    def __init__(
        self,
        settings: Settings | None = None,
        inspector_factory: InspectorFactory | None = None,
        builder: LinkBuilder | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        ensure_logging_configured(self._settings.log_level)
        self._inspector_factory = inspector_factory or self._default_inspector
        self._builder = builder or LinkBuilder()

    def _default_inspector(self, repo_path: Path) -> RepositoryInspector:
        return GitRepoInspector(repo_path, git_executable=self._settings.git_executable)

    def build_link_for(self, context: LinkContext) -> str:
        """Build the link for the file (and selection) in ``context``.

        Raises NotARepositoryError, RemoteNotFoundError, GitCommandError or
        UnsupportedProviderError instead of returning a partial link.
        """
        file_path = Path(context.current_file_path).expanduser().resolve()
        repo_root = find_repo_root(file_path)
        rel_path = relative_path(file_path, repo_root)

        inspector = self._inspector_factory(repo_root)
        remote_name = context.remote_name or self._settings.default_remote
        remote_url = self._require_remote(inspector, remote_name, repo_root)
        branch = inspector.get_current_branch()

        logger.debug(
            "Building link",
            repo=str(repo_root),
            path=rel_path,
            remote=remote_url,
            branch=branch,
            selection=context.selection.model_dump() if context.selection else None,
        )

        url = self._builder.build(remote_url, branch, rel_path, context.selection)
        if url is None:
            raise UnsupportedProviderError(
                f"Unsupported hosting provider for remote '{remote_name}': {remote_url}",
                details={"remote": remote_name, "url": remote_url},
            )
        return url

    def remote_web_url(self, path: str, remote_name: str | None = None) -> str:
        """Return the browsing URL of the repository containing ``path``."""
        repo_root = find_repo_root(path)
        inspector = self._inspector_factory(repo_root)
        remote_name = remote_name or self._settings.default_remote
        remote_url = self._require_remote(inspector, remote_name, repo_root)
        if classify_provider(remote_url) is None:
            raise UnsupportedProviderError(
                f"Unsupported hosting provider for remote '{remote_name}': {remote_url}",
                details={"remote": remote_name, "url": remote_url},
            )
        return normalize_remote_url(remote_url)

    @staticmethod
    def _require_remote(
        inspector: RepositoryInspector, remote_name: str, repo_root: Path
    ) -> str:
        remote_url = inspector.get_remote_url(remote_name)
        if remote_url is None:
            raise RemoteNotFoundError(
                f"Remote not found: {remote_name}",
                details={"remote": remote_name, "repo": str(repo_root)},
            )
        return remote_url
