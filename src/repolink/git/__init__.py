"""Git integration module for repolink."""

from repolink.git.inspector import GitRepoInspector, RepositoryInspector
from repolink.git.link_builder import (
    LinkBuilder,
    build_link,
    classify_provider,
    normalize_remote_url,
)
from repolink.git.paths import find_repo_root, relative_path

__all__ = [
    "GitRepoInspector",
    "LinkBuilder",
    "RepositoryInspector",
    "build_link",
    "classify_provider",
    "find_repo_root",
    "normalize_remote_url",
    "relative_path",
]
