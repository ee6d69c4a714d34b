"""Exception hierarchy for repolink."""

from typing import Any


class RepolinkError(Exception):
    """Base exception for all repolink errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RepolinkError):
    """Invalid or missing configuration."""


class ValidationError(RepolinkError):
    """Invalid input supplied by the caller."""


class InvalidRegionError(ValidationError):
    """A marked region does not fit inside its text."""


class RepositoryError(RepolinkError):
    """Problem with the local Git repository."""


class NotARepositoryError(RepositoryError):
    """No ancestor directory of a file contains a .git entry."""


class RemoteNotFoundError(RepositoryError):
    """The named remote is not configured in the repository."""


class GitCommandError(RepositoryError):
    """A git invocation failed or git is not installed."""


class UnsupportedProviderError(RepolinkError):
    """The remote URL points at neither GitHub nor Bitbucket."""
