"""Core domain models and exceptions for repolink."""

from repolink.core.exceptions import (
    ConfigurationError,
    GitCommandError,
    InvalidRegionError,
    NotARepositoryError,
    RemoteNotFoundError,
    RepolinkError,
    RepositoryError,
    UnsupportedProviderError,
    ValidationError,
)
from repolink.core.models import LineRange, LinkContext, Provider

__all__ = [
    # Models
    "LineRange",
    "LinkContext",
    "Provider",
    # Exceptions
    "RepolinkError",
    "ConfigurationError",
    "ValidationError",
    "InvalidRegionError",
    "RepositoryError",
    "NotARepositoryError",
    "RemoteNotFoundError",
    "GitCommandError",
    "UnsupportedProviderError",
]
