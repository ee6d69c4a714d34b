"""Domain models for repolink."""

from repolink.core.models.link import LineRange, LinkContext, Provider

__all__ = [
    "LineRange",
    "LinkContext",
    "Provider",
]
