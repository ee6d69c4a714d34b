"""Utility functions for repolink."""

from repolink.utils.regions import line_number_at, line_range_from_region

__all__ = ["line_number_at", "line_range_from_region"]
