"""Configuration for repolink."""

from repolink.config.logging import configure_logging, ensure_logging_configured
from repolink.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "ensure_logging_configured", "get_settings"]
