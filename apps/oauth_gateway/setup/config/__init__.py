"""Configuration."""

from apps.oauth_gateway.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
