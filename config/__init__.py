"""Configuration module for the config registry."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
