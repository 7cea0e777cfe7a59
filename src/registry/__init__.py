"""Config registry: the read-only surface consumed by integration code."""

from src.registry.config_registry import ConfigRegistry, get_registry

__all__ = ["ConfigRegistry", "get_registry"]
