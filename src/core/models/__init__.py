"""Core data models for the config registry."""

from .registry import RegistryConstants, RegistryConfigError

__all__ = [
    "RegistryConstants",
    "RegistryConfigError",
]
