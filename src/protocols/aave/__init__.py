"""Aave protocol configuration."""

from src.protocols.aave.config import AAVE_VERSION

__all__ = ["AAVE_VERSION"]
