"""Balancer protocol configuration."""

from src.protocols.balancer.config import BALANCER_VERSION

__all__ = ["BALANCER_VERSION"]
