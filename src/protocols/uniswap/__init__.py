"""Uniswap protocol configuration."""

from src.protocols.uniswap.config import UNISWAP_VERSION, UNISWAP_ROUTER

__all__ = ["UNISWAP_VERSION", "UNISWAP_ROUTER"]
