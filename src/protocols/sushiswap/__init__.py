"""SushiSwap protocol configuration."""

from src.protocols.sushiswap.config import SUSHISWAP_ROUTER

__all__ = ["SUSHISWAP_ROUTER"]
