"""Uniswap protocol configuration and constants."""

UNISWAP_VERSION = 3

# Uniswap V3 SwapRouter (Ethereum Mainnet)
UNISWAP_ROUTER = "0xE592427A0AEce92De3Edee1F18E0157C05861564"
