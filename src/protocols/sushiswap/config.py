"""SushiSwap protocol configuration and constants."""

# SushiSwap V2 router (Ethereum Mainnet)
SUSHISWAP_ROUTER = "0xd9e1cE17f2641f24aE83637ab66a2cca9C378B9F"
