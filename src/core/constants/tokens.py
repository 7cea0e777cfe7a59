"""Token addresses (Ethereum mainnet)."""

WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"

# Known tokens
# Format: (display_name, address)
KNOWN_TOKENS = [
    ("WETH", WETH_ADDRESS),
    ("USDC", USDC_ADDRESS),
    ("DAI", DAI_ADDRESS),
]

# Stablecoins accepted by the integration layer
SUPPORTED_STABLECOINS = (USDC_ADDRESS, DAI_ADDRESS)
