"""Generic constants for DeFi protocol calculations.

These constants are protocol-agnostic and can be used across different protocols.
"""

# Precision constants
WAD = 10**18  # Standard 18 decimal precision (ETH, WETH, DAI)

# Basis points: 1 bps = 0.01%
BPS_DENOMINATOR = 10_000

# EVM word and address widths
UINT256_BITS = 256
UINT256_MAX = 2**UINT256_BITS - 1
ADDRESS_BITS = 160
ADDRESS_MASK = 2**ADDRESS_BITS - 1

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
