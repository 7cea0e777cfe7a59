"""Core constants module.

Re-exports the whole constant table under its public names.
"""

from src.core.constants.generic import (
    WAD,
    BPS_DENOMINATOR,
    UINT256_BITS,
    UINT256_MAX,
    ADDRESS_BITS,
    ADDRESS_MASK,
    ZERO_ADDRESS,
)

from src.core.constants.chains import ETHEREUM_MAINNET_CHAIN_ID

from src.core.constants.tokens import (
    WETH_ADDRESS,
    USDC_ADDRESS,
    DAI_ADDRESS,
    KNOWN_TOKENS,
    SUPPORTED_STABLECOINS,
)

from src.core.constants.limits import (
    MIN_FLASH_LOAN_AMOUNT,
    MAX_FLASH_LOAN_AMOUNT,
    MAX_SLIPPAGE,
)

from src.core.constants.keys import KEY_A, KEY_B, KEY_C

# Protocol-specific constants live in src.protocols.<name>.config
from src.protocols.aave.config import AAVE_VERSION
from src.protocols.balancer.config import BALANCER_VERSION
from src.protocols.uniswap.config import UNISWAP_VERSION, UNISWAP_ROUTER
from src.protocols.sushiswap.config import SUSHISWAP_ROUTER

__all__ = [
    # Generic
    "WAD",
    "BPS_DENOMINATOR",
    "UINT256_BITS",
    "UINT256_MAX",
    "ADDRESS_BITS",
    "ADDRESS_MASK",
    "ZERO_ADDRESS",
    # Chains
    "ETHEREUM_MAINNET_CHAIN_ID",
    # Tokens
    "WETH_ADDRESS",
    "USDC_ADDRESS",
    "DAI_ADDRESS",
    "KNOWN_TOKENS",
    "SUPPORTED_STABLECOINS",
    # Limits
    "MIN_FLASH_LOAN_AMOUNT",
    "MAX_FLASH_LOAN_AMOUNT",
    "MAX_SLIPPAGE",
    # Master key triple
    "KEY_A",
    "KEY_B",
    "KEY_C",
    # Protocols
    "AAVE_VERSION",
    "BALANCER_VERSION",
    "UNISWAP_VERSION",
    "UNISWAP_ROUTER",
    "SUSHISWAP_ROUTER",
]
