"""Safety limits for flash loans and swaps.

Amounts are in wei (smallest unit of the native asset).
"""

from src.core.constants.generic import WAD

# Flash-loan bounds (inclusive)
MIN_FLASH_LOAN_AMOUNT = WAD // 10  # 0.1 ETH
MAX_FLASH_LOAN_AMOUNT = 1_000 * WAD  # 1,000 ETH

# Maximum slippage tolerance in basis points
MAX_SLIPPAGE = 500  # 5%
