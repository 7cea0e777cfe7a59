"""Protocol-specific configuration.

This module contains version numbers and contract addresses for the
DeFi protocols the integration layer talks to.

Currently covered:
- Aave (src.protocols.aave)
- Balancer (src.protocols.balancer)
- Uniswap (src.protocols.uniswap)
- SushiSwap (src.protocols.sushiswap)
"""

# Note: Import specific modules as needed:
#   from src.protocols.aave.config import AAVE_VERSION
#   from src.protocols.uniswap.config import UNISWAP_ROUTER
