"""Chain identifiers.

The registry is pinned to a single network context.
"""

ETHEREUM_MAINNET_CHAIN_ID = 1
