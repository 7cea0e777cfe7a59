"""Core module - models, constants and address helpers."""

from .constants import ETHEREUM_MAINNET_CHAIN_ID, WAD, BPS_DENOMINATOR
from .models import RegistryConstants, RegistryConfigError

__all__ = [
    "RegistryConstants",
    "RegistryConfigError",
    "ETHEREUM_MAINNET_CHAIN_ID",
    "WAD",
    "BPS_DENOMINATOR",
]
