"""Registry constant table model."""

from dataclasses import dataclass, fields
from typing import List, Tuple

from src.core import constants as c
from src.core.address import is_uint256, is_valid_address


class RegistryConfigError(ValueError):
    """Raised when a constant table violates a registry invariant."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid registry constants: " + "; ".join(errors))


@dataclass(frozen=True)
class RegistryConstants:
    """One complete, immutable constant table for the config registry."""

    # Master key triple (uint256 each)
    key_a: int = c.KEY_A
    key_b: int = c.KEY_B
    key_c: int = c.KEY_C

    # Protocol versions
    aave_version: int = c.AAVE_VERSION
    balancer_version: int = c.BALANCER_VERSION
    uniswap_version: int = c.UNISWAP_VERSION

    # Safety limits
    min_flash_loan_amount: int = c.MIN_FLASH_LOAN_AMOUNT  # wei
    max_flash_loan_amount: int = c.MAX_FLASH_LOAN_AMOUNT  # wei
    max_slippage: int = c.MAX_SLIPPAGE  # bps

    # Network addresses
    weth_address: str = c.WETH_ADDRESS
    usdc_address: str = c.USDC_ADDRESS
    dai_address: str = c.DAI_ADDRESS
    uniswap_router: str = c.UNISWAP_ROUTER
    sushiswap_router: str = c.SUSHISWAP_ROUTER

    chain_id: int = c.ETHEREUM_MAINNET_CHAIN_ID

    @property
    def keys(self) -> Tuple[int, int, int]:
        return (self.key_a, self.key_b, self.key_c)

    @property
    def stablecoins(self) -> Tuple[str, str]:
        """Supported stablecoin addresses as stored."""
        return (self.usdc_address, self.dai_address)

    def address_fields(self) -> List[Tuple[str, str]]:
        """(field_name, address) pairs for every address in the table."""
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if f.name.endswith(("_address", "_router"))
        ]

    def validate(self) -> None:
        """Check the table invariants.

        Raises:
            RegistryConfigError: Listing every violated invariant
        """
        errors = []

        for name, key in zip(("key_a", "key_b", "key_c"), self.keys):
            if not is_uint256(key):
                errors.append(f"{name} must be a uint256 value")

        if not self.min_flash_loan_amount > 0:
            errors.append("min_flash_loan_amount must be positive")
        if not self.max_flash_loan_amount > 0:
            errors.append("max_flash_loan_amount must be positive")
        if not self.min_flash_loan_amount < self.max_flash_loan_amount:
            errors.append("min_flash_loan_amount must be below max_flash_loan_amount")

        if not 0 <= self.max_slippage <= c.BPS_DENOMINATOR:
            errors.append(f"max_slippage must be within 0..{c.BPS_DENOMINATOR} bps")

        for name, address in self.address_fields():
            if not is_valid_address(address):
                errors.append(f"{name} is not a valid address: {address!r}")

        if errors:
            raise RegistryConfigError(errors)
