"""Static configuration registry.

Read-only access to protocol versions, token and router addresses and
safety limits, plus the master-address derivation and two validation
predicates. Every operation is pure and cannot fail.
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Any, Dict, Optional

from eth_typing import ChecksumAddress

from config.settings import Settings, get_settings
from src.core.address import (
    canonical_address,
    derive_master_address,
    shorten_address,
)
from src.core.constants import BPS_DENOMINATOR, KNOWN_TOKENS
from src.core.models import RegistryConstants

logger = logging.getLogger(__name__)


class ConfigRegistry:
    """Immutable registry over one constant table.

    Accessors return values exactly as stored in the table.
    """

    def __init__(
        self,
        constants: Optional[RegistryConstants] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self._constants = constants or RegistryConstants()

        if self.settings.registry_validate_on_load:
            self._constants.validate()

        self._stablecoins = frozenset(
            canonical_address(address) for address in self._constants.stablecoins
        )
        self._master_address: Optional[ChecksumAddress] = None
        if self.settings.registry_cache_master_address:
            self._master_address = derive_master_address(*self._constants.keys)
            logger.debug("Cached master address")

        logger.info(f"Loaded config registry for chain {self._constants.chain_id}")
        logger.debug("Registry constants: %s", self._constants)

    @property
    def constants(self) -> RegistryConstants:
        return self._constants

    # ========== DERIVED ==========

    def get_master_address(self) -> ChecksumAddress:
        """Low 160 bits of KEY_A ^ KEY_B ^ KEY_C as a checksummed address."""
        if self._master_address is not None:
            return self._master_address
        return derive_master_address(*self._constants.keys)

    # ========== VERSIONS ==========

    def get_aave_version(self) -> int:
        return self._constants.aave_version

    def get_balancer_version(self) -> int:
        return self._constants.balancer_version

    def get_uniswap_version(self) -> int:
        return self._constants.uniswap_version

    # ========== LIMITS ==========

    def get_max_flash_loan_amount(self) -> int:
        return self._constants.max_flash_loan_amount

    def get_min_flash_loan_amount(self) -> int:
        return self._constants.min_flash_loan_amount

    def get_max_slippage(self) -> int:
        """Maximum slippage in basis points."""
        return self._constants.max_slippage

    def slippage_fraction(self) -> Decimal:
        """Maximum slippage as a fraction (500 bps -> 0.05)."""
        return Decimal(self._constants.max_slippage) / Decimal(BPS_DENOMINATOR)

    # ========== ADDRESSES ==========

    def get_weth_address(self) -> str:
        return self._constants.weth_address

    def get_usdc_address(self) -> str:
        return self._constants.usdc_address

    def get_dai_address(self) -> str:
        return self._constants.dai_address

    def get_uniswap_router(self) -> str:
        return self._constants.uniswap_router

    def get_sushiswap_router(self) -> str:
        return self._constants.sushiswap_router

    def get_chain_id(self) -> int:
        return self._constants.chain_id

    # ========== PREDICATES ==========

    def is_supported_stablecoin(self, token: Any) -> bool:
        """Check whether a token is USDC or DAI.

        Args:
            token: Address as hex string or 160-bit int

        Returns:
            True iff the token matches a supported stablecoin. Malformed
            input, the zero address and unknown tokens all return False.
        """
        address = canonical_address(token)
        if address is None:
            return False
        return address in self._stablecoins

    def is_valid_flash_loan_amount(self, amount: Any) -> bool:
        """Check that an amount lies within the flash-loan bounds (inclusive).

        Args:
            amount: Amount in wei

        Returns:
            True iff min <= amount <= max. Non-integer input returns False.
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            logger.debug(f"Rejected non-integer flash loan amount: {amount!r}")
            return False
        return (
            self._constants.min_flash_loan_amount
            <= amount
            <= self._constants.max_flash_loan_amount
        )

    # ========== DIAGNOSTICS ==========

    def get_token_symbol(self, address: Any) -> str:
        """Get display name for a token address.

        Returns:
            Symbol of a known token, or the shortened address if not found
        """
        canonical = canonical_address(address)
        if canonical is not None:
            for name, addr in KNOWN_TOKENS:
                if addr.lower() == canonical:
                    return name
        return shorten_address(str(address))

    def as_dict(self) -> Dict[str, Any]:
        """Snapshot of every accessor keyed by its caller-facing name."""
        return {
            "getMasterAddress": self.get_master_address(),
            "getAaveVersion": self.get_aave_version(),
            "getBalancerVersion": self.get_balancer_version(),
            "getUniswapVersion": self.get_uniswap_version(),
            "getMaxFlashLoanAmount": self.get_max_flash_loan_amount(),
            "getMinFlashLoanAmount": self.get_min_flash_loan_amount(),
            "getMaxSlippage": self.get_max_slippage(),
            "getWethAddress": self.get_weth_address(),
            "getUsdcAddress": self.get_usdc_address(),
            "getDaiAddress": self.get_dai_address(),
            "getUniswapRouter": self.get_uniswap_router(),
            "getSushiswapRouter": self.get_sushiswap_router(),
        }


@lru_cache()
def get_registry() -> ConfigRegistry:
    """Get the shared registry instance."""
    return ConfigRegistry()
