"""Address helpers built on web3.

Addresses are handled as hex strings. Comparisons use the canonical
lowercase form; anything returned to callers is EIP-55 checksummed.
"""

import logging
from typing import Optional, Union

from eth_typing import ChecksumAddress
from web3 import Web3

from src.core.constants.generic import ADDRESS_BITS, ADDRESS_MASK, UINT256_MAX

logger = logging.getLogger(__name__)

AddressLike = Union[str, int]


def is_uint256(value) -> bool:
    """Check that a value fits an unsigned 256-bit word."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= UINT256_MAX


def address_from_int(value: int) -> ChecksumAddress:
    """Convert a 160-bit integer to a checksummed address.

    Raises:
        ValueError: If the value does not fit in 160 bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Address value must be an int, got {type(value).__name__}")
    if not 0 <= value <= ADDRESS_MASK:
        raise ValueError(f"Address value out of {ADDRESS_BITS}-bit range: {value:#x}")
    return Web3.to_checksum_address("0x" + format(value, "040x"))


def is_valid_address(value: str) -> bool:
    """Check that a string is a 20-byte hex address (checksum not enforced)."""
    if not isinstance(value, str):
        return False
    return Web3.is_address(value.lower())


def to_address(value: AddressLike) -> ChecksumAddress:
    """Normalize an address string or integer to checksummed form.

    Raises:
        ValueError: If the value is not a valid address
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return address_from_int(value)
    if not is_valid_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return Web3.to_checksum_address(value.lower())


def canonical_address(value) -> Optional[str]:
    """Return the lowercase form of an address, or None if it is malformed.

    Never raises; used by predicates that must be total.
    """
    try:
        return to_address(value).lower()
    except ValueError:
        logger.debug(f"Rejected malformed address: {value!r}")
        return None


def derive_master_address(key_a: int, key_b: int, key_c: int) -> ChecksumAddress:
    """Derive an address from three 256-bit keys.

    The keys are XOR-combined and the result is truncated to its low
    160 bits. This only obscures the value; it is fully predictable
    from the keys. Keys outside the uint256 range wrap modulo 2**256,
    so the derivation never fails.

    Args:
        key_a: First uint256 key
        key_b: Second uint256 key
        key_c: Third uint256 key

    Returns:
        Checksummed address of the truncated XOR
    """
    combined = (key_a & UINT256_MAX) ^ (key_b & UINT256_MAX) ^ (key_c & UINT256_MAX)
    return address_from_int(combined & ADDRESS_MASK)


def shorten_address(address: str) -> str:
    """Shorten an address for display, e.g. 0xA0b8...eB48."""
    return f"{address[:6]}...{address[-4:]}" if len(address) > 10 else address
