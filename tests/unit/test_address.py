"""Unit tests for address helpers."""

import pytest

from src.core.address import (
    address_from_int,
    canonical_address,
    derive_master_address,
    is_uint256,
    is_valid_address,
    shorten_address,
    to_address,
)
from src.core.constants import UINT256_MAX, USDC_ADDRESS, ZERO_ADDRESS


class TestUint256:
    """Tests for uint256 range checks."""

    def test_bounds(self):
        assert is_uint256(0)
        assert is_uint256(UINT256_MAX)
        assert not is_uint256(UINT256_MAX + 1)
        assert not is_uint256(-1)

    def test_non_int(self):
        assert not is_uint256(True)
        assert not is_uint256("1")


class TestAddressConversion:
    """Tests for int/str address conversion."""

    def test_from_int_zero(self):
        assert address_from_int(0) == ZERO_ADDRESS

    def test_from_int_max(self):
        assert address_from_int(2**160 - 1).lower() == "0x" + "f" * 40

    def test_from_int_out_of_range(self):
        with pytest.raises(ValueError):
            address_from_int(2**160)
        with pytest.raises(ValueError):
            address_from_int(-1)

    def test_to_address_normalizes_case(self):
        assert to_address(USDC_ADDRESS.lower()) == to_address(USDC_ADDRESS)

    def test_to_address_invalid(self):
        with pytest.raises(ValueError):
            to_address("0xnothex")

    def test_is_valid_address(self):
        assert is_valid_address(USDC_ADDRESS)
        assert not is_valid_address("0x1234")
        assert not is_valid_address(None)

    def test_canonical_address(self):
        assert canonical_address(USDC_ADDRESS) == USDC_ADDRESS.lower()
        assert canonical_address("garbage") is None


class TestDeriveMasterAddress:
    """Tests for XOR master derivation."""

    def test_xor_of_identical_keys(self):
        """Test A ^ A ^ C reduces to C."""
        key = 0xABCDEF
        assert derive_master_address(key, key, 0x42).lower() == "0x" + format(0x42, "040x")

    def test_truncates_to_160_bits(self):
        """Test only the low 160 bits survive."""
        key = (1 << 255) | 0x1
        assert derive_master_address(key, 0, 0).lower() == "0x" + format(1, "040x")

    def test_out_of_range_key_wraps(self):
        """Test keys wrap modulo 2**256 instead of raising."""
        assert derive_master_address(UINT256_MAX + 1, 0, 0x42).lower() == "0x" + format(0x42, "040x")
        assert derive_master_address(-1, UINT256_MAX, 0) == derive_master_address(0, 0, 0)


def test_shorten_address():
    """Test display shortening."""
    assert shorten_address(USDC_ADDRESS) == "0xA0b8...eB48"
    assert shorten_address("0x12") == "0x12"
