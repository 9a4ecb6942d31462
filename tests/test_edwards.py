"""Tests for Edwards point helpers."""

import nacl.bindings as sodium
import pytest

from pqmudh import (
    ED25519_IDENTITY,
    EdwardsConversionError,
    mont_to_edwards,
    point_add,
    point_double,
)
from pqmudh.edwards import P

# Ed25519 base point, y = 4/5
ED25519_BASE = bytes.fromhex("5866666666666666666666666666666666666666666666666666666666666666")


def test_x25519_base_point_lifts_to_ed25519_base_point():
    """u = 9 maps to the Ed25519 base point with the positive sign."""
    assert mont_to_edwards((9).to_bytes(32, "little")) == ED25519_BASE


def test_sign_bit():
    """Sign 1 only sets the top bit of the encoding."""
    lifted = mont_to_edwards((9).to_bytes(32, "little"), 1)
    assert lifted[:31] == ED25519_BASE[:31]
    assert lifted[31] == ED25519_BASE[31] | 0x80


def test_top_bit_of_u_is_ignored():
    u = bytearray((9).to_bytes(32, "little"))
    u[31] |= 0x80
    assert mont_to_edwards(bytes(u)) == ED25519_BASE


def test_minus_one_has_no_lift():
    with pytest.raises(EdwardsConversionError):
        mont_to_edwards((P - 1).to_bytes(32, "little"))


def test_twist_point_has_no_lift():
    """u = 2 lies on the quadratic twist, not on Curve25519."""
    with pytest.raises(EdwardsConversionError):
        mont_to_edwards((2).to_bytes(32, "little"))


def test_wrong_length():
    with pytest.raises(EdwardsConversionError):
        mont_to_edwards(b"\x09" * 31)


def test_identity_is_neutral():
    assert point_add(ED25519_IDENTITY, ED25519_BASE) == ED25519_BASE
    assert point_double(ED25519_IDENTITY) == ED25519_IDENTITY


def test_double_matches_scalar_multiplication():
    two_b = sodium.crypto_scalarmult_ed25519_base_noclamp((2).to_bytes(32, "little"))
    assert point_double(ED25519_BASE) == two_b
