"""
Edwards25519 point helpers.

Points are kept in their 32-byte compressed encoding throughout; libsodium
(through PyNaCl) does the group addition on those encodings. Not constant
time.
"""

import nacl.bindings as sodium

from .error import EdwardsConversionError
from .types import POINT_LEN

# Field prime 2^255 - 19
P: int = 2**255 - 19

# Edwards curve constant d = -121665 / 121666
D: int = -121665 * pow(121666, P - 2, P) % P

# Encoded identity point (0, 1)
ED25519_IDENTITY: bytes = b"\x01" + b"\x00" * 31


def _is_square(x: int) -> bool:
    return x == 0 or pow(x, (P - 1) // 2, P) == 1


def mont_to_edwards(u_bytes: bytes, sign: int = 0) -> bytes:
    """
    Lift a Montgomery u-coordinate to a compressed Edwards point.

    The birational map gives y = (u - 1) / (u + 1); the sign bit picks
    which of the two x values is used. Key agreement always uses sign 0.

    Args:
        u_bytes: 32-byte little-endian u-coordinate (bit 255 is ignored)
        sign: Sign bit of the resulting x-coordinate

    Returns:
        Compressed Edwards point (32 bytes)

    Raises:
        EdwardsConversionError: If u has no Edwards lift
    """
    if len(u_bytes) != POINT_LEN:
        raise EdwardsConversionError(f"u-coordinate must be {POINT_LEN} bytes")

    u = (int.from_bytes(u_bytes, "little") & ((1 << 255) - 1)) % P
    if u == P - 1:
        raise EdwardsConversionError("u = -1 maps to the point at infinity")

    y = (u - 1) * pow(u + 1, P - 2, P) % P

    # x^2 = (y^2 - 1) / (d*y^2 + 1) must be a square for the point to exist
    yy = y * y % P
    xx = (yy - 1) * pow(D * yy + 1, P - 2, P) % P
    if not _is_square(xx):
        raise EdwardsConversionError("u-coordinate is not on Curve25519")

    encoded = y | ((sign & 1) << 255)
    return encoded.to_bytes(POINT_LEN, "little")


def point_add(a: bytes, b: bytes) -> bytes:
    """Add two compressed Edwards points."""
    return sodium.crypto_core_ed25519_add(a, b)


def point_double(a: bytes) -> bytes:
    """Double a compressed Edwards point by adding it to itself."""
    return sodium.crypto_core_ed25519_add(a, a)


def compress(point: bytes) -> bytes:
    """Canonical byte encoding of a point."""
    return bytes(point)
