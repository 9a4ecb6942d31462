"""Key derivation using HKDF-SHA256."""

from Crypto.Hash import SHA256
from Crypto.Protocol.KDF import HKDF

from .error import DerivationError
from .types import CLASSIC_INFO, DERIVED_KEY_LEN, HYBRID_INFO


def hkdf_expand(secret: bytes, info: bytes, length: int = DERIVED_KEY_LEN) -> bytes:
    """
    HKDF-SHA256 extract-then-expand with an empty salt.

    Raises:
        DerivationError: If length is not in 1..255*32
    """
    try:
        return HKDF(secret, length, salt=b"", num_keys=1, hashmod=SHA256, context=info)
    except ValueError as e:
        raise DerivationError(f"invalid HKDF output length {length}") from e


def derive_keys(has_kyber: bool, secret_input: bytes) -> bytes:
    """
    Derive the 64-byte output key from the assembled secret material.

    Args:
        has_kyber: Whether a KEM shared secret is part of secret_input
        secret_input: Discontinuity bytes || DH output(s) [|| KEM secret]

    Returns:
        64-byte derived key
    """
    label = HYBRID_INFO if has_kyber else CLASSIC_INFO
    return hkdf_expand(bytes(secret_input), label, DERIVED_KEY_LEN)
