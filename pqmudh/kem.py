"""Post-quantum KEM (ML-KEM-1024) used to hybridize the agreement."""

import logging
from typing import Optional, Tuple

from kyber_py.ml_kem import ML_KEM_1024

from .crypto import Rng
from .error import KemError
from .types import HandshakeParameters

logger = logging.getLogger(__name__)

# ML-KEM-1024 encapsulation key size: 384 * k + 32 with k = 4
KEM_PUBLIC_KEY_SIZE: int = 1568


def generate_kem_keypair(rng: Optional[Rng] = None) -> Tuple[bytes, bytes]:
    """
    Generate a new ML-KEM-1024 key pair.

    Args:
        rng: Optional object providing random_bytes(n); OS randomness if None

    Returns:
        Tuple of (public_key, private_key)
    """
    if rng is None:
        public_key, private_key = ML_KEM_1024.keygen()
    else:
        d, z = rng.random_bytes(32), rng.random_bytes(32)
        # underscore API of kyber-py, may change between releases
        public_key, private_key = ML_KEM_1024._keygen_internal(d, z)
    return public_key, private_key


def encapsulate(peer_pub: bytes, rng: Rng) -> Tuple[bytes, bytes]:
    """
    Encapsulate to the peer's KEM public key.

    The 32-byte message is drawn from the caller's random source, so the
    result is reproducible for a seeded source.

    Args:
        peer_pub: Peer's ML-KEM-1024 public key
        rng: Object providing random_bytes(n)

    Returns:
        Tuple of (ciphertext, shared_secret)

    Raises:
        KemError: If the public key is malformed
    """
    if len(peer_pub) != KEM_PUBLIC_KEY_SIZE:
        raise KemError(
            f"KEM public key must be {KEM_PUBLIC_KEY_SIZE} bytes, got {len(peer_pub)}"
        )

    m = rng.random_bytes(32)
    try:
        # underscore API of kyber-py, may change between releases
        shared_secret, ciphertext = ML_KEM_1024._encaps_internal(peer_pub, m)
    except ValueError as e:
        raise KemError(f"Encapsulation failed: {e}") from e
    return ciphertext, shared_secret


def augment(secrets: bytearray, params: HandshakeParameters, rng: Rng) -> bool:
    """
    Append the KEM shared secret to the secret material if Bob has a KEM key.

    The ciphertext would go to Bob in a real handshake and is dropped here.

    Args:
        secrets: Secret material, extended in place
        params: Handshake parameters
        rng: Object providing random_bytes(n)

    Returns:
        True if a KEM shared secret was appended
    """
    if params.their_kyber_pre_key is None:
        return False

    _ciphertext, shared_secret = encapsulate(params.their_kyber_pre_key, rng)
    secrets.extend(shared_secret)
    logger.debug("appended %d-byte KEM shared secret", len(shared_secret))
    return True
