"""Randomness sources and X25519 primitives."""

import os
import random
from typing import Optional, Protocol, runtime_checkable

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .error import AgreementError
from .types import KeyPair, X25519_PRIVATE_KEY_SIZE


@runtime_checkable
class Rng(Protocol):
    """Anything that can hand out random bytes."""

    def random_bytes(self, n: int) -> bytes:
        ...


class SystemRng:
    """Random source backed by the OS CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        return os.urandom(n)


class SeededRng:
    """
    Reproducible random source for experiments and tests.

    Built on random.Random, so it is NOT cryptographically secure.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rnd = random.Random(seed)

    def random_bytes(self, n: int) -> bytes:
        return self._rnd.randbytes(n)


def clamp(scalar: bytes) -> bytes:
    """Apply X25519 clamping to a 32-byte scalar."""
    b = bytearray(scalar)
    b[0] &= 248
    b[31] &= 127
    b[31] |= 64
    return bytes(b)


def generate_x25519_keypair(rng: Rng) -> KeyPair:
    """
    Generate a new X25519 key pair from the given random source.

    Args:
        rng: Object providing random_bytes(n)

    Returns:
        KeyPair with a clamped private scalar
    """
    private_bytes = clamp(rng.random_bytes(X25519_PRIVATE_KEY_SIZE))
    private_key = X25519PrivateKey.from_private_bytes(private_bytes)
    return KeyPair(
        public_key=private_key.public_key().public_bytes_raw(),
        private_key=private_bytes,
    )


def x25519_shared_secret(our_priv: bytes, peer_pub: bytes) -> bytes:
    """
    Compute X25519 shared secret.

    Args:
        our_priv: Our X25519 private key (32 bytes)
        peer_pub: Peer's X25519 public key (32 bytes)

    Returns:
        Shared secret (32 bytes)

    Raises:
        AgreementError: If the peer key has low order
    """
    private_key = X25519PrivateKey.from_private_bytes(our_priv)
    public_key = X25519PublicKey.from_public_bytes(peer_pub)
    try:
        return private_key.exchange(public_key)
    except ValueError as e:
        raise AgreementError(f"X25519 agreement failed: {e}") from e
