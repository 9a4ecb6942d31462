"""Constants and types for the pqMuDH key agreement."""

from dataclasses import dataclass, replace
from typing import Optional

from .error import ConfigError, InvalidKeyError


# Order of the prime-order subgroup of Curve25519 / Edwards25519
GROUP_ORDER: int = 2**252 + 27742317777372353535851937790883648493

GROUP_ORDER_BYTES: bytes = GROUP_ORDER.to_bytes(32, "little")

# Scalar and point encodings
SCALAR_LEN: int = 32
POINT_LEN: int = 32

# X25519 key sizes
X25519_PUBLIC_KEY_SIZE: int = 32
X25519_PRIVATE_KEY_SIZE: int = 32

# Derived key length in bytes
DERIVED_KEY_LEN: int = 64

# Prefix of the secret material fed into HKDF
DISCONTINUITY_BYTES: bytes = b"\xff" * 32

# HKDF info labels
CLASSIC_INFO: bytes = b"WhisperText"
HYBRID_INFO: bytes = b"WhisperText_X25519_SHA-256_CRYSTALS-KYBER-1024"


@dataclass(frozen=True)
class KeyPair:
    """X25519 key pair. The private key is stored clamped."""

    public_key: bytes
    private_key: bytes

    def __post_init__(self) -> None:
        if len(self.public_key) != X25519_PUBLIC_KEY_SIZE:
            raise InvalidKeyError(
                f"public key must be {X25519_PUBLIC_KEY_SIZE} bytes, got {len(self.public_key)}"
            )
        if len(self.private_key) != X25519_PRIVATE_KEY_SIZE:
            raise InvalidKeyError(
                f"private key must be {X25519_PRIVATE_KEY_SIZE} bytes, got {len(self.private_key)}"
            )


@dataclass(frozen=True)
class HandshakeParameters:
    """Alice's view of an X3DH / pqXDH handshake.

    Holds Alice's own identity and base (ephemeral) key pairs and the
    public keys Bob published. The ratchet key is carried along for
    completeness but plays no part in the agreement itself.
    """

    our_identity_key_pair: KeyPair
    our_base_key_pair: KeyPair
    their_identity_key: bytes
    their_signed_pre_key: bytes
    their_ratchet_key: bytes
    their_one_time_pre_key: Optional[bytes] = None
    their_kyber_pre_key: Optional[bytes] = None

    def __post_init__(self) -> None:
        keys = {
            "their_identity_key": self.their_identity_key,
            "their_signed_pre_key": self.their_signed_pre_key,
            "their_ratchet_key": self.their_ratchet_key,
        }
        if self.their_one_time_pre_key is not None:
            keys["their_one_time_pre_key"] = self.their_one_time_pre_key
        for name, key in keys.items():
            if len(key) != X25519_PUBLIC_KEY_SIZE:
                raise InvalidKeyError(
                    f"{name} must be {X25519_PUBLIC_KEY_SIZE} bytes, got {len(key)}"
                )

    def with_one_time_pre_key(self, key: bytes) -> "HandshakeParameters":
        """Return a copy carrying Bob's one-time pre-key."""
        return replace(self, their_one_time_pre_key=key)

    def with_kyber_pre_key(self, key: bytes) -> "HandshakeParameters":
        """Return a copy carrying Bob's KEM public key."""
        return replace(self, their_kyber_pre_key=key)

    @property
    def has_one_time_pre_key(self) -> bool:
        return self.their_one_time_pre_key is not None

    @property
    def has_kyber_pre_key(self) -> bool:
        return self.their_kyber_pre_key is not None


@dataclass
class BenchmarkConfig:
    """Benchmark run configuration."""

    count: int = 1
    kyber: bool = False
    opkb: bool = False
    verbose: bool = False
    seed: Optional[int] = None  # None = OS randomness

    def validate(self) -> None:
        """Validate the configuration, raises ConfigError if invalid."""
        if self.count < 1:
            raise ConfigError("count must be >= 1")
        if self.seed is not None and self.seed < 0:
            raise ConfigError("seed must be >= 0")
