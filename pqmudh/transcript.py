"""Handshake transcript hashing and randomizer derivation."""

import hashlib

from .types import HandshakeParameters


class Transcript:
    """
    Running SHA-256 hash over the public keys of a handshake.

    The keys are absorbed in a fixed order: Alice's identity key, Bob's
    identity key, Alice's base key, Bob's signed pre-key and, if present,
    Bob's one-time pre-key. Randomizers are derived from copies of this
    state, so each one depends only on the transcript and its index.
    """

    def __init__(self) -> None:
        self._hash = hashlib.sha256()
        self._has_one_time_pre_key = False

    @classmethod
    def from_parameters(cls, params: HandshakeParameters) -> "Transcript":
        t = cls()
        t.update(params.our_identity_key_pair.public_key)
        t.update(params.their_identity_key)
        t.update(params.our_base_key_pair.public_key)
        t.update(params.their_signed_pre_key)
        if params.their_one_time_pre_key is not None:
            t.update(params.their_one_time_pre_key)
            t._has_one_time_pre_key = True
        return t

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def randomizer(self, index: int) -> int:
        """
        Derive the randomizer alpha_index.

        SHA256(transcript || index) read as a little-endian integer.

        Args:
            index: 1, 2 or 3; 4 only when a one-time pre-key was absorbed

        Returns:
            256-bit randomizer (not reduced)
        """
        if index not in (1, 2, 3, 4):
            raise ValueError(f"randomizer index must be 1..4, got {index}")
        if index == 4 and not self._has_one_time_pre_key:
            raise ValueError("randomizer 4 requires a one-time pre-key")

        h = self._hash.copy()
        h.update(bytes([index]))
        return int.from_bytes(h.digest(), "little")
