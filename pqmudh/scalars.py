"""Combination of private scalars with transcript randomizers."""

from dataclasses import dataclass
from typing import Optional

from .transcript import Transcript
from .types import GROUP_ORDER, SCALAR_LEN, HandshakeParameters


def scalar_to_bytes(x: int) -> bytes:
    """Reduce x modulo the group order and encode as 32 little-endian bytes."""
    return (x % GROUP_ORDER).to_bytes(SCALAR_LEN, "little")


def scalar_from_bytes(b: bytes) -> int:
    if len(b) != SCALAR_LEN:
        raise ValueError(f"scalar must be {SCALAR_LEN} bytes, got {len(b)}")
    return int.from_bytes(b, "little")


@dataclass(frozen=True)
class Exponents:
    """Combined exponents, each 32 bytes little-endian and below the group order.

    exp1 multiplies Bob's signed pre-key, exp2 his identity key and exp4
    (only when present) his one-time pre-key.
    """

    exp1: bytes
    exp2: bytes
    exp4: Optional[bytes] = None


def combine_exponents(params: HandshakeParameters, transcript: Transcript) -> Exponents:
    """
    Weight Alice's private keys with the transcript randomizers.

    exp1 = a1*IK_A + a3*EK_A, exp2 = a2*EK_A, exp4 = a4*EK_A, all mod n.
    The a1 and a3 terms share Bob's signed pre-key and are merged into one
    exponent. Reduction happens after the multiplications.

    Args:
        params: Handshake parameters
        transcript: Transcript built from the same parameters

    Returns:
        Exponents
    """
    ik_a = scalar_from_bytes(params.our_identity_key_pair.private_key)
    ek_a = scalar_from_bytes(params.our_base_key_pair.private_key)

    exp1 = transcript.randomizer(1) * ik_a + transcript.randomizer(3) * ek_a
    exp2 = transcript.randomizer(2) * ek_a

    exp4 = None
    if params.their_one_time_pre_key is not None:
        exp4 = scalar_to_bytes(transcript.randomizer(4) * ek_a)

    return Exponents(
        exp1=scalar_to_bytes(exp1),
        exp2=scalar_to_bytes(exp2),
        exp4=exp4,
    )
