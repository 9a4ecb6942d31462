"""Simultaneous multi-scalar multiplication over Bob's public keys."""

from typing import List, Optional

from .edwards import ED25519_IDENTITY, compress, mont_to_edwards, point_add, point_double
from .scalars import Exponents
from .types import SCALAR_LEN, HandshakeParameters


def _bit(scalar: bytes, i: int, j: int) -> int:
    return (scalar[i] >> j) & 1


def _check_exponents(params: HandshakeParameters, exps: Exponents) -> None:
    if (exps.exp4 is None) != (params.their_one_time_pre_key is None):
        raise ValueError("exp4 must be present exactly when a one-time pre-key is")


def bob_points(params: HandshakeParameters) -> List[Optional[bytes]]:
    """
    Lift Bob's keys to Edwards form with the positive sign.

    Returns:
        [SPK_B, IK_B, OPK_B or None]
    """
    spk_b = mont_to_edwards(params.their_signed_pre_key, 0)
    ik_b = mont_to_edwards(params.their_identity_key, 0)
    opk_b = None
    if params.their_one_time_pre_key is not None:
        opk_b = mont_to_edwards(params.their_one_time_pre_key, 0)
    return [spk_b, ik_b, opk_b]


def combine(params: HandshakeParameters, exps: Exponents) -> bytes:
    """
    Left-to-right double-and-add over up to three scalars at once.

    At each bit, from bit 255 down to bit 0, the points whose exponent has
    that bit set are added to the accumulator, which is then doubled. All
    scalar multiplications share the same 256 doublings.

    Args:
        params: Handshake parameters
        exps: Combined exponents for the same parameters

    Returns:
        Compressed combined point (32 bytes)

    Raises:
        ValueError: If exp4 and the one-time pre-key disagree
    """
    _check_exponents(params, exps)
    spk_b, ik_b, opk_b = bob_points(params)

    shared_point = ED25519_IDENTITY

    for i in reversed(range(SCALAR_LEN)):
        for j in reversed(range(8)):
            if _bit(exps.exp1, i, j):
                shared_point = point_add(shared_point, spk_b)

            if _bit(exps.exp2, i, j):
                shared_point = point_add(shared_point, ik_b)

            if exps.exp4 is not None and _bit(exps.exp4, i, j):
                shared_point = point_add(shared_point, opk_b)

            shared_point = point_double(shared_point)

    return compress(shared_point)


def precompute_table(points: List[bytes]) -> List[Optional[bytes]]:
    """
    Subset sums of the given points.

    table[mask] is the sum of points[k] for every bit k set in mask;
    table[0] is unused.
    """
    table: List[Optional[bytes]] = [None] * (1 << len(points))
    for mask in range(1, len(table)):
        low = mask & -mask
        rest = mask ^ low
        point = points[low.bit_length() - 1]
        table[mask] = point if rest == 0 else point_add(table[rest], point)
    return table


def combine_with_prep(params: HandshakeParameters, exps: Exponents) -> bytes:
    """
    Same result as combine(), using a precomputed table of subset sums.

    Each bit position costs at most one addition plus the doubling, and
    doublings are skipped while the accumulator is still the identity.
    """
    _check_exponents(params, exps)
    spk_b, ik_b, opk_b = bob_points(params)

    scalars = [exps.exp1, exps.exp2]
    points = [spk_b, ik_b]
    if exps.exp4 is not None:
        scalars.append(exps.exp4)
        points.append(opk_b)

    table = precompute_table(points)

    shared_point = ED25519_IDENTITY
    started = False

    for i in reversed(range(SCALAR_LEN)):
        for j in reversed(range(8)):
            mask = 0
            for k, scalar in enumerate(scalars):
                mask |= _bit(scalar, i, j) << k

            if mask:
                shared_point = point_add(shared_point, table[mask])
                started = True

            if started:
                shared_point = point_double(shared_point)

    return compress(shared_point)
