"""Tests for the simultaneous multi-scalar combiner."""

import nacl.bindings as sodium
import pytest

from pqmudh import (
    Transcript,
    combine,
    combine_exponents,
    combine_with_prep,
    mont_to_edwards,
    point_add,
    point_double,
    pqmudh_shared_point,
)
from pqmudh.combiner import precompute_table


def scalar_mult(scalar, point):
    return sodium.crypto_scalarmult_ed25519_noclamp(scalar, point)


def expected_point(p, exps):
    """2 * (exp1*SPK + exp2*IK [+ exp4*OPK]) using independent scalar multiplications."""
    total = point_add(
        scalar_mult(exps.exp1, mont_to_edwards(p.their_signed_pre_key)),
        scalar_mult(exps.exp2, mont_to_edwards(p.their_identity_key)),
    )
    if exps.exp4 is not None:
        total = point_add(total, scalar_mult(exps.exp4, mont_to_edwards(p.their_one_time_pre_key)))
    return point_double(total)


def test_deterministic(params_opk):
    assert pqmudh_shared_point(params_opk) == pqmudh_shared_point(params_opk)


def test_two_term_combination(params):
    """Without a one-time pre-key only the SPK and IK terms contribute."""
    exps = combine_exponents(params, Transcript.from_parameters(params))
    assert exps.exp4 is None
    assert combine(params, exps) == expected_point(params, exps)


def test_three_term_combination(params_opk):
    exps = combine_exponents(params_opk, Transcript.from_parameters(params_opk))
    assert combine(params_opk, exps) == expected_point(params_opk, exps)


def test_prep_matches_core(params, params_opk):
    """The precomputed-table combiner produces the same point."""
    for p in (params, params_opk):
        exps = combine_exponents(p, Transcript.from_parameters(p))
        assert combine_with_prep(p, exps) == combine(p, exps)
        assert pqmudh_shared_point(p, with_prep=True) == pqmudh_shared_point(p)


def test_precompute_table(params_opk):
    points = [
        mont_to_edwards(params_opk.their_signed_pre_key),
        mont_to_edwards(params_opk.their_identity_key),
        mont_to_edwards(params_opk.their_one_time_pre_key),
    ]
    table = precompute_table(points)

    assert len(table) == 8
    assert table[0] is None
    assert table[1] == points[0]
    assert table[2] == points[1]
    assert table[4] == points[2]
    assert table[3] == point_add(points[0], points[1])
    assert table[7] == point_add(point_add(points[0], points[1]), points[2])


def test_mismatched_exponents(params, params_opk):
    """Exponents for one bundle cannot be combined with another."""
    exps_opk = combine_exponents(params_opk, Transcript.from_parameters(params_opk))
    exps = combine_exponents(params, Transcript.from_parameters(params))
    with pytest.raises(ValueError):
        combine(params, exps_opk)
    with pytest.raises(ValueError):
        combine_with_prep(params_opk, exps)
