"""Timing harness comparing plain pqXDH with pqMuDH."""

import logging
import statistics
import time
from typing import Dict, List, NamedTuple, Sequence, Tuple

from .crypto import Rng, generate_x25519_keypair
from .handshake import pqmudh_alice, pqmudh_alice_with_prep, pqxdh_alice_plain
from .kem import generate_kem_keypair
from .error import ConfigError
from .types import BenchmarkConfig, HandshakeParameters

logger = logging.getLogger(__name__)


class BenchmarkTimings(NamedTuple):
    """Elapsed time of one run of each variant, in microseconds."""

    pqxdh_plain: float
    pqmudh: float
    pqmudh_prep: float


def setup_alice_parameters(rng: Rng, kyber: bool = False, opkb: bool = False) -> HandshakeParameters:
    """
    Generate fresh handshake parameters.

    Alice gets an identity and a base key pair; Bob an identity key, a
    signed pre-key and a ratchet key, plus a one-time pre-key and an
    ML-KEM-1024 public key if requested.
    """
    alice_identity = generate_x25519_keypair(rng)
    alice_base = generate_x25519_keypair(rng)

    params = HandshakeParameters(
        our_identity_key_pair=alice_identity,
        our_base_key_pair=alice_base,
        their_identity_key=generate_x25519_keypair(rng).public_key,
        their_signed_pre_key=generate_x25519_keypair(rng).public_key,
        their_ratchet_key=generate_x25519_keypair(rng).public_key,
    )

    if kyber:
        kem_pub, _kem_priv = generate_kem_keypair(rng)
        params = params.with_kyber_pre_key(kem_pub)

    if opkb:
        params = params.with_one_time_pre_key(generate_x25519_keypair(rng).public_key)

    return params


def _timed(fn, params: HandshakeParameters, rng: Rng) -> float:
    start = time.perf_counter()
    fn(params, rng)
    return (time.perf_counter() - start) * 1e6


def one_shot_benchmark(params: HandshakeParameters, rng: Rng) -> BenchmarkTimings:
    """Run each key agreement once on the same parameters and time it."""
    return BenchmarkTimings(
        pqxdh_plain=_timed(pqxdh_alice_plain, params, rng),
        pqmudh=_timed(pqmudh_alice, params, rng),
        pqmudh_prep=_timed(pqmudh_alice_with_prep, params, rng),
    )


def vector_stats(values: Sequence[float]) -> Tuple[float, float]:
    """
    Sample mean and standard deviation (Bessel-corrected).

    Raises:
        statistics.StatisticsError: If fewer than two values are given
    """
    return float(statistics.mean(values)), float(statistics.stdev(values))


def run_benchmarks(config: BenchmarkConfig, rng: Rng) -> Dict[str, Tuple[float, float]]:
    """
    Run config.count iterations, each on freshly generated parameters.

    Returns:
        Mapping of variant name to (mean, std_dev) in microseconds

    Raises:
        ConfigError: If the configuration is invalid or count < 2
    """
    config.validate()
    if config.count < 2:
        raise ConfigError("count must be >= 2 for statistics")

    results: Dict[str, List[float]] = {name: [] for name in BenchmarkTimings._fields}

    for n in range(config.count):
        params = setup_alice_parameters(rng, kyber=config.kyber, opkb=config.opkb)
        timings = one_shot_benchmark(params, rng)
        logger.debug("iteration %d: %s", n, timings)
        for name, value in timings._asdict().items():
            results[name].append(value)

    return {name: vector_stats(values) for name, values in results.items()}
