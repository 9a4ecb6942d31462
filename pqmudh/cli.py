"""pqMuDH benchmark command line."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import one_shot_benchmark, run_benchmarks, setup_alice_parameters
from .crypto import SeededRng, SystemRng
from .error import ConfigError, PqmudhError
from .types import BenchmarkConfig


def parse_args(argv: Optional[List[str]] = None) -> BenchmarkConfig:
    p = argparse.ArgumentParser(
        prog="pqmudh",
        description="Benchmark plain pqXDH against pqMuDH key agreement.",
    )
    p.add_argument("-c", "--count", type=int, default=1,
                   help="The number of benchmarks to run and average (default 1).")
    p.add_argument("-k", "--kyber", action="store_true",
                   help="Use ML-KEM-1024 key encapsulation during key exchange.")
    p.add_argument("-o", "--opkb", action="store_true",
                   help="Use a one-time pre-key for Bob during key exchange.")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Enable verbose mode.")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for reproducible randomness (NOT secure).")
    args = p.parse_args(argv)
    return BenchmarkConfig(
        count=args.count,
        kyber=args.kyber,
        opkb=args.opkb,
        verbose=args.verbose,
        seed=args.seed,
    )


def log_level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    """Run the benchmark and print the timings."""
    config = parse_args(argv)

    logging.basicConfig(
        level=log_level(config.verbose),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config.validate()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rng = SystemRng() if config.seed is None else SeededRng(config.seed)

    try:
        if config.count == 1:
            params = setup_alice_parameters(rng, kyber=config.kyber, opkb=config.opkb)
            plain, fast, faster = one_shot_benchmark(params, rng)

            if config.verbose:
                print(f"Plain pqXDH key exchange took {plain:.0f} µs.")
                print(f"pqMuDH key exchange took {fast:.0f} µs.")
                print(f"pqMuDH key exchange with pre-computation took {faster:.0f} µs.")
            else:
                print(f"{plain:.0f}")
                print(f"{fast:.0f}")
                print(f"{faster:.0f}")
        else:
            stats = run_benchmarks(config, rng)

            mean, std_dev = stats["pqxdh_plain"]
            print(f"Plain pqXDH key exchange took {mean:.1f}({std_dev:.1f}) µs on average.")
            mean, std_dev = stats["pqmudh"]
            print(f"pqMuDH key exchange took {mean:.1f}({std_dev:.1f}) µs on average.")
            mean, std_dev = stats["pqmudh_prep"]
            print(f"pqMuDH key exchange with preprocessing took {mean:.1f}({std_dev:.1f}) µs on average.")
    except PqmudhError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
