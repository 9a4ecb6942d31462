"""
pqMuDH: Multi-key Diffie-Hellman for pqXDH

An accelerated variant of the X3DH / pqXDH key agreement. Alice's
Diffie-Hellman agreements with Bob's identity key, signed pre-key and
optional one-time pre-key are weighted by randomizers drawn from a hash of
the handshake transcript and computed in one simultaneous double-and-add
pass, instead of three or four independent scalar multiplications.

Features:
- pqMuDH key agreement, with and without a precomputed point table
- Plain pqXDH key agreement as a baseline
- Optional hybridization with ML-KEM-1024
- HKDF-SHA256 derivation of a 64-byte key
- Benchmark harness and command line
"""

from .types import (
    GROUP_ORDER,
    GROUP_ORDER_BYTES,
    SCALAR_LEN,
    POINT_LEN,
    X25519_PUBLIC_KEY_SIZE,
    X25519_PRIVATE_KEY_SIZE,
    DERIVED_KEY_LEN,
    DISCONTINUITY_BYTES,
    CLASSIC_INFO,
    HYBRID_INFO,
    KeyPair,
    HandshakeParameters,
    BenchmarkConfig,
)
from .crypto import Rng, SystemRng, SeededRng, generate_x25519_keypair, x25519_shared_secret
from .edwards import ED25519_IDENTITY, mont_to_edwards, point_add, point_double, compress
from .transcript import Transcript
from .scalars import Exponents, combine_exponents
from .combiner import combine, combine_with_prep
from .kem import generate_kem_keypair, encapsulate
from .kdf import derive_keys
from .handshake import (
    pqmudh_shared_point,
    pqmudh_alice,
    pqmudh_alice_with_prep,
    pqxdh_alice_plain,
)
from .benchmark import (
    BenchmarkTimings,
    setup_alice_parameters,
    one_shot_benchmark,
    vector_stats,
    run_benchmarks,
)
from .error import (
    PqmudhError,
    EdwardsConversionError,
    KemError,
    DerivationError,
    InvalidKeyError,
    ConfigError,
    AgreementError,
)

__version__ = "0.1.0"
__all__ = [
    # Constants
    "GROUP_ORDER",
    "GROUP_ORDER_BYTES",
    "SCALAR_LEN",
    "POINT_LEN",
    "X25519_PUBLIC_KEY_SIZE",
    "X25519_PRIVATE_KEY_SIZE",
    "DERIVED_KEY_LEN",
    "DISCONTINUITY_BYTES",
    "CLASSIC_INFO",
    "HYBRID_INFO",
    "ED25519_IDENTITY",
    # Types
    "KeyPair",
    "HandshakeParameters",
    "BenchmarkConfig",
    "Exponents",
    "BenchmarkTimings",
    # Primitives
    "Rng",
    "SystemRng",
    "SeededRng",
    "generate_x25519_keypair",
    "x25519_shared_secret",
    "mont_to_edwards",
    "point_add",
    "point_double",
    "compress",
    "generate_kem_keypair",
    "encapsulate",
    "derive_keys",
    # Key agreement
    "Transcript",
    "combine_exponents",
    "combine",
    "combine_with_prep",
    "pqmudh_shared_point",
    "pqmudh_alice",
    "pqmudh_alice_with_prep",
    "pqxdh_alice_plain",
    # Benchmark
    "setup_alice_parameters",
    "one_shot_benchmark",
    "vector_stats",
    "run_benchmarks",
    # Errors
    "PqmudhError",
    "EdwardsConversionError",
    "KemError",
    "DerivationError",
    "InvalidKeyError",
    "ConfigError",
    "AgreementError",
]
