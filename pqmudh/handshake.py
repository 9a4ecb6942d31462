"""Alice's side of the pqMuDH and plain pqXDH key agreements."""

import logging

from .combiner import combine, combine_with_prep
from .crypto import Rng, x25519_shared_secret
from .kdf import derive_keys
from .kem import augment
from .scalars import combine_exponents
from .transcript import Transcript
from .types import DISCONTINUITY_BYTES, HandshakeParameters

logger = logging.getLogger(__name__)


def pqmudh_shared_point(params: HandshakeParameters, with_prep: bool = False) -> bytes:
    """
    Compute the combined Diffie-Hellman output of pqMuDH.

    Args:
        params: Handshake parameters
        with_prep: Use the precomputed-table combiner

    Returns:
        Compressed Edwards point (32 bytes)
    """
    transcript = Transcript.from_parameters(params)
    exps = combine_exponents(params, transcript)
    if with_prep:
        return combine_with_prep(params, exps)
    return combine(params, exps)


def _finish(secrets: bytearray, params: HandshakeParameters, rng: Rng) -> bytes:
    has_kyber = augment(secrets, params, rng)
    logger.debug(
        "deriving keys: opk=%s kyber=%s secret_len=%d",
        params.has_one_time_pre_key, has_kyber, len(secrets),
    )
    return derive_keys(has_kyber, secrets)


def pqmudh_alice(params: HandshakeParameters, rng: Rng) -> bytes:
    """
    pqMuDH key agreement for Alice.

    The X3DH agreements are weighted by transcript randomizers and folded
    into a single simultaneous scalar multiplication over Bob's keys.

    Args:
        params: Handshake parameters
        rng: Object providing random_bytes(n), used only for KEM encapsulation

    Returns:
        64-byte derived key

    Raises:
        EdwardsConversionError: If one of Bob's keys has no Edwards lift
        KemError: If KEM encapsulation fails
    """
    secrets = bytearray(DISCONTINUITY_BYTES)
    secrets.extend(pqmudh_shared_point(params))
    return _finish(secrets, params, rng)


def pqmudh_alice_with_prep(params: HandshakeParameters, rng: Rng) -> bytes:
    """pqMuDH key agreement using the precomputed-table combiner."""
    secrets = bytearray(DISCONTINUITY_BYTES)
    secrets.extend(pqmudh_shared_point(params, with_prep=True))
    return _finish(secrets, params, rng)


def pqxdh_alice_plain(params: HandshakeParameters, rng: Rng) -> bytes:
    """
    Plain X3DH / pqXDH key agreement for Alice, without session setup.

    Secret material: 0xFF*32 || DH(IK_A, SPK_B) || DH(EK_A, IK_B)
    || DH(EK_A, SPK_B) [|| DH(EK_A, OPK_B)] [|| KEM secret].

    Args:
        params: Handshake parameters
        rng: Object providing random_bytes(n), used only for KEM encapsulation

    Returns:
        64-byte derived key

    Raises:
        AgreementError: If one of Bob's keys has low order
        KemError: If KEM encapsulation fails
    """
    secrets = bytearray(DISCONTINUITY_BYTES)

    our_identity_private = params.our_identity_key_pair.private_key
    our_base_private = params.our_base_key_pair.private_key

    secrets.extend(x25519_shared_secret(our_identity_private, params.their_signed_pre_key))
    secrets.extend(x25519_shared_secret(our_base_private, params.their_identity_key))
    secrets.extend(x25519_shared_secret(our_base_private, params.their_signed_pre_key))

    if params.their_one_time_pre_key is not None:
        secrets.extend(x25519_shared_secret(our_base_private, params.their_one_time_pre_key))

    return _finish(secrets, params, rng)
