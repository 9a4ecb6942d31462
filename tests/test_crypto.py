"""Tests for randomness sources and X25519 helpers."""

from pqmudh import Rng, SeededRng, SystemRng, generate_x25519_keypair


def test_random_sources_satisfy_protocol():
    assert isinstance(SystemRng(), Rng)
    assert isinstance(SeededRng(1), Rng)
    assert len(SystemRng().random_bytes(32)) == 32


def test_seeded_rng_reproducible():
    assert SeededRng(1).random_bytes(32) == SeededRng(1).random_bytes(32)
    assert SeededRng(1).random_bytes(32) != SeededRng(2).random_bytes(32)


def test_generated_private_key_is_clamped():
    kp = generate_x25519_keypair(SeededRng(1))
    assert kp.private_key[0] & 7 == 0
    assert kp.private_key[31] & 0x80 == 0
    assert kp.private_key[31] & 0x40
