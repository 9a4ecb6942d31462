"""Shared fixtures for pqMuDH tests."""

import pytest

from pqmudh import SeededRng, setup_alice_parameters


@pytest.fixture
def params():
    """Handshake parameters without one-time pre-key or KEM key."""
    return setup_alice_parameters(SeededRng(1))


@pytest.fixture
def params_opk():
    """Handshake parameters with a one-time pre-key."""
    return setup_alice_parameters(SeededRng(2), opkb=True)


@pytest.fixture(scope="session")
def params_kyber():
    """Handshake parameters with a one-time pre-key and an ML-KEM-1024 key."""
    return setup_alice_parameters(SeededRng(3), kyber=True, opkb=True)
