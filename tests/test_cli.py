"""Tests for the command line."""

import logging

from pqmudh import KemError
from pqmudh.cli import log_level, main, parse_args


def test_parse_args():
    config = parse_args(["-c", "3", "-k", "-o", "--seed", "4"])
    assert config.count == 3
    assert config.kyber
    assert config.opkb
    assert not config.verbose
    assert config.seed == 4


def test_one_shot(capsys):
    assert main(["--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.isdigit() for line in lines)


def test_one_shot_verbose(capsys):
    assert main(["-v", "-o", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Plain pqXDH key exchange took" in out
    assert "with pre-computation" in out


def test_averaged(capsys):
    assert main(["-c", "2", "-k", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.endswith("µs on average.") for line in lines)


def test_invalid_count(capsys):
    assert main(["-c", "0"]) == 2
    assert "count must be >= 1" in capsys.readouterr().err


def test_protocol_error(monkeypatch, capsys):
    def failing_benchmark(params, rng):
        raise KemError("Encapsulation failed")

    monkeypatch.setattr("pqmudh.cli.one_shot_benchmark", failing_benchmark)
    assert main(["--seed", "1"]) == 1
    assert "error: Encapsulation failed" in capsys.readouterr().err


def test_verbose_shows_debug_records():
    """Package records are all debug level, so verbose must enable DEBUG."""
    assert log_level(True) == logging.DEBUG
    assert log_level(False) == logging.WARNING
