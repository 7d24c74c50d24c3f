"""Shared test fixtures for the shareverify test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from shareverify.field import (
    AES_POLYNOMIAL,
    MERSENNE_127,
    MERSENNE_521,
    BinaryField,
    Field,
    PrimeField,
)
from shareverify.models import Share

from dealer import split_secret

SplitFn = Callable[..., list[Share]]


@pytest.fixture
def small_prime() -> int:
    """A small prime for fast arithmetic tests."""
    return 257


@pytest.fixture
def prime_field() -> PrimeField:
    """The default 521-bit Mersenne field."""
    return PrimeField(MERSENNE_521)


@pytest.fixture
def fast_field() -> PrimeField:
    return PrimeField(MERSENNE_127)


@pytest.fixture
def gf256() -> BinaryField:
    return BinaryField(8, AES_POLYNOMIAL)


@pytest.fixture
def split() -> SplitFn:
    """Deterministic dealer: split(secret, n, k, field) -> shares."""
    rng = random.Random(1234)

    def _split(secret: bytes, n: int, k: int, field: Field) -> list[Share]:
        return split_secret(secret, n, k, field, rng)

    return _split


@pytest.fixture
def line_shares() -> list[Share]:
    """Shares on y = 4x + 3: secret 3, threshold 2."""
    return [Share(1, b"\x07"), Share(2, b"\x0b"), Share(3, b"\x0f")]
