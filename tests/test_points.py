"""Tests for shareverify.points module."""

from __future__ import annotations

import pytest

from shareverify.errors import InvalidShareError
from shareverify.field import BinaryField, PrimeField
from shareverify.models import FieldPoint, Share
from shareverify.points import lane_points, to_point, to_points


class TestToPoint:
    def test_index_and_big_endian_payload(self, prime_field: PrimeField):
        assert to_point(Share(2, b"\x01\x00"), prime_field, 2) == FieldPoint(2, 256)

    def test_prime_reduction(self, small_prime: int):
        field = PrimeField(small_prime)
        assert to_point(Share(1, b"\x01\x02"), field, 2) == FieldPoint(1, 1)

    def test_wrong_length(self, prime_field: PrimeField):
        with pytest.raises(InvalidShareError, match="expected 3"):
            to_point(Share(1, b"\x01\x02"), prime_field, 3)

    def test_index_outside_field(self, small_prime: int):
        # 257 would alias x = 0 in GF(257).
        with pytest.raises(InvalidShareError, match="non-zero element"):
            to_point(Share(small_prime, b"\x01"), PrimeField(small_prime), 1)

    def test_multi_lane_field_rejected(self, gf256: BinaryField):
        with pytest.raises(ValueError, match="2 lanes"):
            to_point(Share(1, b"\x01\x02"), gf256, 2)


class TestToPoints:
    def test_bytewise_binary_lanes(self, gf256: BinaryField):
        points = to_points(Share(5, b"\xaa\x00\x01"), gf256, 3)
        assert points == (FieldPoint(5, 0xAA), FieldPoint(5, 0), FieldPoint(5, 1))

    def test_gf256_index_limit(self, gf256: BinaryField):
        with pytest.raises(InvalidShareError, match="non-zero element"):
            to_points(Share(256, b"\x01"), gf256, 1)

    def test_lane_size_mismatch(self):
        field = BinaryField(16, 0x1002D)
        with pytest.raises(InvalidShareError, match="multiple of 2"):
            to_points(Share(1, b"\x01\x02\x03"), field, 3)


class TestLanePoints:
    def test_transposes_by_lane(self, gf256: BinaryField):
        shares = [Share(1, b"\x0a\x0b"), Share(2, b"\x0c\x0d")]
        lanes = lane_points(shares, gf256, 2)
        assert lanes == [
            [FieldPoint(1, 0x0A), FieldPoint(2, 0x0C)],
            [FieldPoint(1, 0x0B), FieldPoint(2, 0x0D)],
        ]

    def test_empty(self, gf256: BinaryField):
        assert lane_points([], gf256, 2) == []
