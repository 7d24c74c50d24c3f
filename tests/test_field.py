"""Tests for shareverify.field module."""

from __future__ import annotations

import pytest

from shareverify.errors import NoInverseError
from shareverify.field import (
    AES_POLYNOMIAL,
    MERSENNE_127,
    MERSENNE_521,
    BinaryField,
    PrimeField,
    is_irreducible,
    mod_add,
    mod_inverse,
    mod_mul,
    mod_sub,
    parse_field,
)


class TestModularArithmetic:
    def test_add_wraps(self):
        assert mod_add(250, 10, 257) == 3

    def test_sub_normalizes_negative(self):
        assert mod_sub(0, 5, 7) == 2
        assert mod_sub(3, 10, 257) == 250

    def test_mul(self):
        assert mod_mul(16, 17, 257) == 15

    def test_results_in_range_for_huge_inputs(self):
        a = (1 << 2000) + 12345
        b = (1 << 1500) + 1
        for op in (mod_add, mod_sub, mod_mul):
            assert 0 <= op(a, b, MERSENNE_521) < MERSENNE_521

    def test_exact_at_field_width(self):
        a = MERSENNE_521 - 1
        assert mod_mul(a, a, MERSENNE_521) == 1

    def test_inverse_small(self, small_prime: int):
        for a in range(1, small_prime):
            assert (a * mod_inverse(a, small_prime)) % small_prime == 1

    def test_inverse_large(self):
        a = 2**400 + 17
        assert (a * mod_inverse(a, MERSENNE_521)) % MERSENNE_521 == 1

    def test_inverse_of_negative(self):
        assert (-3 * mod_inverse(-3, 257)) % 257 == 1

    def test_inverse_of_zero(self, small_prime: int):
        with pytest.raises(NoInverseError):
            mod_inverse(0, small_prime)

    def test_inverse_of_multiple_of_modulus(self, small_prime: int):
        with pytest.raises(NoInverseError):
            mod_inverse(3 * small_prime, small_prime)

    def test_inverse_not_coprime(self):
        with pytest.raises(NoInverseError, match="no inverse modulo 12"):
            mod_inverse(8, 12)

    def test_inverse_composite_coprime(self):
        assert mod_inverse(5, 12) == 5

    def test_no_inverse_error_is_arithmetic_and_value_error(self):
        with pytest.raises(ArithmeticError):
            mod_inverse(0, 7)
        with pytest.raises(ValueError):
            mod_inverse(0, 7)

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match="Modulus"):
            mod_inverse(1, 1)


class TestPrimeField:
    def test_default_is_mersenne_521(self):
        assert PrimeField().modulus == MERSENNE_521

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match="Modulus"):
            PrimeField(1)

    def test_single_lane(self, small_prime: int):
        field = PrimeField(small_prime)
        assert field.lanes(b"\x01\x02") == (258 % small_prime,)

    def test_join_pads_left(self, prime_field: PrimeField):
        assert prime_field.join([3], 4) == b"\x00\x00\x00\x03"

    def test_join_grows_for_wide_values(self, prime_field: PrimeField):
        assert prime_field.join([0x1234], 1) == b"\x12\x34"

    def test_join_rejects_multiple_lanes(self, prime_field: PrimeField):
        with pytest.raises(ValueError, match="one lane"):
            prime_field.join([1, 2], 2)

    def test_div(self, small_prime: int):
        field = PrimeField(small_prime)
        assert field.mul(field.div(10, 3), 3) == 10
        with pytest.raises(NoInverseError):
            field.div(1, small_prime)

    def test_equality(self):
        assert PrimeField(257) == PrimeField(257)
        assert PrimeField(257) != PrimeField(65537)
        assert len({PrimeField(257), PrimeField(257)}) == 1


class TestBinaryField:
    def test_add_is_xor(self, gf256: BinaryField):
        assert gf256.add(0x57, 0x83) == 0xD4
        assert gf256.sub(0x57, 0x83) == 0xD4

    def test_mul_known_value(self, gf256: BinaryField):
        # FIPS-197 section 4.2 example.
        assert gf256.mul(0x57, 0x83) == 0xC1
        assert gf256.mul(0x57, 0x13) == 0xFE

    def test_inverse_known_value(self, gf256: BinaryField):
        assert gf256.inverse(0x53) == 0xCA

    def test_every_nonzero_element_invertible(self, gf256: BinaryField):
        for a in range(1, 256):
            assert gf256.mul(a, gf256.inverse(a)) == 1

    def test_inverse_of_zero(self, gf256: BinaryField):
        with pytest.raises(NoInverseError):
            gf256.inverse(0)

    def test_bytewise_lanes(self, gf256: BinaryField):
        assert gf256.lanes(b"\x01\xff\x10") == (1, 255, 16)
        assert gf256.join([1, 255, 16], 3) == b"\x01\xff\x10"

    def test_wide_lanes(self):
        field = BinaryField(16, 0x1002D)
        assert field.lanes(b"\x12\x34\x56\x78") == (0x1234, 0x5678)
        with pytest.raises(ValueError, match="multiple of 2"):
            field.lanes(b"\x12\x34\x56")

    def test_wide_inverse(self):
        field = BinaryField(16, 0x1002D)
        for a in (1, 2, 0x1234, 0xFFFF):
            assert field.mul(a, field.inverse(a)) == 1

    def test_invalid_width(self):
        with pytest.raises(ValueError, match="multiple of 8"):
            BinaryField(12, 0x1009)

    def test_polynomial_degree_must_match_width(self):
        with pytest.raises(ValueError, match="degree 8"):
            BinaryField(8, 0x1B)

    @pytest.mark.parametrize("polynomial", [0x100, 0x101, 0x11F])
    def test_reducible_polynomial_rejected(self, polynomial: int):
        # x^8 and x^8 + 1 = (x + 1)^8 both have non-trivial factors.
        with pytest.raises(ValueError, match="not irreducible"):
            BinaryField(8, polynomial)

    @pytest.mark.parametrize("polynomial", [0x11B, 0x11D, 0x1002B, 0x1002D])
    def test_irreducible_polynomials(self, polynomial: int):
        assert is_irreducible(polynomial)

    def test_reducible_descriptor_is_invalid(self):
        with pytest.raises(ValueError, match="not irreducible"):
            parse_field("gf2^8:0x101")

    def test_contains(self, gf256: BinaryField):
        assert gf256.contains(255)
        assert not gf256.contains(256)


class TestParseField:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("mersenne127", PrimeField(MERSENNE_127)),
            ("mersenne521", PrimeField(MERSENNE_521)),
            ("MERSENNE521", PrimeField(MERSENNE_521)),
            ("gf256", BinaryField(8, AES_POLYNOMIAL)),
            ("prime:257", PrimeField(257)),
            ("prime:0x101", PrimeField(257)),
            ("gf2^16:0x1002d", BinaryField(16, 0x1002D)),
        ],
    )
    def test_known_descriptors(self, text: str, expected):
        assert parse_field(text) == expected

    @pytest.mark.parametrize("text", ["gf7", "prime", "prime:abc", "gf2^x:0x11b", ""])
    def test_invalid_descriptors(self, text: str):
        with pytest.raises(ValueError):
            parse_field(text)
