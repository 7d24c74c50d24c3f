"""Finite-field arithmetic over GF(p) and GF(2^w).

All arithmetic uses Python ints, so field elements are exact at any width.
Default field: Mersenne prime 2^521-1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from shareverify.errors import NoInverseError

MERSENNE_127 = (1 << 127) - 1
MERSENNE_521 = (1 << 521) - 1

# x^8 + x^4 + x^3 + x + 1, the Rijndael polynomial.
AES_POLYNOMIAL = 0x11B


def mod_add(a: int, b: int, m: int) -> int:
    return (a + b) % m


def mod_sub(a: int, b: int, m: int) -> int:
    # Python's % takes the sign of the divisor, so 0 - xj lands in [0, m).
    return (a - b) % m


def mod_mul(a: int, b: int, m: int) -> int:
    return (a * b) % m


def mod_inverse(a: int, m: int) -> int:
    """Inverse of a modulo m via the extended Euclidean algorithm.

    Raises:
        NoInverseError: if gcd(a, m) != 1, including a == 0 (mod m).
    """
    if m < 2:
        raise ValueError(f"Modulus must be >= 2, got {m}")

    old_r, r = a % m, m
    old_s, s = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s

    if old_r != 1:
        raise NoInverseError(a, m)
    return old_s % m


def _clmul(a: int, b: int) -> int:
    """Carry-less product of two GF(2)[x] polynomials."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def _poly_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder of GF(2)[x] polynomial division."""
    q = 0
    db = b.bit_length()
    while a.bit_length() >= db:
        shift = a.bit_length() - db
        q ^= 1 << shift
        a ^= b << shift
    return q, a


def _poly_gcd(a: int, b: int) -> int:
    while b:
        a, b = b, _poly_divmod(a, b)[1]
    return a


def _prime_factors(n: int) -> set[int]:
    factors = set()
    d = 2
    while d * d <= n:
        while n % d == 0:
            factors.add(d)
            n //= d
        d += 1
    if n > 1:
        factors.add(n)
    return factors


def is_irreducible(polynomial: int) -> bool:
    """Rabin's irreducibility test for a GF(2)[x] polynomial of degree n >= 1.

    The polynomial f is irreducible iff x^(2^n) = x (mod f) and, for every
    prime q dividing n, gcd(f, x^(2^(n/q)) - x) = 1.
    """
    n = polynomial.bit_length() - 1
    if n < 1:
        return False
    x = _poly_divmod(0b10, polynomial)[1]

    def frobenius(times: int) -> int:
        # x^(2^times) mod f by repeated squaring.
        r = x
        for _ in range(times):
            r = _poly_divmod(_clmul(r, r), polynomial)[1]
        return r

    if frobenius(n) != x:
        return False
    return all(
        _poly_gcd(polynomial, frobenius(n // q) ^ x) == 1
        for q in _prime_factors(n)
    )


class Field(ABC):
    """Arithmetic domain shared by reconstruction and detection.

    A payload maps onto one or more lanes, each interpolated on its own.
    """

    lane_size: int | None

    @abstractmethod
    def add(self, a: int, b: int) -> int: ...

    @abstractmethod
    def sub(self, a: int, b: int) -> int: ...

    @abstractmethod
    def mul(self, a: int, b: int) -> int: ...

    @abstractmethod
    def inverse(self, a: int) -> int: ...

    @abstractmethod
    def contains(self, value: int) -> bool:
        """Whether value is a canonical element of the field."""

    @abstractmethod
    def lanes(self, payload: bytes) -> tuple[int, ...]:
        """Field elements encoded by a payload."""

    @abstractmethod
    def join(self, lanes: Sequence[int], length: int) -> bytes:
        """Encode lane values back into a payload of at least length bytes."""

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inverse(b))


class PrimeField(Field):
    """Integers modulo a prime. The whole payload is a single lane.

    Args:
        modulus: Field prime; must exceed every payload value of a job.
    """

    lane_size = None

    def __init__(self, modulus: int = MERSENNE_521) -> None:
        if modulus < 2:
            raise ValueError(f"Modulus must be >= 2, got {modulus}")
        self.modulus = modulus

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.modulus == self.modulus

    def __hash__(self) -> int:
        return hash(("prime", self.modulus))

    def add(self, a: int, b: int) -> int:
        return mod_add(a, b, self.modulus)

    def sub(self, a: int, b: int) -> int:
        return mod_sub(a, b, self.modulus)

    def mul(self, a: int, b: int) -> int:
        return mod_mul(a, b, self.modulus)

    def inverse(self, a: int) -> int:
        return mod_inverse(a, self.modulus)

    def contains(self, value: int) -> bool:
        return 0 <= value < self.modulus

    def lanes(self, payload: bytes) -> tuple[int, ...]:
        return (int.from_bytes(payload, byteorder="big") % self.modulus,)

    def join(self, lanes: Sequence[int], length: int) -> bytes:
        if len(lanes) != 1:
            raise ValueError(f"Prime field has one lane, got {len(lanes)}")
        (value,) = lanes
        width = max(length, (value.bit_length() + 7) // 8)
        return value.to_bytes(width, byteorder="big")


class BinaryField(Field):
    """GF(2^w) with elements as bit-packed polynomials over GF(2).

    Payloads split into big-endian lanes of width // 8 bytes, so GF(2^8)
    interpolates every byte independently.

    Args:
        width: Bit width w, a positive multiple of 8.
        polynomial: Irreducible reduction polynomial including the x^w term.
    """

    def __init__(self, width: int = 8, polynomial: int = AES_POLYNOMIAL) -> None:
        if width <= 0 or width % 8:
            raise ValueError(f"Width must be a positive multiple of 8, got {width}")
        if polynomial.bit_length() != width + 1:
            raise ValueError(
                f"Reduction polynomial must have degree {width}, got {polynomial:#x}"
            )
        if not is_irreducible(polynomial):
            raise ValueError(f"Reduction polynomial {polynomial:#x} is not irreducible")
        self.width = width
        self.polynomial = polynomial
        self.order = 1 << width
        self.lane_size = width // 8

    def __repr__(self) -> str:
        return f"BinaryField({self.width}, {self.polynomial:#x})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, BinaryField)
            and other.width == self.width
            and other.polynomial == self.polynomial
        )

    def __hash__(self) -> int:
        return hash(("binary", self.width, self.polynomial))

    def add(self, a: int, b: int) -> int:
        return a ^ b

    def sub(self, a: int, b: int) -> int:
        return a ^ b

    def mul(self, a: int, b: int) -> int:
        _, r = _poly_divmod(_clmul(a, b), self.polynomial)
        return r

    def inverse(self, a: int) -> int:
        """Inverse via the extended Euclidean algorithm over GF(2)[x]."""
        old_r, r = a, self.polynomial
        old_s, s = 1, 0
        while r:
            q, rem = _poly_divmod(old_r, r)
            old_r, r = r, rem
            old_s, s = s, old_s ^ _clmul(q, s)

        if old_r != 1:
            raise NoInverseError(a, self.polynomial)
        _, inv = _poly_divmod(old_s, self.polynomial)
        return inv

    def contains(self, value: int) -> bool:
        return 0 <= value < self.order

    def lanes(self, payload: bytes) -> tuple[int, ...]:
        size = self.lane_size
        if len(payload) % size:
            raise ValueError(
                f"Payload length {len(payload)} is not a multiple of {size} bytes"
            )
        return tuple(
            int.from_bytes(payload[i : i + size], byteorder="big")
            for i in range(0, len(payload), size)
        )

    def join(self, lanes: Sequence[int], length: int) -> bytes:
        out = b"".join(v.to_bytes(self.lane_size, byteorder="big") for v in lanes)
        return out.rjust(length, b"\x00")


def parse_field(descriptor: str) -> Field:
    """Build a field from a textual descriptor.

    Accepted forms: ``mersenne127``, ``mersenne521``, ``gf256``,
    ``prime:<modulus>`` and ``gf2^<width>:<polynomial>`` (integers in any
    Python literal base, e.g. ``gf2^16:0x1002d``).
    """
    text = descriptor.strip().lower()
    if text == "mersenne127":
        return PrimeField(MERSENNE_127)
    if text == "mersenne521":
        return PrimeField(MERSENNE_521)
    if text == "gf256":
        return BinaryField(8, AES_POLYNOMIAL)

    kind, sep, arg = text.partition(":")
    try:
        if sep and kind == "prime":
            return PrimeField(int(arg, 0))
        if sep and kind.startswith("gf2^"):
            return BinaryField(int(kind[4:]), int(arg, 0))
    except ValueError as exc:
        raise ValueError(f"Invalid field descriptor {descriptor!r}: {exc}") from exc
    raise ValueError(f"Unknown field descriptor {descriptor!r}")
