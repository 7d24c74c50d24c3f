"""Lagrange interpolation over a finite field."""

from __future__ import annotations

from collections.abc import Sequence

from shareverify.field import Field
from shareverify.models import FieldPoint


def evaluate_at(points: Sequence[FieldPoint], x0: int, field: Field) -> int:
    """Value at x0 of the lowest-degree polynomial through points.

    For points (x_i, y_i) the Lagrange basis polynomial at x0 is:
        L_i(x0) = prod_{j != i} (x0 - x_j) / (x_i - x_j)

    The interpolated value is sum_i y_i * L_i(x0). A repeated x coordinate
    makes some denominator zero and raises NoInverseError.
    """
    if not points:
        raise ValueError("Need at least one point to interpolate")

    k = len(points)
    result = 0

    for i in range(k):
        xi, yi = points[i].x, points[i].y
        numerator = 1
        denominator = 1
        for j in range(k):
            if i == j:
                continue
            xj = points[j].x
            numerator = field.mul(numerator, field.sub(x0, xj))
            denominator = field.mul(denominator, field.sub(xi, xj))

        basis = field.div(numerator, denominator)
        result = field.add(result, field.mul(yi, basis))

    return result


class Polynomial:
    """Polynomial in coefficient form, lowest degree first.

    Args:
        coefficients: c_0, c_1, ... so that p(x) = sum_i c_i * x^i.
        field: Field the coefficients live in.
    """

    def __init__(self, coefficients: Sequence[int], field: Field) -> None:
        self.coefficients = tuple(coefficients) or (0,)
        self.field = field

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coefficients)}, {self.field!r})"

    def __call__(self, x: int) -> int:
        """Evaluate by Horner's rule."""
        f = self.field
        result = 0
        for c in reversed(self.coefficients):
            result = f.add(f.mul(result, x), c)
        return result

    @classmethod
    def interpolate(cls, points: Sequence[FieldPoint], field: Field) -> Polynomial:
        """Coefficients of the polynomial through points in O(k^2).

        Builds the master polynomial M(X) = prod_j (X - x_j) once, then for
        every i divides M by (X - x_i) synthetically to get the numerator of
        the basis polynomial L_i, scaled by y_i / prod_{j != i} (x_i - x_j).
        """
        if not points:
            raise ValueError("Need at least one point to interpolate")

        f = field
        k = len(points)

        master = [1]
        for p in points:
            shifted = [0, *master]
            for d, c in enumerate(master):
                shifted[d] = f.sub(shifted[d], f.mul(c, p.x))
            master = shifted

        coeffs = [0] * k
        for i in range(k):
            xi = points[i].x

            # M(X) / (X - x_i), from the highest degree down.
            quotient = [0] * k
            carry = master[k]
            for d in range(k - 1, -1, -1):
                quotient[d] = carry
                carry = f.add(master[d], f.mul(carry, xi))

            denominator = 1
            for j in range(k):
                if j != i:
                    denominator = f.mul(denominator, f.sub(xi, points[j].x))
            scale = f.div(points[i].y, denominator)

            for d in range(k):
                coeffs[d] = f.add(coeffs[d], f.mul(quotient[d], scale))

        return cls(coeffs, field)
