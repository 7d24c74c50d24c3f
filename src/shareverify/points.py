"""Map shares onto field points."""

from __future__ import annotations

from shareverify.errors import InvalidShareError
from shareverify.field import Field
from shareverify.models import FieldPoint, Share


def to_points(share: Share, field: Field, length: int) -> tuple[FieldPoint, ...]:
    """Field points for every lane of a share's payload.

    x is the share index; y is the lane value read big-endian from the
    payload (reduced modulo the prime for a prime field).

    Raises:
        InvalidShareError: if the payload is not length bytes, or the index
            is zero or not a non-zero element of the field.
    """
    if len(share.payload) != length:
        raise InvalidShareError(
            f"Share {share.index} payload is {len(share.payload)} bytes, expected {length}"
        )
    x = share.index
    if x == 0 or not field.contains(x):
        raise InvalidShareError(f"Share index {x} is not a non-zero element of {field!r}")
    try:
        ys = field.lanes(share.payload)
    except ValueError as exc:
        raise InvalidShareError(f"Share {share.index}: {exc}") from exc
    return tuple(FieldPoint(x=x, y=y) for y in ys)


def to_point(share: Share, field: Field, length: int) -> FieldPoint:
    """The single field point of a share in a one-lane field."""
    points = to_points(share, field, length)
    if len(points) != 1:
        raise ValueError(f"{field!r} maps a {length}-byte payload to {len(points)} lanes")
    return points[0]


def lane_points(
    shares: list[Share] | tuple[Share, ...],
    field: Field,
    length: int,
) -> list[list[FieldPoint]]:
    """Transpose shares into per-lane point lists, preserving share order."""
    mapped = [to_points(s, field, length) for s in shares]
    if not mapped:
        return []
    return [list(lane) for lane in zip(*mapped, strict=True)]
