"""Recover the secret by interpolating a threshold subset at x = 0."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shareverify.errors import InsufficientSharesError
from shareverify.field import Field, PrimeField
from shareverify.interpolation import evaluate_at
from shareverify.models import Share, ShareSet
from shareverify.points import lane_points

logger = logging.getLogger(__name__)


def check_threshold(shares: ShareSet, threshold: int) -> None:
    if threshold < 1:
        raise ValueError(f"Threshold must be >= 1, got {threshold}")
    if len(shares) < threshold:
        raise InsufficientSharesError(len(shares), threshold)


def reconstruct(
    shares: Iterable[Share],
    threshold: int,
    field: Field | None = None,
) -> bytes:
    """Reconstruct the secret from the first threshold shares.

    Args:
        shares: Shares in canonical order; a plain sequence is validated
            into a ShareSet first.
        threshold: Number of shares the polynomial needs (degree + 1).
        field: Arithmetic domain; defaults to GF(2^521-1).

    Returns:
        The secret, big-endian, left zero-padded to the payload length.

    Raises:
        InsufficientSharesError: if fewer than threshold shares are given.
        InvalidShareError: if a share is malformed or duplicated.
    """
    share_set = ShareSet.of(shares)
    check_threshold(share_set, threshold)
    if field is None:
        field = PrimeField()

    subset = share_set.head(threshold)
    length = share_set.payload_length
    lanes = lane_points(subset.shares, field, length)

    logger.debug(
        "Reconstructing from shares %s over %r (%d lane(s))",
        list(subset.indices), field, len(lanes),
    )
    values = [evaluate_at(points, 0, field) for points in lanes]
    return field.join(values, length)
