"""Detect corrupted shares against a polynomial from a threshold subset."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shareverify.errors import AmbiguousReconstructionError, InsufficientSharesError
from shareverify.field import Field, PrimeField
from shareverify.interpolation import Polynomial
from shareverify.models import ReconstructionResult, Share, ShareSet, WrongShare
from shareverify.points import lane_points, to_points
from shareverify.reconstruct import check_threshold, reconstruct

logger = logging.getLogger(__name__)


def detect(
    shares: Iterable[Share],
    threshold: int,
    field: Field | None = None,
    *,
    cross_check: bool = False,
    strict: bool = False,
) -> ReconstructionResult:
    """Reconstruct the secret and list shares that disagree with it.

    The polynomial is interpolated from the first threshold shares. Every
    share, subset members included, is re-evaluated at its own x and the
    expected payload compared with the observed one.

    Args:
        shares: Shares in canonical order.
        threshold: Reconstruction threshold k.
        field: Arithmetic domain; defaults to GF(2^521-1).
        cross_check: Also reconstruct from every further disjoint block of
            threshold shares and require the secrets to agree.
        strict: Raise InsufficientSharesError instead of returning an empty
            result when fewer than threshold shares are given.

    Returns:
        ReconstructionResult; secret is None when there are too few shares.

    Raises:
        AmbiguousReconstructionError: if cross_check finds disagreeing subsets.
    """
    share_set = ShareSet.of(shares)
    if field is None:
        field = PrimeField()

    try:
        check_threshold(share_set, threshold)
    except InsufficientSharesError:
        if strict:
            raise
        logger.info(
            "Only %d share(s) for threshold %d; nothing to check",
            len(share_set), threshold,
        )
        return ReconstructionResult(secret=None, wrong_shares=())

    logger.debug(
        "Checking %d shares at threshold %d over %r",
        len(share_set), threshold, field,
    )

    length = share_set.payload_length
    subset = share_set.head(threshold)
    polynomials = [
        Polynomial.interpolate(points, field)
        for points in lane_points(subset.shares, field, length)
    ]
    secret = reconstruct(subset, threshold, field)

    wrong: list[WrongShare] = []
    for share in share_set:
        x = to_points(share, field, length)[0].x
        expected = field.join([poly(x) for poly in polynomials], length)
        if expected != share.payload:
            logger.warning(
                "Share %d does not lie on the polynomial from shares %s",
                share.index, list(subset.indices),
            )
            wrong.append(WrongShare(index=share.index, value=share.value))

    if cross_check:
        cross_validate(share_set, threshold, field, secret=secret)

    return ReconstructionResult(secret=secret, wrong_shares=tuple(wrong))


def cross_validate(
    shares: Iterable[Share],
    threshold: int,
    field: Field | None = None,
    secret: bytes | None = None,
) -> bytes:
    """Reconstruct from each disjoint block of threshold shares.

    Blocks are shares[0:k], shares[k:2k], ...; a trailing partial block is
    ignored.

    Returns:
        The secret all blocks agree on.

    Raises:
        AmbiguousReconstructionError: if any two blocks disagree.
    """
    share_set = ShareSet.of(shares)
    check_threshold(share_set, threshold)
    if field is None:
        field = PrimeField()

    subsets: list[tuple[int, ...]] = []
    secrets: list[bytes] = []
    for start in range(0, len(share_set) - threshold + 1, threshold):
        block = ShareSet(share_set.shares[start : start + threshold])
        if start == 0 and secret is not None:
            value = secret
        else:
            value = reconstruct(block, threshold, field)
        subsets.append(block.indices)
        secrets.append(value)

    if len(set(secrets)) > 1:
        raise AmbiguousReconstructionError(subsets, secrets)

    logger.debug("%d disjoint subset(s) agree on the secret", len(subsets))
    return secrets[0]
