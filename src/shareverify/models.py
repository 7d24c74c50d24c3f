"""Data models for shares, field points and reconstruction results."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from shareverify.errors import InvalidShareError


@dataclass(frozen=True)
class Share:
    """One participant's share: a non-zero index and a byte payload."""

    index: int
    payload: bytes

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidShareError(f"Share index must be an int, got {self.index!r}")
        if self.index < 1:
            raise InvalidShareError(
                f"Share index must be >= 1 (0 is the secret), got {self.index}"
            )
        if not isinstance(self.payload, (bytes, bytearray)):
            raise InvalidShareError(
                f"Share payload must be bytes, got {type(self.payload).__name__}"
            )
        if not self.payload:
            raise InvalidShareError(f"Share {self.index} has an empty payload")
        object.__setattr__(self, "payload", bytes(self.payload))

    @property
    def value(self) -> int:
        """Payload as a big-endian unsigned integer."""
        return int.from_bytes(self.payload, byteorder="big")


@dataclass(frozen=True)
class ShareSet:
    """Shares of one reconstruction job, in caller-defined canonical order.

    Construction enforces equal payload lengths and pairwise-distinct
    indices, so interpolation never sees a repeated x coordinate.
    """

    shares: tuple[Share, ...]

    def __init__(self, shares: Iterable[Share]) -> None:
        object.__setattr__(self, "shares", tuple(shares))
        self._validate()

    def _validate(self) -> None:
        seen: dict[int, bytes] = {}
        length: int | None = None
        for share in self.shares:
            if not isinstance(share, Share):
                raise InvalidShareError(f"Expected Share, got {type(share).__name__}")
            if length is None:
                length = len(share.payload)
            elif len(share.payload) != length:
                raise InvalidShareError(
                    f"Share {share.index} payload is {len(share.payload)} bytes, "
                    f"expected {length}"
                )
            previous = seen.get(share.index)
            if previous is not None:
                if previous == share.payload:
                    raise InvalidShareError(f"Duplicate share for index {share.index}")
                raise InvalidShareError(
                    f"Index {share.index} appears twice with different payloads"
                )
            seen[share.index] = share.payload

    @classmethod
    def of(cls, shares: Iterable[Share]) -> ShareSet:
        """Return shares unchanged if already a ShareSet, else validate them."""
        if isinstance(shares, ShareSet):
            return shares
        return cls(shares)

    def __len__(self) -> int:
        return len(self.shares)

    def __iter__(self) -> Iterator[Share]:
        return iter(self.shares)

    def __getitem__(self, item: int) -> Share:
        return self.shares[item]

    @property
    def payload_length(self) -> int:
        """Canonical payload length of the job (0 when empty)."""
        return len(self.shares[0].payload) if self.shares else 0

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(s.index for s in self.shares)

    def head(self, count: int) -> ShareSet:
        """The first count shares, which form the reconstruction subset."""
        return ShareSet(self.shares[:count])


@dataclass(frozen=True)
class FieldPoint:
    """A share reinterpreted as (x, y) on the sharing polynomial."""

    x: int
    y: int


@dataclass(frozen=True)
class WrongShare:
    """A share that disagrees with the reconstructed polynomial.

    Attributes:
        index: The share's index.
        value: Observed payload as a big-endian integer.
    """

    index: int
    value: int


@dataclass(frozen=True)
class ReconstructionResult:
    """Outcome of a detection pass.

    Attributes:
        secret: Reconstructed secret, or None if too few shares were given.
        wrong_shares: Shares inconsistent with the polynomial, in input order.
    """

    secret: bytes | None
    wrong_shares: tuple[WrongShare, ...] = field(default_factory=tuple)
