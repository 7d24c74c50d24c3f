"""Exception types raised by share verification and reconstruction."""

from __future__ import annotations


class ShareVerifyError(ValueError):
    """Base class for every input-validation failure in this package."""


class InvalidShareError(ShareVerifyError):
    """A share is malformed or conflicts with another share in the job."""


class NoInverseError(ShareVerifyError, ArithmeticError):
    """Modular inverse is undefined (operand not coprime to the modulus)."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"{value} has no inverse modulo {modulus}")
        self.value = value
        self.modulus = modulus


class InsufficientSharesError(ShareVerifyError):
    """Fewer shares were supplied than the reconstruction threshold."""

    def __init__(self, available: int, threshold: int) -> None:
        super().__init__(f"Need at least {threshold} shares, got {available}")
        self.available = available
        self.threshold = threshold


class AmbiguousReconstructionError(ShareVerifyError):
    """Disjoint threshold-sized subsets reconstruct different secrets.

    Attributes:
        subsets: Share indices of each subset that was reconstructed.
        secrets: Secret reconstructed from each subset, in the same order.
    """

    def __init__(
        self,
        subsets: list[tuple[int, ...]],
        secrets: list[bytes],
    ) -> None:
        detail = ", ".join(
            f"{list(idx)} -> {secret.hex()}" for idx, secret in zip(subsets, secrets)
        )
        super().__init__(f"Subsets disagree on the secret: {detail}")
        self.subsets = subsets
        self.secrets = secrets


class RecordError(ShareVerifyError):
    """A share record file could not be parsed."""
