"""Shamir share verification.

Reconstructs a secret from Shamir shares by Lagrange interpolation over a
finite field and flags shares that disagree with the reconstructed polynomial.
"""

__version__ = "0.1.0"
