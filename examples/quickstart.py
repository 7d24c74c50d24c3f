#!/usr/bin/env python3
"""Quick start example: reconstruct a secret and catch a corrupted share.

Demonstrates the core workflow:
  1. Build shares (normally loaded from a record file)
  2. Reconstruct the secret from a threshold subset
  3. Check every share against the reconstructed polynomial
  4. Repeat over GF(2^8), where every byte is its own polynomial
"""

from shareverify.detect import detect
from shareverify.field import BinaryField, PrimeField
from shareverify.models import Share
from shareverify.reconstruct import reconstruct
from shareverify.render import render_report

# --- 1. Shares on y = 4x + 3 over GF(2^521 - 1), share 3 tampered ---
field = PrimeField()
shares = [
    Share(1, b"\x07"),
    Share(2, b"\x0b"),
    Share(3, b"\x14"),  # should be 0x0f
]

# --- 2. Reconstruct from the first two shares ---
secret = reconstruct(shares, threshold=2, field=field)
print(f"Secret: {int.from_bytes(secret, 'big')}")

# --- 3. Detect shares off the polynomial ---
result = detect(shares, threshold=2, field=field)
print(render_report("example", result))

# --- 4. Byte-wise sharing over GF(2^8) ---
gf256 = BinaryField()
# y = 0x41 + 0x01 * x per byte lane, so x = 1, 2, 3 give 0x40, 0x43, 0x42.
byte_shares = [Share(1, b"\x40"), Share(2, b"\x43"), Share(3, b"\x42")]
print(render_report("gf256 example", detect(byte_shares, 2, gf256)))
