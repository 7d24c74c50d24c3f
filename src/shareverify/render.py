"""Text rendering of reconstruction results."""

from __future__ import annotations

import base64

from shareverify.models import ReconstructionResult

RULE = "-" * 34


def render_secret(secret: bytes) -> dict[str, str]:
    """UTF-8, hex and base64 forms of a secret."""
    return {
        "utf8": secret.decode("utf-8", errors="replace"),
        "hex": secret.hex(),
        "base64": base64.b64encode(secret).decode("ascii"),
    }


def render_report(name: str, result: ReconstructionResult) -> str:
    """Multi-line report for one job."""
    lines = []
    if result.secret is None:
        lines.append(f"Not enough shares in {name} to reconstruct a secret.")
    else:
        forms = render_secret(result.secret)
        lines.append(f"Reconstructed Secret from {name}:")
        lines.append(f"UTF-8: {forms['utf8']}")
        lines.append(f"Hex: {forms['hex']}")
        lines.append(f"Base64: {forms['base64']}")

    if result.wrong_shares:
        lines.append("Wrong shares detected (index, value):")
        for wrong in result.wrong_shares:
            lines.append(f"Index: {wrong.index}, Value: {wrong.value}")
    else:
        lines.append("No wrong shares detected.")

    lines.append(RULE)
    return "\n".join(lines)
