"""Load share records from JSON files.

Record layout:

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}

Every key other than ``keys`` is a share index; ``value`` holds digits in
``base`` (2..36). Payloads are padded on the left to the widest value so all
shares of a job share one canonical length; fields that split payloads into
multi-byte lanes round that length up to a whole number of lanes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shareverify.errors import InvalidShareError, RecordError
from shareverify.models import Share, ShareSet

logger = logging.getLogger(__name__)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class ShareJob:
    """One reconstruction job loaded from a record file.

    Attributes:
        name: Source of the records, usually the file path.
        shares: Validated shares in file order.
        threshold: Declared threshold k.
        declared: Declared share count n, if present.
    """

    name: str
    shares: ShareSet
    threshold: int
    declared: int | None = None


def decode_value(value: str, base: int | str) -> int:
    """Parse value as an unsigned integer written in base (2..36)."""
    try:
        radix = int(base)
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid base {base!r}") from exc
    if not 2 <= radix <= 36:
        raise RecordError(f"Base must be in [2, 36], got {radix}")
    text = value.strip().lower() if isinstance(value, str) else ""
    if not text or any(ch not in DIGITS[:radix] for ch in text):
        raise RecordError(f"Invalid value {value!r} for base {radix}")
    return int(text, radix)


def byte_length(value: int) -> int:
    """Bytes needed to hold value, at least one."""
    return max(1, (value.bit_length() + 7) // 8)


def to_payload(value: int, length: int) -> bytes:
    """Big-endian encoding of value, left zero-padded to length bytes."""
    if value < 0:
        raise RecordError(f"Value must be non-negative, got {value}")
    if byte_length(value) > length:
        raise RecordError(f"Value needs {byte_length(value)} bytes, only {length} allowed")
    return value.to_bytes(length, byteorder="big")


def _read_keys(data: dict[str, Any]) -> tuple[int, int | None]:
    keys = data.get("keys")
    if not isinstance(keys, dict) or "k" not in keys:
        raise RecordError("Missing 'keys.k' threshold")
    try:
        threshold = int(keys["k"])
        declared = int(keys["n"]) if "n" in keys else None
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid 'keys' entry: {keys!r}") from exc
    if threshold < 1:
        raise RecordError(f"Threshold 'keys.k' must be >= 1, got {threshold}")
    return threshold, declared


def parse_job(
    data: dict[str, Any],
    name: str = "<records>",
    lane_size: int | None = None,
) -> ShareJob:
    """Build a ShareJob from decoded JSON records.

    Payloads are left-padded to the widest value, rounded up to a whole
    number of lane_size-byte lanes when the target field splits payloads.
    """
    if not isinstance(data, dict):
        raise RecordError(f"{name}: expected a JSON object, got {type(data).__name__}")

    threshold, declared = _read_keys(data)

    values: list[tuple[int, int]] = []
    for key, record in data.items():
        if key == "keys":
            continue
        try:
            index = int(key)
        except ValueError as exc:
            raise RecordError(f"{name}: share key {key!r} is not an integer") from exc
        if not isinstance(record, dict) or "base" not in record or "value" not in record:
            raise RecordError(f"{name}: share {key} needs 'base' and 'value'")
        values.append((index, decode_value(record["value"], record["base"])))

    if declared is not None and declared != len(values):
        logger.warning("%s: declares n=%d but holds %d shares", name, declared, len(values))

    length = max((byte_length(v) for _, v in values), default=0)
    if lane_size:
        length = -(-length // lane_size) * lane_size
    try:
        shares = ShareSet(Share(index, to_payload(v, length)) for index, v in values)
    except InvalidShareError as exc:
        raise RecordError(f"{name}: {exc}") from exc

    logger.debug("%s: %d shares of %d bytes, k=%d", name, len(shares), length, threshold)
    return ShareJob(name=name, shares=shares, threshold=threshold, declared=declared)


def load_job(path: str | Path, lane_size: int | None = None) -> ShareJob:
    """Read and parse a JSON share record file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise RecordError(f"{path}: not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordError(f"{path}: invalid JSON: {exc}") from exc
    return parse_job(data, name=str(path), lane_size=lane_size)
