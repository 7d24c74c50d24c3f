"""Command line interface: reconstruct and verify one job per record file."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from shareverify.detect import detect
from shareverify.errors import ShareVerifyError
from shareverify.field import Field, parse_field
from shareverify.records import load_job
from shareverify.render import render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shareverify",
        description="Reconstruct Shamir secrets and flag corrupted shares",
    )
    parser.add_argument("files", nargs="+", help="JSON share record files")
    parser.add_argument(
        "--field",
        default="mersenne521",
        help="mersenne127, mersenne521, gf256, prime:<p> or gf2^<w>:<poly> "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="require disjoint threshold subsets to agree on the secret",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="treat fewer shares than the threshold as an error",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def process_file(path: str, field: Field, cross_check: bool, strict: bool) -> bool:
    """Run one job and print its report. Returns False if the job failed."""
    try:
        job = load_job(path, lane_size=field.lane_size)
        result = detect(
            job.shares,
            job.threshold,
            field,
            cross_check=cross_check,
            strict=strict,
        )
    except (OSError, ShareVerifyError) as exc:
        logger.error("Error processing file %s: %s", path, exc)
        return False

    print(render_report(job.name, result))
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        field = parse_field(args.field)
    except ValueError as exc:
        parser.error(str(exc))

    ok = True
    for path in args.files:
        ok = process_file(path, field, args.cross_check, args.strict) and ok
    return 0 if ok else 1
