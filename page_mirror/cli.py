"""Command-line entry point for the page mirror."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_OUTPUT_DIRNAME, MirrorConfig
from .mirror import mirror_page
from .models import MirrorError

logger = logging.getLogger("page_mirror.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="page-mirror",
        description="Download a web page with its stylesheets, scripts and images for offline viewing.",
    )
    parser.add_argument("url", help="URL of the page to mirror")
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_DIRNAME,
        type=Path,
        help="Directory under which the per-host mirror is written",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Per-request timeout in seconds (0 disables it)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = MirrorConfig(
        output_root=Path(args.output).resolve(),
        request_timeout=args.timeout or None,
    )

    overall_start = time.perf_counter()
    try:
        summary = asyncio.run(mirror_page(args.url, config))
    except MirrorError as exc:
        logger.error("Error mirroring %s: %s", args.url, exc)
        return 1
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d/%d assets succeeded, %d failed)",
        total_elapsed,
        summary.succeeded,
        summary.total,
        summary.failed,
    )
    for failure in summary.failures:
        logger.debug("Failed %s (%s): %s", failure.url, failure.category.subdir, failure.reason)
    logger.info("Output directory: %s", summary.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
