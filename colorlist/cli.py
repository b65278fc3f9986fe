"""Command-line entry point for the color extractor."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Sequence

from .config import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SOURCE_URL,
    OUTPUT_FORMATS,
    VERSION,
    ExtractConfig,
)
from .errors import ColorListError
from .extractor import run_extractor
from .formats import render, write_output

logger = logging.getLogger("colorlist.cli")


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def _discard_stdout() -> None:
    # Shutdown flushes stdout again; the pipe is already closed.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="colorlist",
        description=(
            "Fetch the alphabetical list of colors and print it as CSV, JSON or XML."
        ),
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="Set the output format (default: %(default)s)",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_SOURCE_URL,
        help="Page to extract colors from",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Seconds to wait for the page before giving up (default: wait indefinitely)",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Quote or escape color names so they cannot break the output format",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the page does not alternate name and RGB nodes",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = ExtractConfig(
        source_url=args.url,
        timeout=args.timeout,
        strict=args.strict,
    )

    try:
        colors = asyncio.run(run_extractor(config))
        document = render(colors, args.format, escape=args.escape)
        write_output(document, sys.stdout)
    except ColorListError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        if isinstance(exc.__cause__, BrokenPipeError):
            _discard_stdout()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
