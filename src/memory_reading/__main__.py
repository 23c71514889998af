#!/usr/bin/env python3
"""
Command-line entry point: parse a UI tree capture and print what it shows.
"""
from __future__ import annotations

import argparse
import logging
import sys

from memory_reading.config import ParserConfig, setup_logging
from memory_reading.core.errors import DecodeError
from memory_reading.core.serialization import serialize_snapshot
from memory_reading.parsing.snapshot import parse_snapshot

logger = logging.getLogger("memory_reading")

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="memory-reading",
        description="Parse a memory reading UI tree (JSON) and print its UI elements.",
    )
    parser.add_argument(
        "path",
        help="Path to the UI tree JSON file, or '-' to read from stdin.",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=400,
        help="Maximum number of element lines to print (default: 400).",
    )
    parser.add_argument(
        "--max-text-length",
        type=int,
        default=80,
        help="Truncate display texts longer than this (default: 80).",
    )
    parser.add_argument(
        "--include-regionless",
        action="store_true",
        help="Also list children that have no display region.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = ParserConfig(
            max_lines=args.max_lines,
            max_text_length=args.max_text_length,
            include_regionless=args.include_regionless,
            debug=args.debug,
        )
    except ValueError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    setup_logging(debug=config.debug)

    try:
        json_text = _read_input(args.path)
    except OSError as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        snapshot = parse_snapshot(json_text)
    except DecodeError as e:
        print(f"Failed to parse UI tree: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    output = serialize_snapshot(
        snapshot,
        max_lines=config.max_lines,
        max_text_length=config.max_text_length,
        include_regionless=config.include_regionless,
    )
    print(output.text)
    logger.debug(f"Printed {len(output.element_map)} elements")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
