"""
Command-line interface for numerlo.

Usage:
    numerlo encode 2026 --to roman
    numerlo encode 1 2 3 --to devanagari
    numerlo decode MMXXVI
    numerlo decode "1,234,567" --from arabic --to thai --sep ,
    numerlo detect ๑๒๓
    numerlo systems

Environment:
    NUMERLO_DEFAULT_SYSTEM  Target system when --to is omitted (default: arabic)
    NUMERLO_LOG_LEVEL       Logging level (default: WARNING)
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from ..engine.catalog import systems
from ..engine.convert import AUTO, INTEGER, convert, detect_system

DEFAULT_SYSTEM = os.environ.get("NUMERLO_DEFAULT_SYSTEM", "arabic")
LOG_LEVEL = os.environ.get("NUMERLO_LOG_LEVEL", "WARNING")


def report(result) -> int:
    """Print a result value, or the error kind to stderr."""
    if not result.ok:
        print(f"ERROR: {result.error.value}", file=sys.stderr)
        return 1
    if isinstance(result.value, list):
        for item in result.value:
            print(item)
    else:
        print(result.value)
    return 0


def log_level(name: str) -> int:
    """Resolve a level name, falling back to WARNING for unknown names."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode integers into a numeral system."""
    value = args.numbers[0] if len(args.numbers) == 1 else args.numbers
    return report(convert(value, to=args.to, separator=args.sep))


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a numeral string, optionally re-encoding it."""
    return report(convert(args.text, to=args.to, from_=args.source, separator=args.sep))


def cmd_detect(args: argparse.Namespace) -> int:
    """Show which system auto-detection picks for a string."""
    system = detect_system(args.text)
    if system is None:
        print("ERROR: unknown_system", file=sys.stderr)
        return 1
    print(system.value)
    return 0


def cmd_systems(args: argparse.Namespace) -> int:
    """List supported systems."""
    catalog = systems()
    width = max(len(s.value) for s in catalog)
    for system, info in sorted(catalog.items(), key=lambda kv: kv[0].value):
        line = f"{system.value:<{width}}  base {info.base:<2}  {info.kind.value:<10}  {info.example}"
        if args.verbose:
            line += f"\n{'':<{width}}  {info.description}"
        print(line)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="numerlo",
        description="Render and parse integers in Unicode numeral systems",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("numbers", nargs="+", type=parse_int, help="Integers to encode")
    encode_parser.add_argument("--to", default=DEFAULT_SYSTEM, help="Target system")
    encode_parser.add_argument("--sep", help="Digit-group separator")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode a numeral string")
    decode_parser.add_argument("text", help="Encoded numeral")
    decode_parser.add_argument("--from", dest="source", default=AUTO,
                               help="Source system (default: auto)")
    decode_parser.add_argument("--to", default=INTEGER,
                               help="Target system or 'integer' (default: integer)")
    decode_parser.add_argument("--sep", help="Digit-group separator")
    decode_parser.set_defaults(func=cmd_decode)

    detect_parser = subparsers.add_parser("detect", help="Identify the numeral system")
    detect_parser.add_argument("text", help="Encoded numeral")
    detect_parser.set_defaults(func=cmd_detect)

    systems_parser = subparsers.add_parser("systems", help="List supported systems")
    systems_parser.set_defaults(func=cmd_systems)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=log_level(LOG_LEVEL),
                        format="%(levelname)s %(name)s: %(message)s")
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
