"""Command-line front end for bigdec.

Usage:
    bigdec add 1.50 2.125
    bigdec quo 10 3 --scale 2 --round down
    bigdec quo 1 25
    bigdec encode -12.50
    bigdec decode 0304e20000000201

Exit codes:
    0 - Success
    1 - Invalid input, division by zero, or a quotient that cannot be
        represented exactly (prints <nil>)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog

from bigdec.config import CliConfig, parse_rounding, parse_scale
from bigdec.dec import Dec
from bigdec.errors import EncodingError, ParseError
from bigdec.scaler import ScalerLike, scale_quo_exact

logger = structlog.get_logger()

# Printed for a quotient that has no exact representation
NIL = "<nil>"


def configure_logging(verbose: bool) -> None:
    """Configure structlog to write to stderr at INFO or DEBUG level."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def format_optional(value: Dec | None) -> str:
    """Render a Dec, or <nil> for a missing result."""
    if value is None:
        return NIL
    return str(value)


def build_parser(config: CliConfig) -> argparse.ArgumentParser:
    """Build the argument parser, with defaults taken from config."""
    parser = argparse.ArgumentParser(
        prog="bigdec",
        description="Exact decimal arithmetic with explicit scale and rounding",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=config.verbose,
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("add", "Print X + Y"),
        ("sub", "Print X - Y"),
        ("mul", "Print X * Y"),
        ("cmp", "Print -1, 0 or 1 comparing X with Y"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("x", help="Left operand")
        cmd.add_argument("y", help="Right operand")

    for name, help_text in (("neg", "Print -X"), ("abs", "Print |X|")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("x", help="Operand")

    quo = sub.add_parser("quo", help="Print X / Y with explicit scale and rounding")
    quo.add_argument("x", help="Dividend")
    quo.add_argument("y", help="Divisor")
    quo.add_argument(
        "--scale",
        type=parse_scale,
        default=config.default_scale,
        help="Digits after the point, or 'exact' for the smallest exact scale",
    )
    quo.add_argument(
        "--round",
        dest="rounding",
        type=parse_rounding,
        default=config.default_rounding,
        help=f"Rounding mode (default: {config.default_rounding.value})",
    )

    encode = sub.add_parser("encode", help="Print the binary encoding of X as hex")
    encode.add_argument("x", help="Value to encode")

    decode = sub.add_parser("decode", help="Decode a hex-encoded value")
    decode.add_argument("data", help="Hex string")

    return parser


def _run(args: argparse.Namespace) -> int:
    command = args.command

    if command == "decode":
        try:
            buf = bytes.fromhex(args.data)
        except ValueError:
            logger.warning("invalid_hex", data=args.data)
            print(f"Error: invalid hex string: {args.data}", file=sys.stderr)
            return 1
        value = Dec.from_bytes(buf)
        logger.debug("decoded", unscaled=value.unscaled, scale=value.scale)
        print(value)
        return 0

    x = Dec.parse(args.x)
    if command == "neg":
        print(-x)
        return 0
    if command == "abs":
        print(abs(x))
        return 0
    if command == "encode":
        print(x.to_bytes().hex())
        return 0

    y = Dec.parse(args.y)
    if command == "add":
        print(x + y)
    elif command == "sub":
        print(x - y)
    elif command == "mul":
        print(x * y)
    elif command == "cmp":
        print(x.cmp(y))
    elif command == "quo":
        scaler: ScalerLike = scale_quo_exact if args.scale is None else args.scale
        rounder = args.rounding.rounder
        logger.debug("quo", scale=args.scale, rounding=args.rounding.value)
        result = x.quo(y, scaler, rounder)
        print(format_optional(result))
        if result is None:
            logger.warning("quotient_not_representable", x=str(x), y=str(y), rounding=rounder.name)
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the bigdec CLI."""
    try:
        config = CliConfig.from_env()
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    args = build_parser(config).parse_args(argv)
    configure_logging(args.verbose)

    try:
        return _run(args)
    except ParseError as err:
        logger.warning("parse_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
    except EncodingError as err:
        logger.warning("decode_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
    except ZeroDivisionError:
        logger.warning("division_by_zero", x=args.x, y=args.y)
        print("Error: division by zero", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
