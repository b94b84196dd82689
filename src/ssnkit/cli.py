"""
Command line interface for ssnkit.

Usage:
    python -m ssnkit validate 19750930-1938 20090301-6684
    python -m ssnkit format 197509301938 --short
    python -m ssnkit generate --count 5 --safe --min-age 18 --max-age 80
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from ssnkit.config import settings
from ssnkit.errors import ChecksumError, SSNError
from ssnkit.formatting import format_ssn
from ssnkit.generator import SAFE_PATTERN, generate_ssn
from ssnkit.parser import parse, validate
from ssnkit.random_time import years

logger = logging.getLogger(__name__)


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--short",
        action="store_true",
        help="Omit the century (10 digit form)",
    )
    parser.add_argument(
        "--no-separator",
        action="store_true",
        help="Do not put '-' before the last four digits",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssnkit", description="Swedish personal identity numbers"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    validate_cmd = commands.add_parser("validate", help="Validate numbers")
    validate_cmd.add_argument("numbers", nargs="+", metavar="NUMBER")

    format_cmd = commands.add_parser("format", help="Re-format a number")
    format_cmd.add_argument("number", metavar="NUMBER")
    _add_output_options(format_cmd)

    generate_cmd = commands.add_parser("generate", help="Generate numbers")
    generate_cmd.add_argument("--count", type=int, default=1)
    generate_cmd.add_argument(
        "--pattern",
        default=None,
        help=f"Pattern for the last four digits (default: {settings.default_pattern})",
    )
    generate_cmd.add_argument(
        "--safe",
        action="store_true",
        help=f"Use the reserved 980-999 serial range (pattern {SAFE_PATTERN})",
    )
    generate_cmd.add_argument("--min-age", type=int, default=settings.min_age_years)
    generate_cmd.add_argument("--max-age", type=int, default=settings.max_age_years)
    generate_cmd.add_argument("--seed", type=int, default=None)
    _add_output_options(generate_cmd)

    return parser


def _render(ssn, args: argparse.Namespace) -> str:
    return format_ssn(
        ssn,
        include_century=not args.short,
        include_separator=not args.no_separator,
    )


def cmd_validate(args: argparse.Namespace) -> int:
    status = 0
    for number in args.numbers:
        result = validate(number)
        if result.is_valid:
            print(f"{number}: valid")
        else:
            status = 1
            print(f"{number}: invalid ({result.error})")
    return status


def cmd_format(args: argparse.Namespace) -> int:
    try:
        ssn = parse(args.number)
    except ChecksumError as e:
        logger.warning(f"{args.number}: {e}")
        ssn = e.ssn
    except SSNError as e:
        print(f"{args.number}: invalid ({e})", file=sys.stderr)
        return 1
    print(_render(ssn, args))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    if args.count < 0:
        print("--count must not be negative", file=sys.stderr)
        return 2
    if not 0 <= args.min_age <= args.max_age:
        print("Ages must satisfy 0 <= --min-age <= --max-age", file=sys.stderr)
        return 2

    pattern = SAFE_PATTERN if args.safe else args.pattern
    rng = random.Random(args.seed) if args.seed is not None else None
    for _ in range(args.count):
        ssn = generate_ssn(
            pattern, from_=years(args.max_age), to=years(args.min_age), rng=rng
        )
        print(_render(ssn, args))
    return 0


COMMANDS = {
    "validate": cmd_validate,
    "format": cmd_format,
    "generate": cmd_generate,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
