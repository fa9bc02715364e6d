"""Add exact numbers from the command line or an interactive loop."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import Settings, load_settings
from .errors import RadixError
from .exact import add
from .number import Number
from .rational import rational_normalize, rationalize

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


def parse_operand(text: str, settings: Settings) -> Number:
    """Parse *text*, using the configured base unless it carries a ``base#`` prefix."""
    if "#" in text:
        return Number.parse(text)
    return Number.parse(text, base=settings.default_base)


def evaluate(left: str, right: str, settings: Settings) -> str:
    total = add(parse_operand(left, settings), parse_operand(right, settings))
    if settings.show_fraction:
        return f"{total} = {rational_normalize(rationalize(total))}"
    return str(total)


def run_loop(stream: TextIO, out: TextIO, settings: Settings) -> int:
    """Evaluate ``A + B`` lines from *stream* until EOF or ``quit``.

    Returns the number of lines that failed.
    """
    failures = 0
    for raw_line in stream:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.lower() in QUIT_COMMANDS:
            break
        operands = line.split("+")
        if len(operands) != 2:
            print(f"Error: expected 'A + B', got {line!r}", file=out)
            failures += 1
            continue
        try:
            print(evaluate(operands[0], operands[1], settings), file=out)
        except RadixError as exc:
            logger.debug("failed to evaluate %r", line, exc_info=True)
            print(f"Error: {exc}", file=out)
            failures += 1
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix",
        description=(
            "Add two exact numbers written as [base#][-]digits[.digits][(repeating)]. "
            "Without operands, read 'A + B' lines from standard input. "
            "Put '--' before a negative first operand."
        ),
    )
    parser.add_argument("operands", nargs="*", help="Two numbers to add")
    parser.add_argument("--config", dest="config", help="TOML settings file")
    parser.add_argument("--base", type=int, help="Base for operands without a base# prefix")
    parser.add_argument(
        "--fraction",
        action="store_true",
        default=None,
        help="Also print the sum as a reduced fraction",
    )
    parser.add_argument("--log-level", dest="log_level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    if args.base is not None:
        settings.default_base = args.base
    if args.fraction is not None:
        settings.show_fraction = args.fraction
    if args.log_level is not None:
        settings.log_level = args.log_level
    try:
        settings.validate()
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=settings.level, format="%(levelname)s %(name)s: %(message)s")

    if args.operands:
        if len(args.operands) != 2:
            parser.error("expected exactly two operands")
        print(evaluate(args.operands[0], args.operands[1], settings))
        return 0
    return 1 if run_loop(sys.stdin, sys.stdout, settings) else 0


def run() -> None:
    try:
        sys.exit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
