"""Command-line interface: escape files, stdin or arguments."""

import argparse
import io
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from . import _config
from .errors import CodepointError, LiteralSyntaxError
from .escape import write_char, write_string
from .mode import Mode
from .policy import get_policy
from .types import Codepoint
from .unescape import read_literal

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def parse_codepoint(spec: str) -> Codepoint:
    """
    Parse a codepoint given as ``U+200D``, ``0x200d``, ``8205`` or one character.

    :raises ValueError: If ``spec`` is none of these.
    """
    # digits are decimal, so "9" is a tab, not the digit nine
    if spec.isascii() and spec.isdigit():
        return int(spec, 10)
    if len(spec) == 1:
        return ord(spec)
    upper = spec.upper()
    if upper.startswith("U+"):
        return int(spec[2:], 16)
    if upper.startswith("0X"):
        return int(spec[2:], 16)
    return int(spec, 10)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezcaper",
        description="Print bytes or codepoints as escaped, source-literal-style text.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Files to escape ('-' for stdin), or codepoints with --char "
        "(default: read stdin).",
    )
    parser.add_argument(
        "--text",
        action="append",
        default=[],
        metavar="TEXT",
        help="Escape TEXT itself instead of reading a file. May be repeated.",
    )
    policy = parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--lossy",
        action="store_true",
        help="Replace invalid UTF-8 with U+FFFD (default: EZCAPER_LOSSY or exact).",
    )
    policy.add_argument(
        "--exact",
        action="store_true",
        help="Print invalid bytes as \\xHH so the output reads back byte for byte.",
    )
    parser.add_argument(
        "--bare",
        action="store_true",
        help="Omit the surrounding quotes and quote escaping.",
    )
    parser.add_argument(
        "--char",
        action="store_true",
        help="Treat each INPUT as a codepoint (U+200D, 0x200d, 8205 or a character).",
    )
    parser.add_argument(
        "--lines",
        action="store_true",
        help="Escape every input line on its own.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify that the exact output reads back to the input.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    return parser


def _read_sources(args: argparse.Namespace) -> Iterator[tuple[str, bytes]]:
    """Yield ``(label, data)`` for every input unit."""
    for text in args.text:
        yield "<text>", text.encode("utf-8", errors="surrogateescape")

    paths = args.inputs or ([] if args.text else ["-"])
    for name in paths:
        if name == "-":
            data = sys.stdin.buffer.read()
        else:
            data = Path(name).read_bytes()
        log.debug(f"read {len(data)} bytes from {name}")
        if args.lines:
            for line in data.splitlines():
                yield name, line
        else:
            yield name, data


def _escape_chars(args: argparse.Namespace, mode: Mode) -> int:
    for spec in args.inputs + args.text:
        try:
            cp = parse_codepoint(spec)
        except ValueError:
            print(f"error: not a codepoint: {spec!r}", file=sys.stderr)
            return EXIT_ERROR
        out = io.StringIO()
        try:
            write_char(cp, out, mode)
        except CodepointError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_ERROR
        sys.stdout.write(out.getvalue() + "\n")
    return EXIT_OK


def _escape_strings(args: argparse.Namespace, mode: Mode) -> int:
    if args.lossy:
        policy = get_policy("lossy")
    elif args.exact:
        policy = get_policy("exact")
    else:
        policy = get_policy(_config.default_policy())

    if args.check and policy.NAME != "exact":
        print("error: --check needs the exact policy", file=sys.stderr)
        return EXIT_ERROR

    status = EXIT_OK
    for label, data in _read_sources(args):
        if not args.check:
            write_string(data, sys.stdout, policy, mode)
            sys.stdout.write("\n")
            continue

        out = io.StringIO()
        write_string(data, out, policy, mode)
        escaped = out.getvalue()
        sys.stdout.write(escaped + "\n")
        try:
            ok = read_literal(escaped, mode) == data
        except LiteralSyntaxError as e:
            log.debug(f"read back failed: {e}")
            ok = False
        if not ok:
            log.error(f"round trip mismatch for {label}")
            status = EXIT_MISMATCH
    return status


def _use_utf8_stdout() -> None:
    """Write escaped text as UTF-8 whatever the locale says."""
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else _config.log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    _use_utf8_stdout()

    mode = Mode.BARE if args.bare else Mode.QUOTED
    try:
        if args.char:
            return _escape_chars(args, mode)
        return _escape_strings(args, mode)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
