#!/usr/bin/env python3
"""
hexdiff - side-by-side hexadecimal comparison of two binary files

Compares two files block by block and prints both in hex and ASCII,
coloring matching bytes green and differing bytes red. Runs of identical
blocks are collapsed to their first line followed by "...".

Usage:
    hexdiff firmware_a.bin firmware_b.bin
    hexdiff -c 8 -n 0x200 a.bin b.bin 0x1000 0x1400
    hexdiff --dense --width 200 a.bin b.bin
    uv run python -m hexdiff -a a.bin b.bin

Numbers (max length, offsets, widths) accept decimal, 0x-prefixed hex and
leading-zero octal.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console

from hexdiff import __version__
from hexdiff.cancellation import CancelFlag, cancel_on_signals
from hexdiff.config import (
    DEFAULT_COLUMNS,
    MAX_COLUMNS,
    MIN_COLUMNS,
    Config,
    clamp_columns,
    fit_bytes,
    parse_number,
)
from hexdiff.differ import run_diff
from hexdiff.errors import HexDiffError
from hexdiff.renderer import render_header
from hexdiff.streams import open_streams

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def number(text: str) -> int:
    """argparse type for unsigned C-style numbers."""
    try:
        return parse_number(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")


def columns_arg(text: str) -> int:
    """argparse type for the block width."""
    value = number(text)
    if not MIN_COLUMNS <= value <= MAX_COLUMNS:
        raise argparse.ArgumentTypeError(
            f"columns must be between {MIN_COLUMNS} and {MAX_COLUMNS}, got {value}"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexdiff",
        description="Compare two binary files side by side in hex and ASCII.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("file1", help="First file")
    parser.add_argument("file2", help="Second file")
    parser.add_argument("skip1", nargs="?", type=number, default=0,
                        help="Starting offset in the first file (default: 0)")
    parser.add_argument("skip2", nargs="?", type=number, default=0,
                        help="Starting offset in the second file (default: 0)")
    parser.add_argument("-a", "--show-all", action="store_true",
                        help="Show every block, including repeated identical ones")
    parser.add_argument("-d", "--dense", action="store_true",
                        help="No space between hex byte pairs")
    parser.add_argument("-s", "--skip-same", action="store_true",
                        help="Hide identical blocks entirely")
    parser.add_argument("-n", "--max-length", type=number, default=0,
                        help="Stop after this many bytes (default: 0, unbounded)")
    parser.add_argument("-c", "--columns", type=columns_arg,
                        help=f"Bytes per line, {MIN_COLUMNS}-{MAX_COLUMNS} (default: {DEFAULT_COLUMNS}, "
                             "or fit to the terminal)")
    parser.add_argument("-w", "--width", type=number,
                        help="Terminal width to fit the output to (overrides detection)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug information to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def detect_width(console: Console | None = None) -> int | None:
    """Return the terminal width, or None when stdout is not a terminal."""
    console = console or Console()
    if not console.is_terminal:
        return None
    return console.size.width


def resolve_columns(args: argparse.Namespace, terminal_width: int | None = None) -> int:
    """Pick the block width: explicit columns, then width override, then terminal."""
    if args.columns is not None:
        return args.columns
    if args.width is not None:
        return clamp_columns(fit_bytes(args.width, args.dense))
    if terminal_width is not None:
        return clamp_columns(fit_bytes(terminal_width, args.dense))
    return DEFAULT_COLUMNS


def resolve_config(args: argparse.Namespace, terminal_width: int | None = None) -> Config:
    """Build the run configuration from parsed arguments."""
    return Config(
        columns=resolve_columns(args, terminal_width),
        dense=args.dense,
        show_all=args.show_all,
        skip_same=args.skip_same,
        max_length=args.max_length,
        skip1=args.skip1,
        skip2=args.skip2,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    setup_logging(args.verbose)

    terminal_width = None
    if args.columns is None and args.width is None:
        terminal_width = detect_width()

    try:
        config = resolve_config(args, terminal_width)
    except ValueError as e:
        parser.error(str(e))

    log.debug("Resolved configuration: %s", config)
    if terminal_width is not None:
        log.debug("Fitted %d columns to terminal width %d", config.columns, terminal_width)

    out = sys.stdout
    try:
        with cancel_on_signals(CancelFlag()) as cancel:
            with open_streams(args.file1, args.file2, config.skip1, config.skip2) as (stream1, stream2):
                print(render_header(config.columns, config.dense), file=out)
                run_diff(config, stream1, stream2, out, cancel)
            out.flush()
    except HexDiffError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except BrokenPipeError:
        # Reader closed the pipe early; keep the interpreter's final flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        log.debug("Output closed by reader, stopping")
        return EXIT_OK

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
