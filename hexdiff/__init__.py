"""
hexdiff - side-by-side hexadecimal comparison of binary files.

This package compares two byte streams block by block and renders both in
hex and ASCII, highlighting differing bytes.

Usage:
    from hexdiff import Config, run_diff

    with open("a.bin", "rb") as f1, open("b.bin", "rb") as f2:
        run_diff(Config(columns=8), f1, f2, sys.stdout)
"""

__version__ = "0.1.0"

from hexdiff.block_reader import BlockPair, read_blocks
from hexdiff.cancellation import CancelFlag, cancel_on_signals
from hexdiff.colors import PREFIX_TAG, Tag, assign_tags, minimize_colors
from hexdiff.comparator import LineKind, RunState, blocks_equal
from hexdiff.config import Config, fit_bytes, parse_number
from hexdiff.differ import DiffSummary, run_diff
from hexdiff.errors import HexDiffError, StreamOpenError, StreamReadError, StreamSeekError
from hexdiff.renderer import render_diff, render_ellipsis, render_header, render_same
from hexdiff.streams import open_stream, open_streams

__all__ = [
    # Configuration
    "Config",
    "fit_bytes",
    "parse_number",
    # Reading
    "BlockPair",
    "read_blocks",
    "open_stream",
    "open_streams",
    # Comparison
    "LineKind",
    "RunState",
    "blocks_equal",
    # Colors
    "Tag",
    "PREFIX_TAG",
    "assign_tags",
    "minimize_colors",
    # Rendering
    "render_diff",
    "render_same",
    "render_ellipsis",
    "render_header",
    # Loop
    "DiffSummary",
    "run_diff",
    "CancelFlag",
    "cancel_on_signals",
    # Errors
    "HexDiffError",
    "StreamOpenError",
    "StreamSeekError",
    "StreamReadError",
]
