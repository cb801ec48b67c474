"""
Formatting of header, same, diff and ellipsis lines.

Line layout (one side shown, the right side mirrors it after four spaces):

    0x0000000010  41 42 43 44 45 46 47 48 ABCDEFGH

Same lines start with a reset directive and carry no other color. Diff lines
color each hex pair and printable character green (match) or red (mismatch),
using the minimized directive sequence from hexdiff.colors.
"""

from __future__ import annotations

from hexdiff.colors import ANSI_RESET, PREFIX_TAG, assign_tags, directives, minimize_colors


# Separators between the fields of a line
ADDRESS_GAP = "  "
ASCII_GAP = " "
SIDE_GAP = "    "

ELLIPSIS = "..."


def format_address(offset: int) -> str:
    """Format a display offset as a zero-padded hex address."""
    return f"0x{offset:010x}"


def printable(byte: int) -> str:
    """Return the character shown for a byte in the printable column."""
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def _hex_column(block: bytes, dense: bool, colors: list[str] | None = None) -> str:
    sep = "" if dense else " "
    if colors is None:
        return sep.join(f"{b:02x}" for b in block)
    return sep.join(f"{color}{b:02x}" for color, b in zip(colors, block))


def _ascii_column(block: bytes, colors: list[str] | None = None) -> str:
    if colors is None:
        return "".join(printable(b) for b in block)
    return "".join(f"{color}{printable(b)}" for color, b in zip(colors, block))


def _side(block: bytes, offset: int, dense: bool, colors: list[str] | None = None) -> str:
    return (
        format_address(offset)
        + ADDRESS_GAP
        + _hex_column(block, dense, colors)
        + ASCII_GAP
        + _ascii_column(block, colors)
    )


def render_same(left: bytes, right: bytes, addr1: int, addr2: int, dense: bool = False) -> str:
    """Render a pair of equal blocks without per-byte coloring."""
    return ANSI_RESET + _side(left, addr1, dense) + SIDE_GAP + _side(right, addr2, dense)


def render_diff(left: bytes, right: bytes, addr1: int, addr2: int, dense: bool = False) -> str:
    """
    Render a pair of differing blocks with per-byte coloring.

    Each address is written in PREFIX_TAG's color; minimize_colors() relies
    on that to skip the directive in front of the first column.

    Args:
        left: Block from the first stream.
        right: Block from the second stream, same length as left.
        addr1: Display offset of the left block.
        addr2: Display offset of the right block.
        dense: Omit the space between hex pairs.

    Returns:
        The rendered line, ending in a reset directive (no newline).
    """
    colors = directives(minimize_colors(assign_tags(left, right), PREFIX_TAG))
    prefix = PREFIX_TAG.directive
    return (
        prefix
        + _side(left, addr1, dense, colors)
        + SIDE_GAP
        + prefix
        + _side(right, addr2, dense, colors)
        + ANSI_RESET
    )


def render_ellipsis() -> str:
    """Render the marker standing in for a suppressed run of equal blocks."""
    return ELLIPSIS


def render_header(columns: int, dense: bool = False) -> str:
    """Render the column header row matching the line layout."""
    sep = "" if dense else " "
    hex_labels = sep.join(f"{i % 16:>2x}" for i in range(columns))
    ascii_labels = "".join(f"{i % 16:x}" for i in range(columns))
    address_label = f"{'offset':>9}".ljust(len(format_address(0)))
    side = address_label + ADDRESS_GAP + hex_labels + ASCII_GAP + ascii_labels
    return ANSI_RESET + side + SIDE_GAP + side

