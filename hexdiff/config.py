"""
Resolved configuration for a comparison run.

The CLI turns flags and positional arguments into a Config; everything
downstream treats it as read-only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


# Block width bounds
MIN_COLUMNS = 1
MAX_COLUMNS = 256
DEFAULT_COLUMNS = 16

# Fixed characters per side besides the byte columns: address, gaps
SIDE_DECORATION = 15

# Largest displayable offset (64-bit addresses)
MAX_OFFSET = 2**64 - 1

_OCTAL_RE = re.compile(r"0[0-7]+")


def parse_number(text: str) -> int:
    """Parse an unsigned integer the way C's strtoull(s, NULL, 0) does.

    Accepts decimal, 0x-prefixed hex and leading-zero octal, plus Python's
    0o and 0b prefixes.

    Raises:
        ValueError: If the text is not a non-negative integer.

    Examples:
        >>> parse_number("0x10")
        16
        >>> parse_number("010")
        8
    """
    value_text = text.strip()
    if "_" in value_text:
        raise ValueError(f"digit separators are not accepted: '{text}'")
    if _OCTAL_RE.fullmatch(value_text):
        value = int(value_text, 8)
    else:
        value = int(value_text, 0)

    if value < 0:
        raise ValueError(f"expected a non-negative number, got '{text}'")
    return value


def fit_bytes(width: int, dense: bool = False) -> int:
    """Return how many bytes per block fit in a terminal `width` columns wide.

    Both sides share the width; each side loses SIDE_DECORATION columns to
    the address and gaps. Dense mode drops the space between hex pairs.
    Never returns less than 1.
    """
    per_byte = 2 if dense else 3
    usable = (width // 2 * 2) - 2 * SIDE_DECORATION
    return max(MIN_COLUMNS, usable // (2 * per_byte))


def clamp_columns(columns: int) -> int:
    """Clamp a derived block width into the supported range."""
    return max(MIN_COLUMNS, min(MAX_COLUMNS, columns))


@dataclass(frozen=True)
class Config:
    """Settings for one comparison run.

    Attributes:
        columns: Bytes per block (1 to 256).
        dense: Omit the space between hex pairs.
        show_all: Render every block, disabling run suppression.
        skip_same: Render nothing for equal blocks.
        max_length: Stop after this many bytes (0 = unbounded).
        skip1: Starting offset in the first stream.
        skip2: Starting offset in the second stream.
    """

    columns: int = DEFAULT_COLUMNS
    dense: bool = False
    show_all: bool = False
    skip_same: bool = False
    max_length: int = 0
    skip1: int = 0
    skip2: int = 0

    def __post_init__(self) -> None:
        if not MIN_COLUMNS <= self.columns <= MAX_COLUMNS:
            raise ValueError(
                f"Block width must be between {MIN_COLUMNS} and {MAX_COLUMNS}, "
                f"got {self.columns}"
            )
        if self.max_length < 0:
            raise ValueError(f"Max length must be non-negative, got {self.max_length}")
        for name in ("skip1", "skip2"):
            offset = getattr(self, name)
            if not 0 <= offset <= MAX_OFFSET:
                raise ValueError(f"Offset {name} out of range: {offset}")

    def within_limit(self, count: int) -> bool:
        """Return True if another block may start after `count` bytes."""
        return self.max_length == 0 or count < self.max_length
