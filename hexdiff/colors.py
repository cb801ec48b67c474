"""
Per-byte color tags and the escape-sequence minimizer.

A differing block gets one Tag per column. Rendering every column with its
own ANSI directive is correct but noisy, so minimize_colors() keeps only the
directives that actually change the terminal's current color.

Color Tags:
    - MATCH: byte is identical on both sides (green)
    - MISMATCH: byte differs (red)
"""

from __future__ import annotations

from enum import Enum


# ANSI escape sequences
ANSI_GREEN = "\x1b[32m"
ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"


class Tag(Enum):
    """Comparison result for a single column."""

    MATCH = "match"
    MISMATCH = "mismatch"

    @property
    def directive(self) -> str:
        """Return the ANSI directive that selects this tag's color."""
        return ANSI_GREEN if self is Tag.MATCH else ANSI_RED


# Color written in front of every address on a diff line. minimize_colors()
# relies on it: if this changes, the leading-omission rule changes with it.
PREFIX_TAG = Tag.MISMATCH


def assign_tags(left: bytes, right: bytes) -> list[Tag]:
    """Tag each column of two same-length blocks as MATCH or MISMATCH."""
    return [Tag.MATCH if a == b else Tag.MISMATCH for a, b in zip(left, right)]


def minimize_colors(tags: list[Tag], prefix_tag: Tag = PREFIX_TAG) -> list[Tag | None]:
    """
    Drop directives that would not change the current color.

    The returned list has one entry per column: the Tag whose directive must
    be written in front of that column, or None to write nothing. The same
    list is replayed for the hex pass and for the printable pass of each side.

    Column 0 normally always gets a directive, because the printable pass
    starts right after the last hex pair. It is omitted only when both the
    first and the last column carry prefix_tag: the hex pass then inherits
    prefix_tag from the address, and the printable pass inherits it from the
    last hex pair.

    Args:
        tags: One Tag per column (1 to 256 entries).
        prefix_tag: Tag whose color is active right before column 0 of the
            hex pass.

    Returns:
        A list of Tag or None, same length as tags.

    Examples:
        >>> M, X = Tag.MATCH, Tag.MISMATCH
        >>> minimize_colors([X, M, M, X])
        [None, <Tag.MATCH: 'match'>, None, <Tag.MISMATCH: 'mismatch'>]
    """
    if not tags:
        return []

    first = tags[0]
    if first == prefix_tag and tags[-1] == prefix_tag:
        emitted: list[Tag | None] = [None]
    else:
        emitted = [first]

    current = first
    for tag in tags[1:]:
        if tag == current:
            emitted.append(None)
        else:
            emitted.append(tag)
            current = tag

    return emitted


def directives(emitted: list[Tag | None]) -> list[str]:
    """Convert minimized tags into the literal strings to write per column."""
    return [tag.directive if tag is not None else "" for tag in emitted]
