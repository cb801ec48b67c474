"""
Block equality and run-length suppression of identical blocks.
"""

from __future__ import annotations

from enum import Enum


class LineKind(Enum):
    """What to output for one compared block."""

    NONE = "none"
    SAME = "same"
    ELLIPSIS = "ellipsis"
    DIFF = "diff"


def blocks_equal(left: bytes, right: bytes) -> bool:
    """Exact byte-wise comparison of two blocks."""
    return left == right


class RunState:
    """Tracks consecutive equal blocks since the last differing one.

    The first equal block of a run is rendered, the second is replaced by a
    single "..." marker and the rest are dropped. show_all renders every
    block; skip_same drops every equal block.
    """

    def __init__(self) -> None:
        self.eq_run = 0

    def observe(self, equal: bool, show_all: bool = False, skip_same: bool = False) -> LineKind:
        """Update the run counter and return the line to emit for this block."""
        if not equal:
            self.eq_run = 0
            return LineKind.DIFF

        if show_all:
            kind = LineKind.SAME
        elif skip_same:
            kind = LineKind.NONE
        elif self.eq_run == 0:
            kind = LineKind.SAME
        elif self.eq_run == 1:
            kind = LineKind.ELLIPSIS
        else:
            kind = LineKind.NONE

        self.eq_run += 1
        return kind
