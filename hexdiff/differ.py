"""
The comparison loop: read, compare, render, repeat.

Usage:
    from hexdiff.config import Config
    from hexdiff.differ import run_diff

    with open("a.bin", "rb") as f1, open("b.bin", "rb") as f2:
        summary = run_diff(Config(columns=8), f1, f2, sys.stdout)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from hexdiff.block_reader import read_blocks
from hexdiff.cancellation import CancelFlag
from hexdiff.comparator import LineKind, RunState, blocks_equal
from hexdiff.config import Config
from hexdiff.renderer import render_diff, render_ellipsis, render_same

log = logging.getLogger(__name__)

# Stop reasons
STOP_END = "end"
STOP_MAX_LENGTH = "max_length"
STOP_CANCELLED = "cancelled"


@dataclass
class DiffSummary:
    """Counters describing a finished run."""

    blocks: int = 0
    diff_blocks: int = 0
    bytes_compared: int = 0
    lines: int = 0
    stop_reason: str = STOP_END

    @property
    def identical(self) -> bool:
        return self.diff_blocks == 0


def run_diff(
    config: Config,
    stream1: BinaryIO,
    stream2: BinaryIO,
    out: TextIO,
    cancel: CancelFlag | None = None,
) -> DiffSummary:
    """
    Compare two streams block by block, writing one line per rendered block.

    Both streams must already be positioned at their starting offsets; the
    offsets in config are only used for the displayed addresses. The loop
    ends after the first block in which either stream came up short, once
    max_length bytes have been processed, or when cancel is set.

    Args:
        config: Resolved run configuration.
        stream1: Left stream.
        stream2: Right stream.
        out: Text output, one line per rendered block.
        cancel: Optional flag polled before every block.

    Returns:
        A DiffSummary for the run.

    Raises:
        StreamReadError: If a read fails below the end-of-stream level.
            Lines already written are left in place.
    """
    summary = DiffSummary()
    run = RunState()
    width = config.columns
    cnt = 0
    final = False

    while not final:
        if not config.within_limit(cnt):
            summary.stop_reason = STOP_MAX_LENGTH
            break
        if cancel is not None and cancel.is_set():
            summary.stop_reason = STOP_CANCELLED
            break

        left, right, final = read_blocks(stream1, stream2, width)

        equal = blocks_equal(left, right)
        kind = run.observe(equal, config.show_all, config.skip_same)

        line = None
        if kind is LineKind.DIFF:
            line = render_diff(left, right, config.skip1 + cnt, config.skip2 + cnt, config.dense)
            summary.diff_blocks += 1
        elif kind is LineKind.SAME:
            line = render_same(left, right, config.skip1 + cnt, config.skip2 + cnt, config.dense)
        elif kind is LineKind.ELLIPSIS:
            line = render_ellipsis()

        if line is not None:
            out.write(line + "\n")
            summary.lines += 1

        summary.blocks += 1
        cnt += width

    summary.bytes_compared = cnt
    log.debug(
        "Stopped (%s) after %d blocks, %d differing, %d lines written, %s",
        summary.stop_reason, summary.blocks, summary.diff_blocks, summary.lines,
        "identical" if summary.identical else "different",
    )
    return summary
