"""
Block-at-a-time reading from the two compared streams.
"""

from __future__ import annotations

from typing import BinaryIO, NamedTuple

from hexdiff.errors import StreamReadError


class BlockPair(NamedTuple):
    """One block from each stream.

    Both blocks always have the requested width; bytes past the end of a
    stream are zero. end_reached is True when either read came up short.
    """

    left: bytes
    right: bytes
    end_reached: bool


def stream_name(stream: BinaryIO) -> str:
    """Best-effort identifier for error messages."""
    name = getattr(stream, "name", None)
    return str(name) if name is not None else "<stream>"


def read_block(stream: BinaryIO, width: int) -> tuple[bytes, bool]:
    """Read up to `width` bytes, zero-padding a short read.

    Returns:
        The padded block and whether the read was short.

    Raises:
        StreamReadError: If the underlying read fails.
    """
    try:
        data = stream.read(width)
    except OSError as e:
        raise StreamReadError(stream_name(stream), e) from e

    # Non-blocking streams may return None; treat it like an empty read
    data = data or b""
    return data.ljust(width, b"\0"), len(data) < width


def read_blocks(stream1: BinaryIO, stream2: BinaryIO, width: int) -> BlockPair:
    """Read one block of `width` bytes from each stream."""
    left, short1 = read_block(stream1, width)
    right, short2 = read_block(stream2, width)
    return BlockPair(left, right, short1 or short2)
