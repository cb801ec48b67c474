"""
Opening and positioning the two compared files.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import BinaryIO, Iterator

from hexdiff.errors import StreamOpenError, StreamSeekError

log = logging.getLogger(__name__)


def open_stream(filename: str, offset: int = 0) -> BinaryIO:
    """Open `filename` for binary reading and seek to `offset`.

    Raises:
        StreamOpenError: If the file cannot be opened.
        StreamSeekError: If the file cannot be positioned at `offset`.
            The file is closed before raising.
    """
    try:
        stream = open(filename, "rb")
    except OSError as e:
        raise StreamOpenError(filename, e) from e

    if offset:
        try:
            stream.seek(offset)
        except OSError as e:
            stream.close()
            raise StreamSeekError(filename, e, offset) from e
        except OverflowError as e:
            stream.close()
            raise StreamSeekError(filename, OSError(str(e)), offset) from e

    log.debug("Opened %s at offset %#x", filename, offset)
    return stream


@contextmanager
def open_streams(
    filename1: str,
    filename2: str,
    skip1: int = 0,
    skip2: int = 0,
) -> Iterator[tuple[BinaryIO, BinaryIO]]:
    """Open both files, closing whichever was opened on any exit path."""
    with ExitStack() as stack:
        stream1 = stack.enter_context(open_stream(filename1, skip1))
        stream2 = stack.enter_context(open_stream(filename2, skip2))
        yield stream1, stream2
