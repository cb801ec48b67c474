"""
Exception types raised while acquiring and reading the compared streams.

End-of-stream is never an error; only open, seek and device-level read
failures are reported through these classes.
"""

from __future__ import annotations


class HexDiffError(Exception):
    """Base class for fatal stream errors.

    Attributes:
        name: Identifier of the offending stream (usually its path).
        cause: The underlying OSError.
    """

    action = "access"

    def __init__(self, name: str, cause: OSError) -> None:
        self.name = name
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"Cannot {self.action} {self.name}: {reason}"


class StreamOpenError(HexDiffError):
    """A stream could not be opened for reading."""

    action = "open"


class StreamSeekError(HexDiffError):
    """A stream could not be positioned at its starting offset."""

    action = "seek in"

    def __init__(self, name: str, cause: OSError, offset: int) -> None:
        self.offset = offset
        super().__init__(name, cause)

    def describe(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"Cannot seek to {self.offset:#x} in {self.name}: {reason}"


class StreamReadError(HexDiffError):
    """A read failed below the end-of-stream level."""

    action = "read"
