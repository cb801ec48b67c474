"""Pytest configuration and shared fixtures for hexdiff tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest

from hexdiff.colors import ANSI_GREEN, ANSI_RED, ANSI_RESET
from hexdiff.config import Config
from hexdiff.differ import DiffSummary, run_diff


def strip_ansi(line: str) -> str:
    """Remove the color directives hexdiff emits."""
    for code in (ANSI_RESET, ANSI_GREEN, ANSI_RED):
        line = line.replace(code, "")
    return line


@pytest.fixture
def write_bin(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes bytes to a file under tmp_path."""
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def diff_lines() -> Callable[..., tuple[DiffSummary, list[str]]]:
    """Return a helper running the comparison loop over in-memory data.

    The helper returns the summary and the output lines with colors removed.
    """
    def _run(left: bytes, right: bytes, **config_kwargs) -> tuple[DiffSummary, list[str]]:
        out = io.StringIO()
        summary = run_diff(Config(**config_kwargs), io.BytesIO(left), io.BytesIO(right), out)
        lines = [strip_ansi(line) for line in out.getvalue().splitlines()]
        return summary, lines
    return _run


@pytest.fixture
def abc_pair() -> tuple[bytes, bytes]:
    """Two 8-byte blocks differing only at index 4."""
    return b"ABCDEFGH", b"ABCDXFGH"
