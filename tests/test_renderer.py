"""Tests for line formatting in hexdiff/renderer.py."""

from __future__ import annotations

import pytest

from hexdiff.colors import ANSI_GREEN, ANSI_RED, ANSI_RESET
from hexdiff.renderer import (
    format_address,
    printable,
    render_diff,
    render_ellipsis,
    render_header,
    render_same,
)

from conftest import strip_ansi


class TestFormatAddress:
    """Tests for format_address()."""

    def test_zero(self):
        assert format_address(0) == "0x0000000000"

    def test_fixed_width(self):
        assert format_address(0x1234) == "0x0000001234"

    def test_large_offsets_grow(self):
        assert format_address(2**64 - 1) == "0xffffffffffffffff"


class TestPrintable:
    """Tests for printable()."""

    @pytest.mark.parametrize("byte, expected", [
        (0x41, "A"),
        (0x20, " "),
        (0x7E, "~"),
        (0x1F, "."),
        (0x7F, "."),
        (0x00, "."),
        (0xFF, "."),
    ])
    def test_printable_range(self, byte, expected):
        assert printable(byte) == expected


class TestRenderSame:
    """Tests for render_same()."""

    def test_layout(self):
        line = render_same(b"AB\x00\xff", b"AB\x00\xff", 0x10, 0x20)
        assert line == (
            ANSI_RESET
            + "0x0000000010  41 42 00 ff AB.."
            + "    "
            + "0x0000000020  41 42 00 ff AB.."
        )

    def test_dense(self):
        line = render_same(b"AB", b"AB", 0, 0, dense=True)
        assert strip_ansi(line) == "0x0000000000  4142 AB    0x0000000000  4142 AB"

    def test_only_leading_reset(self):
        line = render_same(b"ABCD", b"ABCD", 0, 0)
        assert line.startswith(ANSI_RESET)
        assert line.count("\x1b[") == 1


class TestRenderDiff:
    """Tests for render_diff()."""

    def test_single_difference(self, abc_pair):
        line = render_diff(*abc_pair, 0, 0)

        assert strip_ansi(line) == (
            "0x0000000000  41 42 43 44 45 46 47 48 ABCDEFGH"
            "    "
            "0x0000000000  41 42 43 44 58 46 47 48 ABCDXFGH"
        )
        assert f"{ANSI_RED}45" in line
        assert f"{ANSI_RED}58" in line
        assert f"{ANSI_RED}E" in line
        assert f"{ANSI_RED}X" in line
        assert f"{ANSI_GREEN}41" in line
        assert f"{ANSI_GREEN}46" in line

    def test_minimized_directive_counts(self, abc_pair):
        line = render_diff(*abc_pair, 0, 0)
        # Two address prefixes, then index 4 in hex and printable on each side
        assert line.count(ANSI_RED) == 6
        # Index 0 and index 5 in hex and printable on each side
        assert line.count(ANSI_GREEN) == 8

    def test_starts_with_prefix_color_and_ends_with_reset(self, abc_pair):
        line = render_diff(*abc_pair, 0, 0)
        assert line.startswith(ANSI_RED + "0x")
        assert line.endswith(ANSI_RESET)
        assert line.count(ANSI_RESET) == 1

    def test_omitted_leading_directive(self):
        """First and last columns differ: column 0 inherits the address color."""
        line = render_diff(b"AbcD", b"xbcx", 0, 0)
        assert f"0x0000000000  {ANSI_RED}41" not in line
        assert "0x0000000000  41" in line
        assert f"{ANSI_GREEN}62" in line

    def test_kept_leading_directive(self):
        line = render_diff(b"Abcd", b"xbcd", 0, 0)
        assert f"0x0000000000  {ANSI_RED}41" in line

    def test_offsets_per_side(self, abc_pair):
        line = strip_ansi(render_diff(*abc_pair, 0x100, 0x208))
        assert line.startswith("0x0000000100  ")
        assert "    0x0000000208  " in line

    def test_dense_diff(self, abc_pair):
        line = strip_ansi(render_diff(*abc_pair, 0, 0, dense=True))
        assert "4142434445464748 ABCDEFGH" in line

    def test_nonprintable_does_not_change_hex(self):
        line = strip_ansi(render_diff(b"\x00\x7f", b"\x00\x80", 0, 0))
        assert "00 7f .." in line
        assert "00 80 .." in line


def test_ellipsis():
    assert render_ellipsis() == "..."


class TestRenderHeader:
    """Tests for render_header()."""

    def test_dense_eight_columns(self):
        header = strip_ansi(render_header(8, dense=True))
        side = "   offset      0 1 2 3 4 5 6 7 01234567"
        assert header == side + "    " + side

    def test_aligned_with_lines(self):
        header = strip_ansi(render_header(16))
        line = strip_ansi(render_same(bytes(range(16)), bytes(range(16)), 0, 0))
        assert len(header) == len(line)
        assert header.index(" 0  1") == line.index("00 01")

    def test_column_labels_wrap_after_sixteen(self):
        header = strip_ansi(render_header(20))
        assert "0123456789abcdef0123" in header
