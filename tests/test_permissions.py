"""Tests for permission renderings."""

from __future__ import annotations

import stat

import pytest

from fileinfo.utils.permissions import (
    binary,
    octal,
    parse_binary,
    parse_octal,
    parse_symbolic,
    symbolic,
)


class TestRendering:
    """Test symbolic, binary and octal output."""

    def test_regular_file_0644(self) -> None:
        mode = stat.S_IFREG | 0o644

        assert symbolic(mode) == "-rw-r--r--"
        assert binary(mode) == "110100100"
        assert octal(mode) == "644"

    def test_directory_0755(self) -> None:
        mode = stat.S_IFDIR | 0o755

        assert symbolic(mode) == "drwxr-xr-x"
        assert binary(mode) == "111101101"
        assert octal(mode) == "755"

    def test_no_permissions_keeps_width(self) -> None:
        """Should pad to nine binary and three octal digits."""
        mode = stat.S_IFREG

        assert symbolic(mode) == "----------"
        assert binary(mode) == "000000000"
        assert octal(mode) == "000"

    def test_special_bits(self) -> None:
        """Should use four octal digits when setuid, setgid or sticky is set."""
        assert symbolic(stat.S_IFREG | 0o4755) == "-rwsr-xr-x"
        assert octal(0o4755) == "4755"
        assert binary(0o4755) == "100111101101"
        assert symbolic(stat.S_IFDIR | 0o1777) == "drwxrwxrwt"
        assert symbolic(stat.S_IFREG | 0o2644) == "-rw-r-Sr--"


class TestParsing:
    """Test decoding renderings back into bits."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-rw-r--r--", 0o644),
            ("rwxr-x---", 0o750),
            ("drwxrwxrwt", 0o1777),
            ("-rwSr--r--", 0o4644),
            ("-rwxr-sr-x", 0o2755),
        ],
    )
    def test_parse_symbolic(self, text: str, expected: int) -> None:
        assert parse_symbolic(text) == expected

    @pytest.mark.parametrize("text", ["", "rwx", "-rw-r--r--x", "-rq-r--r--", "-rw-r--r-z"])
    def test_parse_symbolic_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_symbolic(text)

    def test_parse_binary_and_octal(self) -> None:
        assert parse_binary("110100100") == 0o644
        assert parse_octal("4755") == 0o4755

    def test_renderings_agree_for_every_bit_pattern(self) -> None:
        """The three columns always describe the same bits."""
        for bits in range(0o7777 + 1):
            mode = stat.S_IFREG | bits
            assert parse_symbolic(symbolic(mode)) == bits
            assert parse_binary(binary(mode)) == bits
            assert parse_octal(octal(mode)) == bits
