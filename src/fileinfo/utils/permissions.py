"""Renderings of permission bits in text, binary and octal notation."""

from __future__ import annotations

import stat

SPECIAL_BITS = stat.S_ISUID | stat.S_ISGID | stat.S_ISVTX

# (read, write, execute, special, letter) for owner, group and other.
_TRIPLETS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s"),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s"),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t"),
)


def symbolic(mode: int) -> str:
    """Return the ``ls -l`` style notation, e.g. ``-rw-r--r--``."""
    return stat.filemode(mode)


def binary(mode: int) -> str:
    """Return the permission bits as binary digits, at least nine wide."""
    return format(stat.S_IMODE(mode), "09b")


def octal(mode: int) -> str:
    """Return the permission bits as three octal digits, four with special bits."""
    return format(stat.S_IMODE(mode), "03o")


def parse_symbolic(text: str) -> int:
    """Decode ``rwxr-xr-x`` (optionally prefixed by a file type) into bits."""
    if len(text) == 10:
        text = text[1:]
    if len(text) != 9:
        raise ValueError(f"Invalid symbolic permissions: {text!r}")

    bits = 0
    for index, (read, write, execute, special, letter) in enumerate(_TRIPLETS):
        r, w, x = text[index * 3 : index * 3 + 3]
        if r == "r":
            bits |= read
        elif r != "-":
            raise ValueError(f"Invalid read flag {r!r} in {text!r}")
        if w == "w":
            bits |= write
        elif w != "-":
            raise ValueError(f"Invalid write flag {w!r} in {text!r}")
        if x == "x":
            bits |= execute
        elif x == letter:
            bits |= execute | special
        elif x == letter.upper():
            bits |= special
        elif x != "-":
            raise ValueError(f"Invalid execute flag {x!r} in {text!r}")
    return bits


def parse_binary(text: str) -> int:
    return int(text, 2)


def parse_octal(text: str) -> int:
    return int(text, 8)
