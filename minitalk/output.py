"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))