"""String searching, copying and comparison on Python ``str`` values.

Positions are returned as indexes into the text. ``None`` stands for "not
found". The end of a string acts as the terminating character. Searching for
``"\\0"`` (or code 0) therefore finds ``len(text)``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """An equal copy of ``text``."""
    return "".join(text)


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a total capacity of ``size``.

    The capacity counts a terminator, so at most ``size - 1`` characters
    result. Returns the new string and the length the full result would have
    had. If ``size`` does not exceed ``len(dest)``, ``dest`` comes back
    unchanged with ``len(src) + size``.
    """
    _non_negative("size", size)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(src) + len(dest)


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied string and ``len(src)``. A ``size`` of zero leaves
    ``dest`` untouched.
    """
    _non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing pair, or 0. The end
    of a string compares as code 0.
    """
    _non_negative("n", n)
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]