"""Formatted output with the conversions ``%c %s %p %d %i %u %x %X %%``.

Integer conversions behave like C ``int`` and ``unsigned int``. The
arguments are reduced to 32 bits first. A ``None`` string prints as
``(null)``. A null pointer prints as ``(nil)``.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def _as_int(spec: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _unsigned(value: int) -> int:
    return value & _INT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int("c", value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        raise ValueError(f"unknown conversion %{spec}")
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec in "di":
        return str(_signed(_as_int(spec, value)))
    if spec == "u":
        return str(_unsigned(_as_int(spec, value)))
    if spec == "x":
        return f"{_unsigned(_as_int(spec, value)):x}"
    if spec == "X":
        return f"{_unsigned(_as_int(spec, value)):X}"
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    return _pointer(value)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Arguments left over are ignored. Missing arguments raise
    ``TypeError``. An unknown conversion or a lone ``%`` at the end
    raises ``ValueError``.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered ``fmt`` to ``stream`` (stdout by default) and return its length."""
    text = render(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)