"""Line-by-line reading of map files made of the characters ``01CEP``.

Only text made of the map alphabet (``0``, ``1``, ``C``, ``E``, ``P`` and
newline) is kept. A chunk that holds any other character is dropped whole.
Text after a NUL character is ignored. The reader keeps a separate pending
buffer for each stream, so several streams can be read in turn.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional, Union

BUFFER_SIZE = 1921
FD_MAX = 1024
MAP_CHARS = frozenset("01CEP\n")

Source = Union[int, Any]


def map_length(text: Optional[str]) -> int:
    """Length of ``text`` up to its first NUL.

    The result is 0 when ``text`` is None or holds a character outside the
    map alphabet.
    """
    if not text:
        return 0
    body = text.split("\0", 1)[0]
    if all(ch in MAP_CHARS for ch in body):
        return len(body)
    return 0


def _keep(text: str) -> str:
    return text[: map_length(text)]


class LineReader:
    """Returns one line at a time from file descriptors or readable streams."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[Any, str] = {}

    def _read_chunk(self, stream: Source) -> str:
        if isinstance(stream, int):
            data = os.read(stream, self.buffer_size)
        else:
            data = stream.read(self.buffer_size)
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode("latin-1")
        return data or ""

    def _fill(self, stream: Source, buffer: Optional[str]) -> Optional[str]:
        while buffer is None or "\n" not in buffer:
            try:
                chunk = self._read_chunk(stream)
            except OSError:
                self._pending.pop(stream, None)
                raise
            if not chunk:
                break
            buffer = _keep(chunk) if buffer is None else _keep(buffer) + _keep(chunk)
        return buffer

    def next_line(self, stream: Source) -> Optional[str]:
        """The next line of ``stream`` with its newline, or None at the end.

        ``stream`` is a file descriptor number below ``FD_MAX`` or an object
        with a ``read(size)`` method returning ``str`` or ``bytes``.
        """
        if isinstance(stream, int) and not 0 <= stream < FD_MAX:
            raise ValueError(f"file descriptor out of range: {stream}")
        buffer = self._fill(stream, self._pending.pop(stream, None))
        if buffer is None or map_length(buffer) == 0:
            return None
        newline = buffer.find("\n")
        if newline < 0:
            return buffer
        line, rest = buffer[: newline + 1], buffer[newline + 1:]
        self._pending[stream] = _keep(rest)
        return line