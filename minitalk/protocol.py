"""Signal-level framing shared by the message client and server.

A message travels as one SIGUSR1 per byte of its length and a SIGUSR2 that
ends the length. Each byte then follows as eight signals, least significant
bit first: SIGUSR1 for a one bit and SIGUSR2 for a zero bit. A zero byte
closes the message. The receiver acknowledges each signal with SIGUSR2. It
reports a complete message with SIGUSR1 when the first signal after the
last byte arrives.
"""

from __future__ import annotations

import enum
import signal
from typing import List, Optional, Tuple, Union

ONE_BIT = signal.SIGUSR1
ZERO_BIT = signal.SIGUSR2
LENGTH_UNIT = signal.SIGUSR1
LENGTH_END = signal.SIGUSR2

Message = Union[str, bytes, bytearray]


class Reply(enum.Enum):
    """What the receiver answers; the value is the signal to send back."""

    ACK = signal.SIGUSR2
    DONE = signal.SIGUSR1


def encode_char(byte: int) -> List[signal.Signals]:
    """The eight signals carrying ``byte``, least significant bit first."""
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an int, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return [ONE_BIT if (byte >> bit) & 1 else ZERO_BIT for bit in range(8)]


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError(f"expected str or bytes, got {type(message).__name__}")


def frame_message(message: Message) -> List[signal.Signals]:
    """Every signal a client sends for ``message``, terminating zero byte included.

    A ``str`` is sent as its UTF-8 encoding.
    """
    data = _as_bytes(message)
    frame = [LENGTH_UNIT] * len(data) + [LENGTH_END]
    for byte in data + b"\0":
        frame.extend(encode_char(byte))
    return frame


class Receiver:
    """Rebuilds messages from incoming signals and says how to answer each one."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop any partly received message."""
        self._length = 0
        self._buffer: Optional[bytearray] = None
        self._bit_index = 0
        self._current = 0

    def _insert_bit(self, signum: int) -> None:
        if signum == ONE_BIT:
            self._current |= 1 << self._bit_index
        self._bit_index += 1
        if self._bit_index == 8:
            assert self._buffer is not None
            self._buffer.append(self._current)
            self._bit_index = 0
            self._current = 0

    def handle(self, signum: int) -> Tuple[List[Reply], Optional[bytes]]:
        """Take one signal; return the replies to send and a finished message or None."""
        if signum not in (signal.SIGUSR1, signal.SIGUSR2):
            raise ValueError(f"unexpected signal: {signum}")
        if self._buffer is None:
            if signum == LENGTH_UNIT:
                self._length += 1
                return [Reply.ACK], None
            self._buffer = bytearray()
            replies = [Reply.ACK]
        elif len(self._buffer) < self._length:
            self._insert_bit(signum)
            return [Reply.ACK], None
        else:
            replies = []
        if len(self._buffer) < self._length:
            return replies, None
        message = bytes(self._buffer)
        self.reset()
        replies.append(Reply.DONE)
        return replies, message