"""The sending end: signals one message to a server, bit by bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Sequence

from minitalk.convert import atoi
from minitalk.printf import printf
from minitalk.protocol import Message, frame_message

_POLL_INTERVAL = 50e-6

Kill = Callable[[int, int], None]


def parse_pid(text: str) -> int:
    """The process id written at the start of ``text``; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError("Invalid PID.")
    return pid


class Client:
    """Sends messages to one server, waiting for an acknowledgement per signal."""

    def __init__(self, server_pid: int, kill: Optional[Kill] = None) -> None:
        self.server_pid = server_pid
        self._kill = kill if kill is not None else os.kill
        self._acked = True
        self.done = False

    def acknowledge(self, signum: int) -> None:
        """Record a reply from the server; anything but SIGUSR2 ends the exchange."""
        self._acked = True
        if signum != signal.SIGUSR2:
            self.done = True

    def _wait(self) -> None:
        while not self._acked:
            time.sleep(_POLL_INTERVAL)

    def send(self, message: Message) -> bool:
        """Signal ``message`` to the server.

        Returns True once the server confirms the whole message, False if
        every signal went out without that confirmation. An error from
        ``kill`` propagates.
        """
        self.done = False
        self._acked = True
        for signum in frame_message(message):
            self._wait()
            if self.done:
                return True
            self._acked = False
            self._kill(self.server_pid, signum)
        return self.done


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message in the arguments to the server whose pid is given."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "client"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Usage: %s <Server_PID> <Message>\n", prog)
        return 1
    try:
        server_pid = parse_pid(args[0])
    except ValueError:
        printf("Invalid PID.\n")
        return 1
    printf("Client PID: %d\n", os.getpid())
    sys.stdout.flush()
    client = Client(server_pid)

    def handler(signum: int, _frame: object) -> None:
        client.acknowledge(signum)

    try:
        signal.signal(signal.SIGUSR2, handler)
        signal.signal(signal.SIGUSR1, handler)
    except (OSError, ValueError):
        sys.stderr.write("CLIENT: Error setting up SIGUSR2")
        return 1
    try:
        confirmed = client.send(os.fsencode(args[1]))
    except OSError as exc:
        sys.stderr.write(f"CLIENT: {exc}\n")
        return 1
    if not confirmed:
        sys.stdout.write("Signal sent successfully.\n")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())