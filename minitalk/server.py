"""The receiving end: prints each message that clients signal to it."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, List, Optional, Sequence

from minitalk.printf import printf
from minitalk.protocol import Receiver, Reply


class Server:
    """Turns signals from clients into messages written to ``output``."""

    SIGNALS = (signal.SIGUSR1, signal.SIGUSR2, signal.SIGINT)

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = output
        self.receiver = Receiver()

    def _write(self, message: bytes) -> None:
        try:
            if self.output is None:
                sys.stdout.flush()
                sys.stdout.buffer.write(message)
                sys.stdout.buffer.flush()
            else:
                self.output.write(message)
                flush = getattr(self.output, "flush", None)
                if flush is not None:
                    flush()
        except OSError:
            pass

    def on_signal(self, signum: int, sender_pid: int) -> List[Reply]:
        """Handle one signal from ``sender_pid``, answer it and return the replies.

        SIGINT stops the server with exit status 0.
        """
        if signum == signal.SIGINT:
            raise SystemExit(0)
        replies, message = self.receiver.handle(signum)
        for reply in replies:
            if reply is Reply.DONE and message is not None:
                self._write(message)
            try:
                os.kill(sender_pid, reply.value)
            except OSError:
                pass
        return replies

    def install(self) -> None:
        """Hold the server's signals for :meth:`serve_forever` to collect."""
        failed = False
        for signum in self.SIGNALS:
            try:
                signal.pthread_sigmask(signal.SIG_BLOCK, {signum})
            except (OSError, ValueError):
                sys.stderr.write(f"SERVER: {signal.Signals(signum).name}")
                failed = True
        if failed:
            raise SystemExit(1)
        printf("Server is ready and waiting for signals...\n")
        sys.stdout.flush()

    def serve_forever(self) -> None:
        """Wait for signals and handle them until SIGINT arrives."""
        while True:
            info = signal.sigwaitinfo(self.SIGNALS)
            self.on_signal(info.si_signo, info.si_pid)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the process id and serve until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server()
    try:
        server.install()
        server.serve_forever()
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())