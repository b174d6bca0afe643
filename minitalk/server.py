"""Server that rebuilds messages sent to it one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from .printf import render
from .protocol import TERMINATOR, BitDecoder


class Server:
    """Receives bits as SIGUSR1 (one) and SIGUSR2 (zero) and acknowledges each."""

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Callable[[int, int], None] = os.kill,
    ) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self._acknowledge = acknowledge
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: int) -> None:
        """Take one bit from *signum*, write any finished byte, and acknowledge."""
        bit = 1 if signum == signal.SIGUSR1 else 0
        byte = self._decoder.feed(bit)
        if byte is not None:
            self.output.write(bytes([byte]))
            if byte == TERMINATOR:
                self.output.write(b"\n")
            self.output.flush()
        self._acknowledge(sender_pid, signal.SIGUSR1)

    def _announce(self) -> None:
        line = render("Server PID: %d", os.getpid()) + "\n"
        self.output.write(line.encode("ascii"))
        self.output.flush()

    def serve_forever(self) -> None:
        """Print the process id, then handle incoming signals until interrupted."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        self._announce()
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the server until it is interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0