"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional, Union

from .printf import printf
from .protocol import encode_byte, encode_message
from .strutil import atoi


class Client:
    """Sends bits to *pid* as SIGUSR1 (one) and SIGUSR2 (zero).

    After every bit the client waits for the server's acknowledgement.
    """

    def __init__(
        self,
        pid: int,
        *,
        kill: Callable[[int, int], None] = os.kill,
        wait_for_ack: Optional[Callable[[], object]] = None,
    ) -> None:
        if pid <= 0:
            raise ValueError(f"invalid server pid: {pid}")
        self.pid = pid
        self._kill = kill
        self._wait_for_ack = wait_for_ack

    @contextmanager
    def _acknowledgements(self) -> Iterator[Callable[[], object]]:
        if self._wait_for_ack is not None:
            yield self._wait_for_ack
            return
        # Blocking the signal keeps an early acknowledgement pending until waited for.
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
        try:
            yield lambda: signal.sigwait({signal.SIGUSR1})
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    def _send_bits(self, bits: Iterable[int]) -> None:
        with self._acknowledgements() as wait:
            for bit in bits:
                self._kill(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
                wait()

    def send_byte(self, value: int) -> None:
        """Send one byte, waiting for an acknowledgement after each bit."""
        self._send_bits(encode_byte(value))

    def send_message(self, message: Union[str, bytes]) -> None:
        """Send *message* followed by a terminating NUL byte."""
        self._send_bits(encode_message(message))


def main(argv: Optional[list[str]] = None) -> int:
    """Send the message in the second argument to the pid in the first."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        printf("Error: Wrong arguments\n")
        return 1
    pid = atoi(args[0])
    if pid <= 0:
        return 1
    Client(pid).send_message(os.fsencode(args[1]))
    return 0