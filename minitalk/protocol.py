"""Bit-level encoding of messages: eight bits per byte, least significant first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the bits of *value*, least significant bit first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE))


def encode_message(data: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of *data* followed by those of a terminating NUL byte.

    Text is encoded as UTF-8.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    for byte in payload + bytes([TERMINATOR]):
        yield from encode_byte(byte)


@dataclass
class BitDecoder:
    """Collects bits, least significant first, into bytes."""

    value: int = 0
    count: int = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte after the eighth bit, else None."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        self.value |= bit << self.count
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        finished = self.value
        self.reset()
        return finished

    def reset(self) -> None:
        """Drop any partly received byte."""
        self.value = 0
        self.count = 0