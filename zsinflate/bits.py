"""Least-significant-bit-first reader over incrementally supplied input."""

from __future__ import annotations


class BitReader:
    """Bit accumulator fed with input bytes as they become available.

    Bits are taken from each byte starting at the least significant bit,
    as the deflate format requires.  ``hold`` holds the accumulated bits
    and ``bits`` their number; ``consumed`` counts input bytes taken.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._buf = bytearray(data)
        self._pos = 0
        self.hold = 0
        self.bits = 0
        self.consumed = 0

    @property
    def available(self) -> int:
        """Number of input bytes not yet taken."""
        return len(self._buf) - self._pos

    def feed(self, data: bytes) -> None:
        """Append more input."""
        if self._pos:
            del self._buf[: self._pos]
            self._pos = 0
        self._buf.extend(data)

    def pull_byte(self) -> bool:
        """Move one input byte into the accumulator; False if there is none."""
        if self._pos >= len(self._buf):
            return False
        self.hold |= self._buf[self._pos] << self.bits
        self.bits += 8
        self._pos += 1
        self.consumed += 1
        return True

    def need(self, n: int) -> bool:
        """Ensure at least ``n`` bits are held; False if input ran out first."""
        while self.bits < n:
            if not self.pull_byte():
                return False
        return True

    def peek(self, n: int) -> int:
        """Return the low ``n`` bits of the accumulator without removing them."""
        return self.hold & ((1 << n) - 1)

    def drop(self, n: int) -> None:
        """Remove ``n`` bits from the accumulator."""
        if n < 0 or n > self.bits:
            raise ValueError(f"cannot drop {n} bits with {self.bits} held")
        self.hold >>= n
        self.bits -= n

    def align(self) -> None:
        """Discard bits up to the next byte boundary."""
        self.drop(self.bits & 7)

    def clear(self) -> None:
        """Empty the accumulator."""
        self.hold = 0
        self.bits = 0

    def take_bytes(self, n: int) -> bytes:
        """Take up to ``n`` raw input bytes, bypassing the accumulator."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        chunk = bytes(self._buf[self._pos : self._pos + n])
        self._pos += len(chunk)
        self.consumed += len(chunk)
        return chunk