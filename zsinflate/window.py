"""Circular history of recent output, used to resolve back-references."""

from __future__ import annotations


class SlidingWindow:
    """The last ``2 ** wbits`` bytes of decompressed output.

    The buffer is allocated on first use.  ``size`` is zero until the window
    is first updated, ``have`` is the number of valid bytes held and
    ``write`` is where the next byte goes.
    """

    def __init__(self, wbits: int = 15) -> None:
        if not 8 <= wbits <= 15:
            raise ValueError(f"window bits must be between 8 and 15, not {wbits}")
        self.wbits = wbits
        self._buf: bytearray | None = None
        self.size = 0
        self.have = 0
        self.write = 0

    @property
    def history(self) -> bytes:
        """The valid bytes held, oldest first."""
        if self._buf is None or self.have == 0:
            return b""
        start = (self.write - self.have) % self.size
        return self._read(start, self.have)

    def _read(self, start: int, count: int) -> bytes:
        assert self._buf is not None
        end = start + count
        if end <= self.size:
            return bytes(self._buf[start:end])
        return bytes(self._buf[start:]) + bytes(self._buf[: end - self.size])

    def _ensure(self) -> bytearray:
        if self._buf is None:
            self._buf = bytearray(1 << self.wbits)
        if self.size == 0:
            self.size = 1 << self.wbits
            self.write = 0
            self.have = 0
        return self._buf

    def update(self, data: bytes) -> None:
        """Record newly written output, keeping at most ``size`` bytes."""
        buf = self._ensure()
        size = self.size
        n = len(data)
        if n >= size:
            buf[:] = data[n - size :]
            self.write = 0
            self.have = size
            return
        dist = min(size - self.write, n)
        buf[self.write : self.write + dist] = data[:dist]
        rest = n - dist
        if rest:
            buf[:rest] = data[dist:]
            self.write = rest
            self.have = size
        else:
            self.write += dist
            if self.write == size:
                self.write = 0
            if self.have < size:
                self.have = min(self.have + dist, size)

    def set_dictionary(self, dictionary: bytes) -> None:
        """Load a preset dictionary, keeping its tail if it is too long."""
        buf = self._ensure()
        size = self.size
        n = len(dictionary)
        if n > size:
            buf[:] = dictionary[n - size :]
            self.have = size
        else:
            buf[size - n :] = dictionary
            self.have = n

    def fetch(self, distance: int, length: int) -> bytes:
        """Return up to ``length`` bytes starting ``distance`` bytes back.

        At most ``distance`` bytes are returned, since the history ends
        where the current output begins.
        """
        if distance <= 0 or distance > self.have:
            raise ValueError(f"distance {distance} outside window of {self.have} bytes")
        if length < 0:
            raise ValueError("length must not be negative")
        count = min(length, distance)
        start = (self.write - distance) % self.size
        return self._read(start, count)