from __future__ import annotations


class BitUnderrun(ValueError):
    pass


class Bits:
    """
    Immutable view over a bit range of a byte buffer, read MSB-first.
    Reads return (value, remainder); the view itself never moves.
    """
    __slots__ = ("buf", "start", "end")

    def __init__(self, data: bytes | bytearray | memoryview, start: int = 0, end: int | None = None):
        self.buf = bytes(data)
        total = len(self.buf) * 8
        if end is None:
            end = total
        if not (0 <= start <= end <= total):
            raise ValueError(f"bit range {start}..{end} outside buffer of {total} bits")
        self.start = start
        self.end = end

    def __len__(self) -> int: return self.end - self.start
    def tell(self) -> int: return self.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bits):
            return NotImplemented
        return len(self) == len(other) and self._peek(len(self)) == other._peek(len(other))

    def __hash__(self) -> int: return hash((len(self), self._peek(len(self))))

    def __repr__(self) -> str:
        n = len(self)
        if n % 8 == 0:
            return f"Bits({self.tobytes()!r})"
        return f"Bits(0b{self._peek(n):0{n}b}, len={n})"

    def _peek(self, n: int) -> int:
        if n > len(self):
            raise BitUnderrun(f"underrun: need {n} bits at bit {self.start}, have {len(self)}")
        if n == 0:
            return 0
        first = self.start >> 3
        last = (self.start + n + 7) >> 3
        chunk = int.from_bytes(self.buf[first:last], "big")
        tail = last * 8 - (self.start + n)
        return (chunk >> tail) & ((1 << n) - 1)

    def _advance(self, n: int) -> Bits:
        return Bits._view(self.buf, self.start + n, self.end)

    @staticmethod
    def _view(buf: bytes, start: int, end: int) -> Bits:
        # shares buf without copying or re-validating
        out = Bits.__new__(Bits)
        out.buf, out.start, out.end = buf, start, end
        return out

    # unsigned big-endian reads
    def take(self, n: int) -> tuple[int, Bits]:
        return self._peek(n), self._advance(n)

    def take_bytes(self, n: int) -> tuple[bytes, Bits]:
        if self.start % 8 == 0:
            if n * 8 > len(self):
                raise BitUnderrun(f"underrun: need {n} bytes at bit {self.start}, have {len(self)} bits")
            lo = self.start >> 3
            return self.buf[lo:lo + n], self._advance(n * 8)
        return self._peek(n * 8).to_bytes(n, "big"), self._advance(n * 8)

    def tobytes(self) -> bytes:
        """Whole bytes of the view; a trailing partial byte is zero-padded on the right."""
        n = len(self)
        pad = -n % 8
        return (self._peek(n) << pad).to_bytes((n + pad) // 8, "big")
