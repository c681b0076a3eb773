from __future__ import annotations
import struct

from ..errors import Incomplete

# All multi-byte fields in an Xcursor file are little-endian.
_ORDER = "<"


class Cursor:
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data).toreadonly()
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def seek(self, pos: int) -> None:
        if pos < 0:
            raise ValueError(f"negative seek: {pos}")
        if pos > len(self.buf):
            raise Incomplete(needed=pos - len(self.buf), available=0, offset=pos)
        self.pos = pos

    def skip(self, n: int) -> None: self.seek(self.pos + n)

    def _span(self, n: int) -> int:
        if n < 0:
            raise ValueError(f"negative length: {n}")
        end = self.pos + n
        if end > len(self.buf):
            raise Incomplete(needed=n, available=self.remaining(), offset=self.pos)
        return end

    def take(self, n: int) -> bytes:
        end = self._span(n)
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    def peek(self, n: int) -> bytes:
        end = self._span(n)
        return self.buf[self.pos:end].tobytes()

    # fixed-width unsigned reads
    def _unpack(self, fmt: str, n: int):
        end = self._span(n)
        val = struct.unpack_from(_ORDER + fmt, self.buf, self.pos)[0]
        self.pos = end
        return val
    def u8(self) -> int:  return self._unpack("B", 1)
    def u32(self) -> int: return self._unpack("I", 4)

    def u32_array(self, count: int) -> list[int]:
        """Read `count` consecutive u32 words; fails before consuming anything if short."""
        end = self._span(4 * count)
        out = list(struct.unpack_from(f"{_ORDER}{count}I", self.buf, self.pos))
        self.pos = end
        return out
