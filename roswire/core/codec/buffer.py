import struct

from roswire.core.errors import TruncatedInput


class ReadCursor:
    """
    A read position over an immutable byte region.

    The cursor never copies the underlying data except when a caller takes
    a slice out of it. `end` bounds the readable region so that a frame
    payload can be read without slicing the input first.
    """
    __slots__ = ("_view", "_pos", "_end")

    def __init__(self, data: bytes | bytearray | memoryview, start: int = 0, end: int | None = None) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = start
        self._end = len(self._view) if end is None else end

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def require(self, size: int, what: str = "value") -> None:
        if size > self._end - self._pos:
            raise TruncatedInput(size, self._end - self._pos, what)

    def take(self, size: int, what: str = "value") -> bytes:
        self.require(size, what)
        start = self._pos
        self._pos += size
        return bytes(self._view[start:self._pos])

    def unpack(self, codec: struct.Struct, what: str = "value") -> tuple:
        self.require(codec.size, what)
        values = codec.unpack_from(self._view, self._pos)
        self._pos += codec.size
        return values
