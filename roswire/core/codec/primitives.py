"""
Leaf-level ROSMSG encodings.

Every numeric value is fixed-width little-endian. Strings and byte buffers
are written as a uint32 byte length followed by the raw bytes, with no
terminator. Nothing here carries a type tag: the caller always says which
kind it expects.
"""
import struct
from typing import Any

from roswire.core.codec.buffer import ReadCursor
from roswire.core.errors import InvalidValue, LengthOverflow
from roswire.core.models.kinds import PrimitiveKind

LENGTH = struct.Struct("<I")
MAX_LENGTH = 0xFFFFFFFF

# Text passes through as opaque bytes: undecodable input survives a
# decode/encode cycle unchanged.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def write_length(buffer: bytearray, length: int) -> None:
    if length > MAX_LENGTH:
        raise LengthOverflow(length)
    buffer.extend(LENGTH.pack(length))


def read_length(cursor: ReadCursor, what: str = "length prefix") -> int:
    return cursor.unpack(LENGTH, what)[0]


def write_primitive(buffer: bytearray, value: Any, kind: PrimitiveKind) -> None:
    try:
        if kind.scalar:
            if value is None:
                raise TypeError("None is not a valid value")
            buffer.extend(kind.codec.pack(value))
        else:
            buffer.extend(kind.codec.pack(*value))
    except (struct.error, TypeError, OverflowError) as ex:
        raise InvalidValue(f"Cannot encode {value!r} as {kind.name}: {ex}") from ex


def read_primitive(cursor: ReadCursor, kind: PrimitiveKind) -> Any:
    values = cursor.unpack(kind.codec, kind.name)
    if kind.scalar:
        return values[0]
    return values


def write_bytes(buffer: bytearray, data: bytes | bytearray | memoryview) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidValue(f"Cannot encode {type(data).__name__} as bytes")
    write_length(buffer, len(data))
    buffer.extend(data)


def read_bytes(cursor: ReadCursor) -> bytes:
    length = read_length(cursor)
    return cursor.take(length, "byte buffer")


def write_string(buffer: bytearray, value: str) -> None:
    if not isinstance(value, str):
        raise InvalidValue(f"Cannot encode {type(value).__name__} as string")
    try:
        raw = value.encode(TEXT_ENCODING, TEXT_ERRORS)
    except UnicodeEncodeError as ex:
        raise InvalidValue(f"Cannot encode string: {ex}") from ex
    write_bytes(buffer, raw)


def read_string(cursor: ReadCursor) -> str:
    length = read_length(cursor)
    raw = cursor.take(length, "string")
    return raw.decode(TEXT_ENCODING, TEXT_ERRORS)
