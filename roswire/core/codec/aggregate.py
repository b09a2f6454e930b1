"""
Sequences and flat field-groups.

A variable sequence is a uint32 element count followed by the elements; a
fixed sequence is just the elements, its length being known from the
declared type. Field-groups are the concatenation of their fields with no
framing of their own.
"""
import struct
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from roswire.core.codec.buffer import ReadCursor
from roswire.core.codec.primitives import read_length, write_length
from roswire.core.errors import CountOverflow, InvalidValue
from roswire.core.models.config import DEFAULT_CONFIG
from roswire.core.models.kinds import Kind, PrimitiveKind

T = TypeVar("T")

ElementWriter = Callable[[bytearray, Any], None]
ElementReader = Callable[[ReadCursor], T]
ValueWriter = Callable[[bytearray, Kind, Any], None]
ValueReader = Callable[[ReadCursor, Kind], Any]


def _write_count(buffer: bytearray, count: int, length: int | None) -> None:
    if length is None:
        write_length(buffer, count)
    elif count != length:
        raise InvalidValue(f"Fixed sequence expects {length} elements, got {count}")


def _read_count(cursor: ReadCursor, length: int | None, max_length: int) -> int:
    if length is not None:
        return length

    count = read_length(cursor, "sequence count")
    if count > max_length:
        raise CountOverflow(count, max_length)
    return count


def write_sequence(
    buffer: bytearray,
    elements: Sequence[Any],
    write_element: ElementWriter,
    length: int | None = None,
) -> None:
    """
    Write `elements` with `write_element`.

    `length=None` selects the variable form (count prefix); any other value
    selects the fixed form and must match the number of elements.
    """
    _write_count(buffer, len(elements), length)
    for element in elements:
        write_element(buffer, element)


def read_sequence(
    cursor: ReadCursor,
    read_element: ElementReader[T],
    length: int | None = None,
    max_length: int = DEFAULT_CONFIG.max_sequence_length,
) -> list[T]:
    """
    Read a sequence element by element.

    For the variable form the count prefix is checked against `max_length`
    before anything is allocated. Elements are appended as they are read,
    so a lying count runs out of input instead of reserving memory.
    """
    count = _read_count(cursor, length, max_length)
    return [read_element(cursor) for _ in range(count)]


def write_primitive_sequence(
    buffer: bytearray,
    elements: Sequence[Any],
    kind: PrimitiveKind,
    length: int | None = None,
) -> None:
    """Bulk form of write_sequence for single-code primitive kinds."""
    count = len(elements)
    _write_count(buffer, count, length)
    try:
        buffer.extend(struct.pack(f"<{count}{kind.fmt}", *elements))
    except (struct.error, TypeError, OverflowError) as ex:
        raise InvalidValue(f"Cannot encode sequence of {kind.name}: {ex}") from ex


def read_primitive_sequence(
    cursor: ReadCursor,
    kind: PrimitiveKind,
    length: int | None = None,
    max_length: int = DEFAULT_CONFIG.max_sequence_length,
) -> list[Any]:
    """
    Bulk form of read_sequence for single-code primitive kinds.

    The whole region is bounds-checked up front, so truncation is reported
    before the result list is built.
    """
    count = _read_count(cursor, length, max_length)
    codec = struct.Struct(f"<{count}{kind.fmt}")
    return list(cursor.unpack(codec, f"{kind.name}[{count}]"))


def read_byte_sequence(
    cursor: ReadCursor,
    length: int | None = None,
    max_length: int = DEFAULT_CONFIG.max_sequence_length,
) -> bytes:
    """
    Read a uint8 sequence as `bytes`, the Python form of ROS1 `uint8[]`
    and `char[]` fields.
    """
    count = _read_count(cursor, length, max_length)
    return cursor.take(count, f"uint8[{count}]")


def write_field_group(
    buffer: bytearray,
    fields: Iterable[tuple[Kind, Any]],
    write_field: ValueWriter,
) -> None:
    """Write each (kind, value) pair in order, with no added framing."""
    for kind, value in fields:
        write_field(buffer, kind, value)


def read_field_group(
    cursor: ReadCursor,
    kinds: Iterable[Kind],
    read_field: ValueReader,
) -> list[Any]:
    """Read one value per kind, in order."""
    return [read_field(cursor, kind) for kind in kinds]
