import dataclasses
from collections.abc import Iterator, Sequence
from functools import partial
from typing import Any, Protocol, runtime_checkable

from roswire.core.codec.aggregate import (
    read_byte_sequence,
    read_field_group,
    read_primitive_sequence,
    read_sequence,
    write_field_group,
    write_primitive_sequence,
    write_sequence,
)
from roswire.core.codec.buffer import ReadCursor
from roswire.core.codec.primitives import (
    read_bytes,
    read_primitive,
    read_string,
    write_bytes,
    write_primitive,
    write_string,
)
from roswire.core.errors import InvalidValue
from roswire.core.models.config import DEFAULT_CONFIG, CodecConfig
from roswire.core.models.kinds import (
    Array,
    BytesKind,
    Group,
    Kind,
    Nested,
    PrimitiveKind,
    StringKind,
    UINT8,
    zero_value,
)

WIRE_KIND = "roswire.kind"


class WriteVisitor(Protocol):
    def field(self, name: str, kind: Kind, value: Any) -> None:
        """Receive the current value of the next field, in declared order."""


class ReadVisitor(Protocol):
    def field(self, name: str, kind: Kind) -> Any:
        """Return the decoded value of the next field, in declared order."""


@runtime_checkable
class Visitable(Protocol):
    """
    A composite type that knows the order of its own fields.

    Both methods must walk the same fields in the same order: the wire
    format has no tags, so the declaration order is the whole contract.
    """

    def for_each_field_to_write(self, visitor: WriteVisitor) -> None:
        """Call `visitor.field(name, kind, value)` once per field."""

    def for_each_field_to_read(self, visitor: ReadVisitor) -> None:
        """Call `visitor.field(name, kind)` once per field and store the result."""


class Encoder:
    """
    Write-direction visitor.

    Appends the encoding of every visited field to a growable buffer,
    dispatching on the declared kind and recursing into nested messages.
    """

    def __init__(self, buffer: bytearray | None = None) -> None:
        self.buffer = bytearray() if buffer is None else buffer

    def field(self, name: str, kind: Kind, value: Any) -> None:
        self.write(kind, value)

    def visit(self, message: Visitable) -> None:
        if isinstance(message, type) or not isinstance(message, Visitable):
            raise InvalidValue(f"{type(message).__name__} does not implement the visitor protocol")
        message.for_each_field_to_write(self)

    def write(self, kind: Kind, value: Any) -> None:
        if isinstance(kind, PrimitiveKind):
            write_primitive(self.buffer, value, kind)
        elif isinstance(kind, StringKind):
            write_string(self.buffer, value)
        elif isinstance(kind, BytesKind):
            write_bytes(self.buffer, value)
        elif isinstance(kind, Array):
            self._write_array(kind, value)
        elif isinstance(kind, Nested):
            self.visit(value)
        elif isinstance(kind, Group):
            self._write_group(kind, value)
        else:
            raise TypeError(f"Unknown wire kind: {kind!r}")

    def _write_array(self, kind: Array, value: Any) -> None:
        if not isinstance(value, (Sequence, memoryview)) or isinstance(value, str):
            raise InvalidValue(f"Cannot encode {type(value).__name__} as a sequence")

        element = kind.element
        if isinstance(element, PrimitiveKind) and element.scalar:
            write_primitive_sequence(self.buffer, value, element, kind.length)
        else:
            write_sequence(
                self.buffer,
                value,
                lambda _, item: self.write(element, item),
                kind.length,
            )

    def _write_group(self, kind: Group, value: Any) -> None:
        if not isinstance(value, Sequence) or len(value) != len(kind.fields):
            raise InvalidValue(f"Field-group expects {len(kind.fields)} items, got {value!r}")
        write_field_group(
            self.buffer,
            zip(kind.fields, value),
            lambda _, item_kind, item: self.write(item_kind, item),
        )


class Decoder:
    """
    Read-direction visitor.

    Supplies decoded values from a cursor as a visitable type asks for its
    fields. Nested messages are instantiated empty and populated in turn;
    uint8 and char arrays decode to `bytes`.
    """

    def __init__(self, cursor: ReadCursor, config: CodecConfig | None = None) -> None:
        self.cursor = cursor
        self.config = config or DEFAULT_CONFIG

    def field(self, name: str, kind: Kind) -> Any:
        return self.read(kind)

    def visit(self, target: Visitable) -> Visitable:
        if isinstance(target, type) or not isinstance(target, Visitable):
            raise InvalidValue(f"{type(target).__name__} does not implement the visitor protocol")
        target.for_each_field_to_read(self)
        return target

    def read(self, kind: Kind) -> Any:
        if isinstance(kind, PrimitiveKind):
            return read_primitive(self.cursor, kind)
        if isinstance(kind, StringKind):
            return read_string(self.cursor)
        if isinstance(kind, BytesKind):
            return read_bytes(self.cursor)
        if isinstance(kind, Array):
            return self._read_array(kind)
        if isinstance(kind, Nested):
            return self.visit(kind.message_type())
        if isinstance(kind, Group):
            values = read_field_group(self.cursor, kind.fields, lambda _, item_kind: self.read(item_kind))
            return tuple(values)
        raise TypeError(f"Unknown wire kind: {kind!r}")

    def _read_array(self, kind: Array) -> list[Any] | bytes:
        element = kind.element
        max_length = self.config.max_sequence_length
        if element is UINT8:
            return read_byte_sequence(self.cursor, kind.length, max_length)
        if isinstance(element, PrimitiveKind) and element.scalar:
            return read_primitive_sequence(self.cursor, element, kind.length, max_length)
        return read_sequence(self.cursor, lambda _: self.read(element), kind.length, max_length)


def wire(kind: Kind, *, default: Any = dataclasses.MISSING, **kwargs: Any) -> Any:
    """
    Declare a dataclass field carried on the wire as `kind`.

    Without an explicit default the field defaults to the zero value of its
    kind, so every WireMessage can be built empty.
    """
    metadata = {**kwargs.pop("metadata", {}), WIRE_KIND: kind}
    if default is dataclasses.MISSING and "default_factory" not in kwargs:
        kwargs["default_factory"] = partial(zero_value, kind)
    elif default is not dataclasses.MISSING:
        kwargs["default"] = default
    return dataclasses.field(metadata=metadata, **kwargs)


def wire_fields(message: Any) -> Iterator[tuple[str, Kind]]:
    """Yield (name, kind) for every `wire()` field of a dataclass, in order."""
    for item in dataclasses.fields(message):
        kind = item.metadata.get(WIRE_KIND)
        if kind is not None:
            yield item.name, kind


class WireMessage:
    """
    Visitor protocol implementation for dataclasses.

    Subclasses are plain (non-frozen) dataclasses whose wire fields are
    declared with `wire()`. Field declaration order is serialization order;
    fields declared with `dataclasses.field()` are local state and are never
    written or read.

        @dataclass
        class Point(WireMessage):
            x: float = wire(FLOAT64)
            y: float = wire(FLOAT64)
            z: float = wire(FLOAT64)
    """

    def for_each_field_to_write(self, visitor: WriteVisitor) -> None:
        for name, kind in wire_fields(self):
            visitor.field(name, kind, getattr(self, name))

    def for_each_field_to_read(self, visitor: ReadVisitor) -> None:
        for name, kind in wire_fields(self):
            setattr(self, name, visitor.field(name, kind))
