import struct
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class PrimitiveKind:
    """
    A fixed-width value encoded little-endian.

    `fmt` is a struct format without byte-order prefix. Single-code formats
    decode to a scalar; multi-code formats (time, duration) decode to a
    tuple.
    """
    name: str
    fmt: str
    zero: Any
    codec: struct.Struct = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codec", struct.Struct("<" + self.fmt))

    @property
    def size(self) -> int:
        return self.codec.size

    @property
    def scalar(self) -> bool:
        return len(self.fmt) == 1


@dataclass(frozen=True, slots=True)
class StringKind:
    """Length-prefixed text, UTF-8 on the Python side."""
    name: str = "string"


@dataclass(frozen=True, slots=True)
class BytesKind:
    """Length-prefixed opaque binary."""
    name: str = "bytes"


@dataclass(frozen=True, slots=True)
class Array:
    """
    A homogeneous sequence.

    With `length=None` the sequence is variable and carries a 4-byte element
    count; otherwise it is fixed and carries no prefix at all.
    """
    element: "Kind"
    length: int | None = None

    def __post_init__(self) -> None:
        if self.length is not None and self.length < 0:
            raise ValueError("Fixed array length must be non-negative")

    @property
    def fixed(self) -> bool:
        return self.length is not None


@dataclass(frozen=True, slots=True)
class Nested:
    """
    An embedded field-group whose layout is declared by `message_type`
    through the visitor protocol.
    """
    message_type: type


@dataclass(frozen=True, slots=True)
class Group:
    """
    A positional field-group: a tuple whose items are encoded one after the
    other in the declared order, with no framing.
    """
    fields: tuple["Kind", ...]


Kind = Union[PrimitiveKind, StringKind, BytesKind, Array, Nested, Group]


BOOL = PrimitiveKind("bool", "?", False)
INT8 = PrimitiveKind("int8", "b", 0)
UINT8 = PrimitiveKind("uint8", "B", 0)
INT16 = PrimitiveKind("int16", "h", 0)
UINT16 = PrimitiveKind("uint16", "H", 0)
INT32 = PrimitiveKind("int32", "i", 0)
UINT32 = PrimitiveKind("uint32", "I", 0)
INT64 = PrimitiveKind("int64", "q", 0)
UINT64 = PrimitiveKind("uint64", "Q", 0)
FLOAT32 = PrimitiveKind("float32", "f", 0.0)
FLOAT64 = PrimitiveKind("float64", "d", 0.0)

# ROS1 time is (secs, nsecs) unsigned, duration is signed
TIME = PrimitiveKind("time", "II", (0, 0))
DURATION = PrimitiveKind("duration", "ii", (0, 0))

# Deprecated ROS1 aliases
BYTE = INT8
CHAR = UINT8

STRING = StringKind()
BYTES = BytesKind()

PRIMITIVES: dict[str, PrimitiveKind] = {
    kind.name: kind
    for kind in (
        BOOL, INT8, UINT8, INT16, UINT16, INT32, UINT32,
        INT64, UINT64, FLOAT32, FLOAT64, TIME, DURATION,
    )
}
PRIMITIVES["byte"] = BYTE
PRIMITIVES["char"] = CHAR


def zero_value(kind: Kind) -> Any:
    """
    Return a fresh zero value for `kind`: 0, False, "", b"", an empty list
    for variable arrays, a list of zero elements for fixed arrays, zeroed
    `bytes` for uint8 arrays, and an empty instance for nested messages.
    """
    if isinstance(kind, PrimitiveKind):
        return kind.zero
    if isinstance(kind, StringKind):
        return ""
    if isinstance(kind, BytesKind):
        return b""
    if isinstance(kind, Array):
        if kind.element is UINT8:
            return bytes(kind.length or 0)
        if kind.length is None:
            return []
        return [zero_value(kind.element) for _ in range(kind.length)]
    if isinstance(kind, Nested):
        return kind.message_type()
    if isinstance(kind, Group):
        return tuple(zero_value(item) for item in kind.fields)
    raise TypeError(f"Unknown wire kind: {kind!r}")


KIND_TYPES = (PrimitiveKind, StringKind, BytesKind, Array, Nested, Group)
