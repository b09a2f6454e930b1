from dataclasses import dataclass, field
from typing import Any

from roswire.core.codec.visitor import ReadVisitor, WireMessage, WriteVisitor, wire
from roswire.core.models.kinds import (
    BOOL,
    BYTES,
    FLOAT64,
    INT16,
    STRING,
    TIME,
    UINT8,
    UINT32,
    Array,
    Nested,
)


@dataclass
class Named(WireMessage):
    name: str = wire(STRING)
    ids: list[int] = wire(Array(UINT32))


@dataclass
class StructOne(WireMessage):
    a: int = wire(INT16)
    b: bool = wire(BOOL)
    c: int = wire(UINT8)
    d: str = wire(STRING)
    e: list[bool] = wire(Array(BOOL))


@dataclass
class Part(WireMessage):
    a: str = wire(STRING)
    b: bool = wire(BOOL)


@dataclass
class Big(WireMessage):
    a: list[Part] = wire(Array(Nested(Part)))
    b: str = wire(STRING)


@dataclass
class Header(WireMessage):
    """std_msgs/Header"""
    seq: int = wire(UINT32)
    stamp: tuple[int, int] = wire(TIME)
    frame_id: str = wire(STRING)


@dataclass
class Point(WireMessage):
    x: float = wire(FLOAT64)
    y: float = wire(FLOAT64)
    z: float = wire(FLOAT64)


@dataclass
class Quaternion(WireMessage):
    x: float = wire(FLOAT64)
    y: float = wire(FLOAT64)
    z: float = wire(FLOAT64)
    w: float = wire(FLOAT64, default=1.0)


@dataclass
class Pose(WireMessage):
    position: Point = wire(Nested(Point))
    orientation: Quaternion = wire(Nested(Quaternion))


@dataclass
class PoseWithCovariance(WireMessage):
    pose: Pose = wire(Nested(Pose))
    covariance: list[float] = wire(Array(FLOAT64, 36))


@dataclass
class PoseArray(WireMessage):
    header: Header = wire(Nested(Header))
    poses: list[Pose] = wire(Array(Nested(Pose)))


@dataclass
class Blob(WireMessage):
    data: bytes = wire(BYTES)
    checksum: int = wire(UINT32)
    cache: dict[str, Any] = field(default_factory=dict)


class Pair:
    """A hand-written visitable type, without dataclasses."""

    def __init__(self, left: int = 0, right: str = "") -> None:
        self.left = left
        self.right = right

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pair) and (self.left, self.right) == (other.left, other.right)

    def for_each_field_to_write(self, visitor: WriteVisitor) -> None:
        visitor.field("left", INT16, self.left)
        visitor.field("right", STRING, self.right)

    def for_each_field_to_read(self, visitor: ReadVisitor) -> None:
        self.left = visitor.field("left", INT16)
        self.right = visitor.field("right", STRING)


# geometry_msgs/Pose from the captured TCPROS session, framed
POSE_FRAME = bytes([56, 0, 0, 0]) + b"".join(
    value.to_bytes(8, "little")
    for value in (
        0x3FF0000000000000,  # 1.0
        0x4000000000000000,  # 2.0
        0x4008000000000000,  # 3.0
        0x4010000000000000,  # 4.0
        0x4014000000000000,  # 5.0
        0x4018000000000000,  # 6.0
        0x401C000000000000,  # 7.0
    )
)

STRUCT_ONE_FRAME = bytes([
    22, 0, 0, 0, 2, 8, 1, 7, 6, 0, 0, 0, 65, 66, 67, 48, 49, 50, 4, 0, 0, 0,
    1, 0, 0, 1,
])

BIG_FRAME = bytes([
    38, 0, 0, 0, 3, 0, 0, 0, 3, 0, 0, 0, 65, 66, 67, 1, 5, 0, 0, 0, 49, 33,
    33, 33, 33, 1, 4, 0, 0, 0, 50, 51, 52, 98, 0, 3, 0, 0, 0, 69, 69, 101,
])

# Connection header sent by a std_msgs/String publisher
TYPICAL_HEADER = bytes([
    0xb0, 0x00, 0x00, 0x00, 0x20, 0x00, 0x00, 0x00, 0x6d, 0x65, 0x73, 0x73,
    0x61, 0x67, 0x65, 0x5f, 0x64, 0x65, 0x66, 0x69, 0x6e, 0x69, 0x74, 0x69,
    0x6f, 0x6e, 0x3d, 0x73, 0x74, 0x72, 0x69, 0x6e, 0x67, 0x20, 0x64, 0x61,
    0x74, 0x61, 0x0a, 0x0a, 0x25, 0x00, 0x00, 0x00, 0x63, 0x61, 0x6c, 0x6c,
    0x65, 0x72, 0x69, 0x64, 0x3d, 0x2f, 0x72, 0x6f, 0x73, 0x74, 0x6f, 0x70,
    0x69, 0x63, 0x5f, 0x34, 0x37, 0x36, 0x37, 0x5f, 0x31, 0x33, 0x31, 0x36,
    0x39, 0x31, 0x32, 0x37, 0x34, 0x31, 0x35, 0x35, 0x37, 0x0a, 0x00, 0x00,
    0x00, 0x6c, 0x61, 0x74, 0x63, 0x68, 0x69, 0x6e, 0x67, 0x3d, 0x31, 0x27,
    0x00, 0x00, 0x00, 0x6d, 0x64, 0x35, 0x73, 0x75, 0x6d, 0x3d, 0x39, 0x39,
    0x32, 0x63, 0x65, 0x38, 0x61, 0x31, 0x36, 0x38, 0x37, 0x63, 0x65, 0x63,
    0x38, 0x63, 0x38, 0x62, 0x64, 0x38, 0x38, 0x33, 0x65, 0x63, 0x37, 0x33,
    0x63, 0x61, 0x34, 0x31, 0x64, 0x31, 0x0e, 0x00, 0x00, 0x00, 0x74, 0x6f,
    0x70, 0x69, 0x63, 0x3d, 0x2f, 0x63, 0x68, 0x61, 0x74, 0x74, 0x65, 0x72,
    0x14, 0x00, 0x00, 0x00, 0x74, 0x79, 0x70, 0x65, 0x3d, 0x73, 0x74, 0x64,
    0x5f, 0x6d, 0x73, 0x67, 0x73, 0x2f, 0x53, 0x74, 0x72, 0x69, 0x6e, 0x67,
])
