"""
Public entry points of the ROSMSG codec.

    from roswire.core.facade import WireMessage, wire, UINT32, STRING, Array
    from roswire.core.facade import encode_message, decode_message

    @dataclass
    class Named(WireMessage):
        name: str = wire(STRING)
        ids: list[int] = wire(Array(UINT32))

    frame = encode_message(Named("abc", [1, 2, 3]))
    named, consumed = decode_message(frame, Named)
"""
from roswire.core.codec.buffer import ReadCursor
from roswire.core.codec.framing import (
    DecodeResult,
    FrameDecoder,
    decode_message,
    decode_payload,
    encode_message,
    encode_payload,
    read_message,
    try_decode_message,
    write_message,
)
from roswire.core.codec.header import decode_header, encode_header
from roswire.core.codec.visitor import Decoder, Encoder, ReadVisitor, Visitable, WireMessage, WriteVisitor, wire
from roswire.core.errors import (
    CodecError,
    CountOverflow,
    InvalidValue,
    LengthOverflow,
    MalformedHeader,
    TrailingGarbage,
    TruncatedInput,
)
from roswire.core.models.config import DEFAULT_CONFIG, CodecConfig, TrailingPolicy
from roswire.core.models.kinds import (
    BOOL,
    BYTE,
    BYTES,
    CHAR,
    DURATION,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    STRING,
    TIME,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Array,
    Group,
    Kind,
    Nested,
)

__all__ = [
    "ReadCursor",
    "DecodeResult",
    "FrameDecoder",
    "decode_message",
    "decode_payload",
    "encode_message",
    "encode_payload",
    "read_message",
    "try_decode_message",
    "write_message",
    "decode_header",
    "encode_header",
    "Decoder",
    "Encoder",
    "ReadVisitor",
    "Visitable",
    "WireMessage",
    "WriteVisitor",
    "wire",
    "CodecError",
    "CountOverflow",
    "InvalidValue",
    "LengthOverflow",
    "MalformedHeader",
    "TrailingGarbage",
    "TruncatedInput",
    "DEFAULT_CONFIG",
    "CodecConfig",
    "TrailingPolicy",
    "BOOL",
    "BYTE",
    "BYTES",
    "CHAR",
    "DURATION",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "STRING",
    "TIME",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "Array",
    "Group",
    "Kind",
    "Nested",
]
