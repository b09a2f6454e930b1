"""
TCPROS connection header block.

The header exchanged when a connection is negotiated is a frame whose
payload is a run of length-prefixed `key=value` strings:

    u32_le total_len | (u32_le entry_len | key "=" value)*

Opening the connection and deciding what the fields mean is the
transport's business; this module only converts the block.
"""
from collections.abc import Mapping

from roswire.core.codec.buffer import ReadCursor
from roswire.core.codec.framing import HEADER_SIZE, read_frame_length
from roswire.core.codec.primitives import LENGTH, MAX_LENGTH, read_string, write_string
from roswire.core.errors import InvalidValue, LengthOverflow, MalformedHeader, TruncatedInput
from roswire.core.models.config import CodecConfig

SEPARATOR = "="


def encode_header(fields: Mapping[str, str]) -> bytes:
    buffer = bytearray(HEADER_SIZE)
    for key, value in fields.items():
        if not key or SEPARATOR in key:
            raise InvalidValue(f"Invalid connection header key: {key!r}")
        write_string(buffer, f"{key}{SEPARATOR}{value}")

    length = len(buffer) - HEADER_SIZE
    if length > MAX_LENGTH:
        raise LengthOverflow(length)
    LENGTH.pack_into(buffer, 0, length)

    return bytes(buffer)


def decode_header(data: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> tuple[dict[str, str], int]:
    """
    Decode the header block at the start of `data`.

    Returns the fields and the number of bytes consumed. Values keep any
    further `=` characters; a repeated key keeps its last value.
    """
    length = read_frame_length(data, config)
    if length is None:
        raise TruncatedInput(HEADER_SIZE, len(data), "header length")

    available = len(data) - HEADER_SIZE
    if length > available:
        raise TruncatedInput(length, available, "header block")

    block = ReadCursor(data, HEADER_SIZE, HEADER_SIZE + length)
    fields: dict[str, str] = {}

    while block.remaining:
        try:
            entry = read_string(block)
        except TruncatedInput as ex:
            raise MalformedHeader(f"Header entry overruns the header block: {ex}") from ex

        key, sep, value = entry.partition(SEPARATOR)
        if not sep or not key:
            raise MalformedHeader(f"Header entry is not a key=value pair: {entry!r}")
        fields[key] = value

    return fields, HEADER_SIZE + length
