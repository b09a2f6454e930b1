"""
Top-level message encoding.

A ROSMSG frame is a uint32 little-endian byte length followed by that many
payload bytes. The payload is the flat encoding of the message's fields.

    frame = u32_le total_len | payload
"""
import logging
from dataclasses import dataclass
from typing import Any, BinaryIO

from roswire.core.codec.buffer import ReadCursor
from roswire.core.codec.primitives import LENGTH, MAX_LENGTH
from roswire.core.codec.visitor import Decoder, Encoder, Visitable
from roswire.core.errors import CodecError, CountOverflow, LengthOverflow, TrailingGarbage, TruncatedInput
from roswire.core.models.config import DEFAULT_CONFIG, CodecConfig, TrailingPolicy
from roswire.core.models.kinds import KIND_TYPES, Kind

logger = logging.getLogger("core.codec.framing")

HEADER_SIZE = LENGTH.size

DecodeTarget = Visitable | type | Kind
"""
What to decode into: a visitable instance (populated in place), a visitable
class (instantiated empty), or a wire kind for a plain value.
"""


def _encode(value: Any, kind: Kind | None, encoder: Encoder) -> None:
    if kind is None:
        encoder.visit(value)
    else:
        encoder.write(kind, value)


def _decode(into: DecodeTarget, decoder: Decoder) -> Any:
    if isinstance(into, KIND_TYPES):
        return decoder.read(into)
    if isinstance(into, type):
        into = into()
    return decoder.visit(into)


def _check_consumed(cursor: ReadCursor, declared: int, config: CodecConfig) -> None:
    leftover = cursor.remaining
    if leftover == 0:
        return

    if config.trailing is TrailingPolicy.WARN:
        logger.warning(f"Ignoring {leftover} trailing bytes in a {declared} bytes payload")
        return

    raise TrailingGarbage(declared, declared - leftover)


def _decode_body(cursor: ReadCursor, into: DecodeTarget, config: CodecConfig) -> Any:
    declared = cursor.remaining
    try:
        value = _decode(into, Decoder(cursor, config))
    except TruncatedInput as ex:
        # The region is complete: running out of it means it is corrupt,
        # not that more transport data is on its way.
        ex.recoverable = False
        raise

    _check_consumed(cursor, declared, config)
    return value


def encode_payload(value: Any, kind: Kind | None = None) -> bytes:
    """
    Encode `value` without the frame length, for transports that provide
    their own framing. With `kind=None` the value must be visitable.
    """
    encoder = Encoder()
    _encode(value, kind, encoder)
    return bytes(encoder.buffer)


def decode_payload(data: bytes | bytearray | memoryview, into: DecodeTarget, config: CodecConfig | None = None) -> Any:
    """
    Decode an unframed payload. The whole of `data` must be consumed,
    subject to the configured trailing policy.
    """
    config = config or DEFAULT_CONFIG
    return _decode_body(ReadCursor(data), into, config)


def encode_message(value: Any, kind: Kind | None = None) -> bytes:
    """Encode `value` and prepend its byte length."""
    encoder = Encoder(bytearray(HEADER_SIZE))
    _encode(value, kind, encoder)

    length = len(encoder.buffer) - HEADER_SIZE
    if length > MAX_LENGTH:
        raise LengthOverflow(length)
    LENGTH.pack_into(encoder.buffer, 0, length)

    return bytes(encoder.buffer)


def read_frame_length(data: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> int | None:
    """
    Return the payload length declared by the frame at the start of `data`,
    or None if fewer than four bytes are available yet.
    """
    config = config or DEFAULT_CONFIG
    if len(data) < HEADER_SIZE:
        return None

    length = LENGTH.unpack_from(data, 0)[0]
    if length > config.max_message_size:
        raise CountOverflow(length, config.max_message_size, "message")
    return length


def decode_message(
    data: bytes | bytearray | memoryview,
    into: DecodeTarget,
    config: CodecConfig | None = None,
) -> tuple[Any, int]:
    """
    Decode the frame at the start of `data`.

    Returns the decoded value and the number of bytes consumed (header plus
    payload); bytes after the frame are left for the caller.
    """
    config = config or DEFAULT_CONFIG

    length = read_frame_length(data, config)
    if length is None:
        raise TruncatedInput(HEADER_SIZE, len(data), "frame length")

    available = len(data) - HEADER_SIZE
    if length > available:
        raise TruncatedInput(length, available, "frame payload")

    cursor = ReadCursor(data, HEADER_SIZE, HEADER_SIZE + length)
    value = _decode_body(cursor, into, config)
    return value, HEADER_SIZE + length


@dataclass(slots=True)
class DecodeResult:
    """
    Outcome of try_decode_message.

    Exactly one of `value` and `error` is meaningful. `need_more` is True
    when the frame itself is incomplete and the caller should retry once
    more bytes have arrived; any other error means the input is corrupt.
    """
    value: Any = None
    consumed: int = 0
    error: CodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def need_more(self) -> bool:
        return self.error is not None and self.error.recoverable


def try_decode_message(
    data: bytes | bytearray | memoryview,
    into: DecodeTarget,
    config: CodecConfig | None = None,
) -> DecodeResult:
    """decode_message, with codec failures returned instead of raised."""
    try:
        value, consumed = decode_message(data, into, config)
    except CodecError as ex:
        return DecodeResult(error=ex)
    return DecodeResult(value=value, consumed=consumed)


def write_message(stream: BinaryIO, value: Any, kind: Kind | None = None) -> int:
    """Write one frame to a binary stream and return its size."""
    frame = encode_message(value, kind)
    stream.write(frame)
    return len(frame)


def _read_exactly(stream: BinaryIO, size: int, what: str) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            raise TruncatedInput(size, len(chunks), what)
        chunks.extend(chunk)
    return bytes(chunks)


def read_message(stream: BinaryIO, into: DecodeTarget, config: CodecConfig | None = None) -> Any:
    """
    Read one frame from a binary stream.

    Exactly the frame is consumed; the stream is left positioned on the
    next frame.
    """
    config = config or DEFAULT_CONFIG

    header = _read_exactly(stream, HEADER_SIZE, "frame length")
    length = read_frame_length(header, config)
    payload = _read_exactly(stream, length, "frame payload")

    return _decode_body(ReadCursor(payload), into, config)


class FrameDecoder:
    """
    Incremental frame reassembly for streaming transports.

    Bytes are fed in arbitrary chunks as they arrive. Every complete frame
    is decoded and returned; an incomplete frame stays buffered until the
    next call. A frame declaring more than `max_message_size` bytes, or a
    payload that does not match the declared structure, means the stream
    is corrupt and must be dropped: the error is raised, and raised again
    on every later call.

    Frames decoded from the same chunk before a corrupt one are still
    returned; the error is then raised by the next call to `feed`.
    """

    def __init__(self, into: type | Kind, config: CodecConfig | None = None) -> None:
        if not isinstance(into, (type, *KIND_TYPES)):
            raise TypeError("FrameDecoder needs a message class or a wire kind, not an instance")
        self._into = into
        self._config = config or DEFAULT_CONFIG
        self._buffer = bytearray()
        self._expected_length: int | None = None
        self._error: CodecError | None = None
        self._logger = logging.getLogger("core.codec.frame_decoder")

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet decoded."""
        return len(self._buffer)

    @property
    def failed(self) -> bool:
        return self._error is not None

    def feed(self, data: bytes) -> list[Any]:
        if self._error is not None:
            raise self._error

        self._buffer.extend(data)
        messages: list[Any] = []

        while True:
            try:
                complete, message = self._next_message()
            except CodecError as ex:
                self._error = ex
                if not messages:
                    raise
                self._logger.debug(f"Corrupt frame after {len(messages)} decoded frames, deferring error")
                return messages

            if not complete:
                return messages
            messages.append(message)

    def _next_message(self) -> tuple[bool, Any]:
        if self._expected_length is None:
            length = read_frame_length(self._buffer, self._config)
            if length is None:
                return False, None

            self._expected_length = length
            del self._buffer[:HEADER_SIZE]

        if len(self._buffer) < self._expected_length:
            return False, None

        payload = bytes(self._buffer[:self._expected_length])
        del self._buffer[:self._expected_length]
        self._expected_length = None

        self._logger.debug(f"Decoding frame of {len(payload)} bytes")
        return True, _decode_body(ReadCursor(payload), self._into, self._config)
