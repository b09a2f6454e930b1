from typing import Any

from roswire.core.codec.framing import decode_message, encode_message
from roswire.core.models.config import CodecConfig
from roswire.core.ports.serializer import Serializer


class RosMsgSerializer(Serializer):
    """
    ROSMSG implementation of the Serializer interface, bound to one
    message type.

    - length-framed little-endian binary
    - no type tags: both ends must agree on `message_type`
    - every call decodes into a fresh instance
    """
    def __init__(self, message_type: type, config: CodecConfig | None = None) -> None:
        self.message_type = message_type
        self._config = config

    def serialize(self, message: Any) -> bytes:
        return encode_message(message)

    def deserialize(self, data: bytes) -> Any:
        value, _ = decode_message(data, self.message_type, self._config)
        return value
