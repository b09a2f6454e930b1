from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding/decoding messages exchanged
    over a TCPROS connection.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input
    """

    def serialize(self, message: Any) -> bytes:
        """Encode a Python object into a frame suitable for network transport."""

    def deserialize(self, data: bytes) -> Any:
        """Decode a frame received from the network into a Python object."""
