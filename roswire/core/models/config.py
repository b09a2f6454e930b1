from dataclasses import dataclass
from enum import Enum


class TrailingPolicy(str, Enum):
    """
    What to do when a frame payload is longer than the structure read
    from it.
    """
    REJECT = "reject"
    """
    Fail the decode with TrailingGarbage.
    """

    WARN = "warn"
    """
    Log a warning, ignore the unread bytes and return the decoded value.
    """


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """
    Limits and policies applied by a single encode/decode call.

    The codec itself keeps no state between calls; every entry point takes
    an optional CodecConfig and falls back to DEFAULT_CONFIG.
    """
    max_sequence_length: int = 16 * 1024 * 1024
    """
    Maximum element count accepted from a variable-length sequence prefix.
    Protects against corrupted or hostile count fields triggering
    unbounded allocation.
    """

    max_message_size: int = 256 * 1024 * 1024  # 256MB
    """
    Maximum byte length accepted from a message frame prefix.
    """

    trailing: TrailingPolicy = TrailingPolicy.REJECT
    """
    Policy for payload bytes left unread after decoding a frame.
    """


DEFAULT_CONFIG = CodecConfig()
