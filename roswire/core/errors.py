class CodecError(ValueError):
    """
    Base class for every failure raised by the ROSMSG codec.

    `recoverable` tells a transport loop whether the failure can be cured
    by waiting for more bytes (True) or whether the stream is corrupt and
    the connection should be dropped (False).
    """
    recoverable: bool = False


class TruncatedInput(CodecError):
    """
    Fewer bytes are available than a length field or a fixed-width read
    demands. The input may simply be incomplete.
    """
    recoverable = True

    def __init__(self, needed: int, available: int, what: str = "value") -> None:
        super().__init__(
            f"Truncated input while reading {what}: "
            f"need {needed} bytes, {available} available"
        )
        self.needed = needed
        self.available = available
        self.what = what


class LengthOverflow(CodecError):
    """A byte length does not fit in the 32-bit length field."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Length {length} does not fit in a 32-bit length prefix")
        self.length = length


class CountOverflow(CodecError):
    """A decoded count or frame length exceeds the configured ceiling."""

    def __init__(self, count: int, limit: int, what: str = "sequence") -> None:
        super().__init__(f"Declared {what} size {count} exceeds the limit of {limit}")
        self.count = count
        self.limit = limit
        self.what = what


class TrailingGarbage(CodecError):
    """The payload was not consumed exactly by the declared structure."""

    def __init__(self, declared: int, consumed: int) -> None:
        super().__init__(
            f"Frame declares {declared} bytes but only {consumed} were consumed"
        )
        self.declared = declared
        self.consumed = consumed


class InvalidValue(CodecError):
    """A value cannot be represented by the wire kind it is declared as."""


class MalformedHeader(CodecError):
    """A connection header entry is not a well-formed `key=value` string."""
