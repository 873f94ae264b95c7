"""Error classes for bigdec.

Parse and encoding errors subclass ValueError so that callers treating
malformed input generically keep working. Division by zero is not wrapped:
it surfaces as the built-in ZeroDivisionError.
"""


class DecError(Exception):
    """Base error for bigdec operations."""

    pass


# =============================================================================
# Textual codec
# =============================================================================


class ParseError(DecError, ValueError):
    """Decimal text could not be parsed."""

    pass


class NoDigitsError(ParseError):
    """No digits read."""

    def __init__(self, message: str = "no digits read") -> None:
        super().__init__(message)


class InvalidSyntaxError(ParseError):
    """The scanned characters do not form a valid decimal."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"invalid decimal syntax: {text!r}")


class TrailingCharactersError(ParseError):
    """Characters remain after a complete value."""

    def __init__(self, rest: str = "") -> None:
        super().__init__(f"trailing characters after value: {rest!r}")


# =============================================================================
# Binary codec
# =============================================================================


class EncodingError(DecError, ValueError):
    """Binary buffer could not be encoded or decoded."""

    pass


class EmptyBufferError(EncodingError):
    """Decoding was given no data."""

    def __init__(self, message: str = "empty buffer") -> None:
        super().__init__(message)


class UnsupportedVersionError(EncodingError):
    """Version byte does not match a supported encoding."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"unsupported encoding version {version}")


class TruncatedBufferError(EncodingError):
    """Buffer is shorter than the fixed trailer."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"truncated buffer: {length} bytes")


class ScaleOverflowError(EncodingError):
    """Scale does not fit in the 32-bit scale field."""

    def __init__(self, scale: int) -> None:
        self.scale = scale
        super().__init__(f"scale {scale} outside int32 range")
