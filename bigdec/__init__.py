"""Arbitrary-precision decimals with explicit scale.

A Dec is an unscaled integer and a scale; its value is
unscaled * 10**(-scale). Addition, subtraction and multiplication are
exact. Division takes a Scaler (which scale the result has) and a Rounder
(how the truncated quotient is rounded):

    >>> from bigdec import Dec, ROUND_DOWN, quo
    >>> str(quo(Dec.from_int(10), Dec.from_int(3), 2, ROUND_DOWN))
    '3.33'
    >>> Dec.from_int(1).quo_exact(Dec.from_int(3)) is None
    True
"""

from bigdec.dec import Dec, upscale
from bigdec.division import quo, quo_exact, quo_rem
from bigdec.errors import (
    DecError,
    EmptyBufferError,
    EncodingError,
    InvalidSyntaxError,
    NoDigitsError,
    ParseError,
    ScaleOverflowError,
    TrailingCharactersError,
    TruncatedBufferError,
    UnsupportedVersionError,
)
from bigdec.rounder import (
    ROUND_CEIL,
    ROUND_DOWN,
    ROUND_EXACT,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    FuncRounder,
    Rounder,
    RoundingMode,
    get_rounder,
)
from bigdec.scaler import SCALE_FIXED_0, SCALE_FIXED_2, Scaler, scale_fixed, scale_quo_exact

__version__ = "0.1.0"


def parse(text: str) -> Dec:
    """Parse decimal text into a Dec; see Dec.parse."""
    return Dec.parse(text)


def try_parse(text: str) -> Dec | None:
    """Parse decimal text, returning None on failure."""
    return Dec.try_parse(text)


def encode(value: Dec) -> bytes:
    """Encode a Dec to bytes; see Dec.to_bytes."""
    return value.to_bytes()


def decode(buf: bytes) -> Dec:
    """Decode bytes written by encode; see Dec.from_bytes."""
    return Dec.from_bytes(buf)


__all__ = [
    # Value type
    "Dec",
    "upscale",
    # Division
    "quo",
    "quo_exact",
    "quo_rem",
    # Scalers
    "Scaler",
    "scale_fixed",
    "scale_quo_exact",
    "SCALE_FIXED_0",
    "SCALE_FIXED_2",
    # Rounders
    "Rounder",
    "FuncRounder",
    "RoundingMode",
    "get_rounder",
    "ROUND_EXACT",
    "ROUND_DOWN",
    "ROUND_UP",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_UP",
    "ROUND_HALF_EVEN",
    "ROUND_FLOOR",
    "ROUND_CEIL",
    # Codecs
    "parse",
    "try_parse",
    "encode",
    "decode",
    # Errors
    "DecError",
    "ParseError",
    "NoDigitsError",
    "InvalidSyntaxError",
    "TrailingCharactersError",
    "EncodingError",
    "EmptyBufferError",
    "UnsupportedVersionError",
    "TruncatedBufferError",
    "ScaleOverflowError",
]
