"""Binary encoding of decimals.

Layout, most significant first:

    [integer encoding of unscaled][scale: 4 bytes, big-endian, signed][version]

The integer encoding is a header byte ``(INT_GOB_VERSION << 1) | sign``
followed by the big-endian magnitude with no leading zero bytes; zero has
an empty magnitude. The layout is fixed: existing encoded data must keep
decoding bit-for-bit.
"""

from __future__ import annotations

from bigdec.constants import DEC_GOB_VERSION, INT_GOB_VERSION, SCALE_MAX, SCALE_MIN, SCALE_SIZE
from bigdec.errors import (
    EmptyBufferError,
    ScaleOverflowError,
    TruncatedBufferError,
    UnsupportedVersionError,
)

__all__ = ["decode_dec", "decode_int", "encode_dec", "encode_int"]


def encode_int(n: int) -> bytes:
    """Encode an integer as header byte plus big-endian magnitude."""
    header = INT_GOB_VERSION << 1
    if n < 0:
        header |= 1
    magnitude = abs(n)
    return bytes([header]) + magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")


def decode_int(buf: bytes) -> int:
    """Decode an integer written by encode_int. An empty buffer decodes to 0.

    Raises:
        UnsupportedVersionError: If the header carries an unknown version
    """
    if len(buf) == 0:
        return 0
    header = buf[0]
    if header >> 1 != INT_GOB_VERSION:
        raise UnsupportedVersionError(header >> 1)
    magnitude = int.from_bytes(buf[1:], "big")
    return -magnitude if header & 1 else magnitude


def encode_dec(unscaled: int, scale: int) -> bytes:
    """Encode an (unscaled, scale) pair.

    Raises:
        ScaleOverflowError: If scale does not fit in a signed 32-bit field
    """
    if not SCALE_MIN <= scale <= SCALE_MAX:
        raise ScaleOverflowError(scale)
    return encode_int(unscaled) + scale.to_bytes(SCALE_SIZE, "big", signed=True) + bytes([DEC_GOB_VERSION])


def decode_dec(buf: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Decode a buffer written by encode_dec into (unscaled, scale).

    Raises:
        EmptyBufferError: If buf is empty
        UnsupportedVersionError: If either version byte is unsupported
        TruncatedBufferError: If buf is too short to hold the scale and version
    """
    data = bytes(buf)
    if len(data) == 0:
        raise EmptyBufferError()
    version = data[-1]
    if version != DEC_GOB_VERSION:
        raise UnsupportedVersionError(version)
    if len(data) < SCALE_SIZE + 1:
        raise TruncatedBufferError(len(data))
    split = len(data) - SCALE_SIZE - 1
    unscaled = decode_int(data[:split])
    scale = int.from_bytes(data[split : split + SCALE_SIZE], "big", signed=True)
    return unscaled, scale
