"""Text and binary codecs for decimal values.

Codecs work on raw (unscaled, scale) pairs so that they can be used
without constructing Dec instances.
"""

from bigdec.codec.binary import decode_dec, decode_int, encode_dec, encode_int
from bigdec.codec.text import format_decimal, parse_decimal, scan_decimal

__all__ = [
    "decode_dec",
    "decode_int",
    "encode_dec",
    "encode_int",
    "format_decimal",
    "parse_decimal",
    "scan_decimal",
]
