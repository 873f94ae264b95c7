"""Decimal text scanning and formatting.

Text form: an optional leading sign, then digits with at most one decimal
point. The scale is the number of digits after the point, trailing zeros
included, or 0 without a point:

    text            unscaled  scale
    -------------------------------
    "0"                    0      0
    "0.00"                 0      2
    "012345.67890" 1234567890      5
    "-.5"                 -5      1
"""

from __future__ import annotations

from bigdec.errors import InvalidSyntaxError, NoDigitsError, TrailingCharactersError
from bigdec.math.integers import int_from_digits, int_to_digits

__all__ = ["format_decimal", "parse_decimal", "scan_decimal"]


def scan_decimal(text: str, pos: int = 0, *, skip_space: bool = False) -> tuple[int, int, int]:
    """Scan one decimal from text starting at pos.

    Scanning stops, without consuming the character, at a sign that is not
    the first character, at a second decimal point, or at any character
    that is not a digit, sign or point.

    Args:
        text: Input text
        pos: Index to start scanning at
        skip_space: Skip leading whitespace before the value

    Returns:
        Tuple of (unscaled, scale, end) where end is the index of the first
        unconsumed character

    Raises:
        NoDigitsError: If no digit was read
        InvalidSyntaxError: If the scanned characters are not a valid number
    """
    i = pos
    n = len(text)
    if skip_space:
        while i < n and text[i].isspace():
            i += 1

    chars: list[str] = []
    point = -1  # index in chars where the decimal point was seen
    seen_digit = False
    while i < n:
        ch = text[i]
        if ch in "+-":
            if chars or point >= 0:
                break
        elif ch == ".":
            if point >= 0:
                break
            point = len(chars)
            i += 1
            continue
        elif "0" <= ch <= "9":
            seen_digit = True
        else:
            break
        chars.append(ch)
        i += 1

    if not seen_digit:
        raise NoDigitsError()

    scale = len(chars) - point if point >= 0 else 0
    digits = "".join(chars)
    try:
        unscaled = int_from_digits(digits)
    except ValueError as err:
        raise InvalidSyntaxError(digits) from err
    return unscaled, scale, i


def parse_decimal(text: str) -> tuple[int, int]:
    """Parse text that must consist of exactly one decimal.

    Raises:
        NoDigitsError: If no digit was read
        InvalidSyntaxError: If the characters are not a valid number
        TrailingCharactersError: If characters remain after the value
    """
    unscaled, scale, end = scan_decimal(text)
    if end != len(text):
        raise TrailingCharactersError(text[end:])
    return unscaled, scale


def format_decimal(unscaled: int, scale: int) -> str:
    """Format an (unscaled, scale) pair as canonical decimal text.

        unscaled  scale  text
        ----------------------
               0      0  "0"
               0      2  "0.00"
               0     -2  "0"
               1      0  "1"
             100      2  "1.00"
              10      0  "10"
               1     -1  "10"
    """
    s = int_to_digits(unscaled)
    if scale <= 0:
        if scale != 0 and unscaled != 0:
            s += "0" * -scale
        return s

    neg = 1 if unscaled < 0 else 0
    length = len(s)
    if length - neg <= scale:
        return ("-" if neg else "") + "0." + "0" * (scale - length + neg) + s[neg:]
    return s[: length - scale] + "." + s[length - scale :]
