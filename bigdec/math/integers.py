"""Arbitrary-precision integer helpers.

Python's int already is an unbounded integer; what it lacks for decimal
arithmetic is truncating division. ``//`` and ``%`` round toward negative
infinity, while the decimal core needs quotients truncated toward zero and
remainders carrying the sign of the dividend.
"""

from __future__ import annotations

from bigdec.constants import EXP10_CACHE_SIZE

__all__ = [
    "exp10",
    "factor",
    "factor2",
    "int_from_digits",
    "int_to_digits",
    "quo_rem_trunc",
    "quo_trunc",
]

# Write-once table of 10**0 .. 10**(EXP10_CACHE_SIZE - 1)
_EXP10_CACHE: tuple[int, ...] = tuple(10**i for i in range(EXP10_CACHE_SIZE))


def quo_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        quo_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise ZeroDivisionError("division by zero")

    # Same sign: result is non-negative, floor and truncation agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def quo_rem_trunc(a: int, b: int) -> tuple[int, int]:
    """Truncating quotient and remainder.

    The results satisfy ``a == q * b + r`` with ``|r| < |b|`` and r either
    zero or of the same sign as a.

    Raises:
        ZeroDivisionError: If b is zero
    """
    q = quo_trunc(a, b)
    return q, a - q * b


def exp10(n: int) -> int:
    """Return 10**n, served from the cache for small n."""
    if n < 0:
        raise ValueError(f"exp10 requires a non-negative exponent, got {n}")
    if n < EXP10_CACHE_SIZE:
        return _EXP10_CACHE[n]
    return 10**n


def factor2(n: int) -> int:
    """Count the factors of 2 in n (trailing zero bits)."""
    if n == 0:
        raise ValueError("factor2 of zero is undefined")
    return (n & -n).bit_length() - 1


def factor(n: int, p: int) -> int:
    """Count how many times p divides n.

    Naive repeated division; fine for the denominators seen in practice.
    """
    if n == 0:
        raise ValueError("factor of zero is undefined")
    if abs(p) < 2:
        raise ValueError(f"factor base must have magnitude >= 2, got {p}")
    f = 0
    while True:
        d, m = divmod(n, p)
        if m != 0:
            return f
        f += 1
        n = d


# Digit-string chunk size, kept well below the interpreter's int/str
# conversion limit
_DIGIT_CHUNK = 1000


def int_from_digits(digits: str) -> int:
    """Convert an optionally signed ASCII decimal digit string to int.

    Unlike int(), the conversion is not bounded by the interpreter's
    int/str digit limit.

    Raises:
        ValueError: If digits is not a valid decimal integer
    """
    sign = 1
    body = digits
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not body or not all("0" <= ch <= "9" for ch in body):
        raise ValueError(f"invalid decimal integer: {digits!r}")
    if len(body) <= _DIGIT_CHUNK:
        return sign * int(body)
    value = 0
    for i in range(0, len(body), _DIGIT_CHUNK):
        chunk = body[i : i + _DIGIT_CHUNK]
        value = value * exp10(len(chunk)) + int(chunk)
    return sign * value


def int_to_digits(n: int) -> str:
    """Convert an int to its decimal string, with a leading '-' if negative.

    Unlike str(), the conversion is not bounded by the interpreter's
    int/str digit limit.
    """
    magnitude = abs(n)
    chunk = exp10(_DIGIT_CHUNK)
    if magnitude < chunk:
        return str(n)
    parts: list[str] = []
    while magnitude >= chunk:
        magnitude, low = divmod(magnitude, chunk)
        parts.append(str(low).rjust(_DIGIT_CHUNK, "0"))
    parts.append(str(magnitude))
    text = "".join(reversed(parts))
    return "-" + text if n < 0 else text
