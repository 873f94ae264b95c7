"""Arbitrary-precision signed decimals.

A Dec is an unscaled arbitrary-precision integer paired with a scale. Its
mathematical value is:

    unscaled * 10**(-scale)

Different representations may have equal mathematical values:

    unscaled  scale  str()
    ----------------------
           0      0  "0"
           0      2  "0.00"
           0     -2  "0"
           1      0  "1"
         100      2  "1.00"
          10      0  "10"
           1     -1  "10"

Equality and ordering always compare mathematical values after aligning
scales. Dec values are immutable: every operation returns a new Dec.

Addition, subtraction and multiplication are exact. There is no ``/``
operator; division goes through Dec.quo with an explicit Scaler and
Rounder (see bigdec.division).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bigdec.codec.binary import decode_dec, encode_dec
from bigdec.codec.text import format_decimal, parse_decimal, scan_decimal
from bigdec.errors import ParseError
from bigdec.math.integers import exp10, quo_trunc

if TYPE_CHECKING:
    from bigdec.rounder import Rounder
    from bigdec.scaler import ScalerLike

__all__ = ["Dec", "upscale"]

# Format specs accepted by Dec.__format__; all render like str()
_FORMAT_VERBS = frozenset({"", "d", "f", "s", "v"})


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Dec {name} requires int, got {type(value).__name__}")
    return value


class Dec:
    """Signed decimal stored as (unscaled, scale).

    The default value is zero with scale 0.

    Attributes:
        unscaled: The unscaled integer value (read-only)
        scale: Digits after the decimal point; negative scales shift the
            point to the right (read-only)
    """

    __slots__ = ("_unscaled", "_scale")
    _unscaled: int
    _scale: int

    def __init__(self, unscaled: int = 0, scale: int = 0) -> None:
        """Create a Dec from an unscaled integer and a scale.

        Raises:
            TypeError: If unscaled or scale is not an int
        """
        self._unscaled = _check_int("unscaled", unscaled)
        self._scale = _check_int("scale", scale)

    # --- Construction ---

    @classmethod
    def from_int(cls, value: int) -> Dec:
        """Create a Dec with the given integer value and scale 0."""
        return cls(value, 0)

    @classmethod
    def parse(cls, text: str) -> Dec:
        """Parse decimal text; the whole string must be consumed.

        The scale is the number of digits after the decimal point, trailing
        zeros included, or 0 if there is no point.

        Raises:
            NoDigitsError: If no digit was read
            InvalidSyntaxError: If the text is not a valid decimal
            TrailingCharactersError: If characters remain after the value
        """
        unscaled, scale = parse_decimal(text)
        return cls(unscaled, scale)

    @classmethod
    def try_parse(cls, text: str) -> Dec | None:
        """Parse decimal text, returning None instead of raising."""
        try:
            return cls.parse(text)
        except ParseError:
            return None

    @classmethod
    def scan(cls, text: str, pos: int = 0) -> tuple[Dec, int]:
        """Scan one decimal from text at pos, skipping leading whitespace.

        Returns:
            Tuple of (value, end) where end indexes the first unconsumed
            character
        """
        unscaled, scale, end = scan_decimal(text, pos, skip_space=True)
        return cls(unscaled, scale), end

    @classmethod
    def from_bytes(cls, buf: bytes | bytearray | memoryview) -> Dec:
        """Decode a Dec written by to_bytes. Scale is preserved exactly."""
        unscaled, scale = decode_dec(buf)
        return cls(unscaled, scale)

    @classmethod
    def zero(cls) -> Dec:
        """Create a Dec with value 0 and scale 0."""
        return cls()

    # --- Accessors ---

    @property
    def unscaled(self) -> int:
        """The unscaled integer value."""
        return self._unscaled

    @property
    def scale(self) -> int:
        """The number of digits after the decimal point."""
        return self._scale

    def with_scale(self, scale: int) -> Dec:
        """Return a Dec with the same unscaled value and the given scale.

        The mathematical value changes as if multiplied by
        10**(old_scale - scale).
        """
        return Dec(self._unscaled, scale)

    def with_unscaled(self, unscaled: int) -> Dec:
        """Return a Dec with the given unscaled value and the same scale."""
        return Dec(unscaled, self._scale)

    # --- Scale alignment ---

    def rescale(self, scale: int) -> Dec:
        """Express the value at the given scale.

        Raising the scale is exact. Lowering it truncates toward zero and is
        lossy; only call it that way when the loss is intended.
        """
        shift = scale - self._scale
        if shift > 0:
            return Dec(self._unscaled * exp10(shift), scale)
        if shift < 0:
            return Dec(quo_trunc(self._unscaled, exp10(-shift)), scale)
        return self

    # --- Exact arithmetic ---

    def sign(self) -> int:
        """Return -1, 0 or +1 depending on the sign of the value."""
        return (self._unscaled > 0) - (self._unscaled < 0)

    def neg(self) -> Dec:
        """Return -self with the same scale."""
        return Dec(-self._unscaled, self._scale)

    def abs(self) -> Dec:
        """Return |self| with the same scale."""
        return Dec(abs(self._unscaled), self._scale)

    def cmp(self, other: Dec) -> int:
        """Compare mathematical values; returns -1, 0 or +1."""
        a, b = upscale(self, other)
        return (a._unscaled > b._unscaled) - (a._unscaled < b._unscaled)

    def add(self, other: Dec) -> Dec:
        """Return self + other at the greater of the two scales."""
        a, b = upscale(self, other)
        return Dec(a._unscaled + b._unscaled, a._scale)

    def sub(self, other: Dec) -> Dec:
        """Return self - other at the greater of the two scales."""
        a, b = upscale(self, other)
        return Dec(a._unscaled - b._unscaled, a._scale)

    def mul(self, other: Dec) -> Dec:
        """Return self * other; the scale is the sum of the scales."""
        return Dec(self._unscaled * other._unscaled, self._scale + other._scale)

    # --- Division ---

    def quo(self, other: Dec, scaler: ScalerLike, rounder: Rounder) -> Dec | None:
        """Return self / other at the scale chosen by scaler, rounded by rounder.

        Returns None when the rounder reports that the quotient cannot be
        represented (RoundExact with a non-zero remainder).

        Raises:
            ZeroDivisionError: If other is zero
        """
        from bigdec.division import quo

        return quo(self, other, scaler, rounder)

    def quo_exact(self, other: Dec) -> Dec | None:
        """Return self / other exactly, or None if it is not a finite decimal."""
        from bigdec.division import quo_exact

        return quo_exact(self, other)

    # --- Encoding ---

    def to_bytes(self) -> bytes:
        """Encode as bytes; see bigdec.codec.binary for the layout."""
        return encode_dec(self._unscaled, self._scale)

    def __str__(self) -> str:
        return format_decimal(self._unscaled, self._scale)

    def __repr__(self) -> str:
        return f"Dec('{self}')"

    def __format__(self, format_spec: str) -> str:
        if format_spec not in _FORMAT_VERBS:
            raise ValueError(f"Unsupported format spec for Dec: {format_spec!r}")
        return str(self)

    def __reduce__(self) -> tuple[type[Dec], tuple[int, int]]:
        return (Dec, (self._unscaled, self._scale))

    # --- Operators ---

    def __neg__(self) -> Dec:
        return self.neg()

    def __pos__(self) -> Dec:
        return self

    def __abs__(self) -> Dec:
        return self.abs()

    def __add__(self, other: Dec | int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.add(other_dec)

    def __radd__(self, other: int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return other_dec.add(self)

    def __sub__(self, other: Dec | int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.sub(other_dec)

    def __rsub__(self, other: int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return other_dec.sub(self)

    def __mul__(self, other: Dec | int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.mul(other_dec)

    def __rmul__(self, other: int) -> Dec:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return other_dec.mul(self)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.cmp(other_dec) == 0

    def __lt__(self, other: Dec | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.cmp(other_dec) < 0

    def __le__(self, other: Dec | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.cmp(other_dec) <= 0

    def __gt__(self, other: Dec | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.cmp(other_dec) > 0

    def __ge__(self, other: Dec | int) -> bool:
        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return self.cmp(other_dec) >= 0

    def __hash__(self) -> int:
        # Equal values must hash equal whatever their scale, and integral
        # values must hash like the equal int.
        unscaled, scale = self._unscaled, self._scale
        if unscaled == 0:
            return hash(0)
        while scale > 0 and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1
        if scale <= 0:
            return hash(unscaled * exp10(-scale))
        return hash((unscaled, scale))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._unscaled != 0


def _coerce(value: object) -> Dec | None:
    """Convert an operand to Dec; None if the type is not supported."""
    if isinstance(value, Dec):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Dec(value, 0)
    return None


def upscale(a: Dec, b: Dec) -> tuple[Dec, Dec]:
    """Bring a and b to a common scale by raising the lower one.

    Returns the pair unchanged if the scales are already equal. Never loses
    precision.
    """
    if a.scale == b.scale:
        return a, b
    if a.scale > b.scale:
        return a, b.rescale(a.scale)
    return a.rescale(b.scale), b
