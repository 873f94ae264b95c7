"""Rounding policies for division.

A Rounder turns the truncated quotient of a division into the final
result. When ``use_remainder`` is true, ``round`` also receives the
remainder as a fraction rem_num / rem_den, normalized so that:

    -|rem_den| < rem_num < |rem_den|

rem_den has the sign of the divisor, and rem_num is zero or has the sign of
the dividend. When the remainder is not used, both are None.

Results of Quo(x, 10, scale 1, rounder) for x in -1.8 .. 1.8:

       x   Down    Up  HalfDown HalfUp HalfEven  Floor  Ceil
    ---------------------------------------------------------
    -1.8   -0.1  -0.2     -0.2   -0.2     -0.2   -0.2  -0.1
    -1.5   -0.1  -0.2     -0.1   -0.2     -0.2   -0.2  -0.1
    -1.2   -0.1  -0.2     -0.1   -0.1     -0.1   -0.2  -0.1
    -0.5    0.0  -0.1      0.0   -0.1      0.0   -0.1   0.0
     0.5    0.0   0.1      0.0    0.1      0.0    0.0   0.1
     1.2    0.1   0.2      0.1    0.1      0.1    0.1   0.2
     1.5    0.1   0.2      0.1    0.2      0.2    0.1   0.2
     1.8    0.1   0.2      0.2    0.2      0.2    0.1   0.2

Every adjustment moves the unscaled quotient by exactly one unit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import ClassVar

from bigdec.dec import Dec

__all__ = [
    # Classes
    "Rounder",
    "FuncRounder",
    "RoundingMode",
    # Built-in rounders
    "ROUND_EXACT",
    "ROUND_DOWN",
    "ROUND_UP",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_UP",
    "ROUND_HALF_EVEN",
    "ROUND_FLOOR",
    "ROUND_CEIL",
    # Functions
    "get_rounder",
]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _remainder_sign(rem_num: int, rem_den: int) -> int:
    """Direction from the truncated quotient toward the true quotient."""
    return _sign(rem_num) * _sign(rem_den)


def _cmp_half(rem_num: int, rem_den: int) -> int:
    """Compare |rem_num / rem_den| with 1/2; returns -1, 0 or +1."""
    twice = 2 * abs(rem_num)
    den = abs(rem_den)
    return (twice > den) - (twice < den)


def _adjust(quo: Dec, delta: int) -> Dec:
    """Move quo by delta units in the last place."""
    if delta == 0:
        return quo
    return Dec(quo.unscaled + delta, quo.scale)


class Rounder(ABC):
    """Rounding method for the result of a division.

    Subclasses set ``use_remainder`` and implement ``round``.
    """

    name: ClassVar[str] = ""
    use_remainder: ClassVar[bool] = True

    @abstractmethod
    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        """Round a truncated quotient.

        Args:
            quo: Quotient truncated toward zero at the target scale
            rem_num: Remainder numerator, or None if use_remainder is False
            rem_den: Remainder denominator, or None if use_remainder is False

        Returns:
            The rounded quotient, or None if it cannot be represented
        """
        ...

    def __repr__(self) -> str:
        return f"<Rounder {self.name}>"


class _RoundExact(Rounder):
    """Return quo if the remainder is zero, or None otherwise."""

    name = "exact"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        if rem_num:
            return None
        return quo


class _RoundDown(Rounder):
    """Round toward zero."""

    name = "down"
    use_remainder = False

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        return quo


class _RoundUp(Rounder):
    """Round away from zero."""

    name = "up"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        return _adjust(quo, _remainder_sign(rem_num, rem_den))


class _RoundHalfDown(Rounder):
    """Round to nearest; ties go toward zero."""

    name = "half-down"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        if _cmp_half(rem_num, rem_den) > 0:
            return _adjust(quo, _remainder_sign(rem_num, rem_den))
        return quo


class _RoundHalfUp(Rounder):
    """Round to nearest; ties go away from zero."""

    name = "half-up"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        if _cmp_half(rem_num, rem_den) >= 0:
            return _adjust(quo, _remainder_sign(rem_num, rem_den))
        return quo


class _RoundHalfEven(Rounder):
    """Round to nearest; ties go to the neighbor whose last digit is even."""

    name = "half-even"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        half = _cmp_half(rem_num, rem_den)
        if half > 0 or (half == 0 and quo.unscaled % 2 != 0):
            return _adjust(quo, _remainder_sign(rem_num, rem_den))
        return quo


class _RoundFloor(Rounder):
    """Round toward negative infinity."""

    name = "floor"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        if _remainder_sign(rem_num, rem_den) < 0:
            return _adjust(quo, -1)
        return quo


class _RoundCeil(Rounder):
    """Round toward positive infinity."""

    name = "ceil"

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        assert rem_num is not None and rem_den is not None
        if _remainder_sign(rem_num, rem_den) > 0:
            return _adjust(quo, 1)
        return quo


class FuncRounder(Rounder):
    """Rounder backed by a plain function, for custom rounding laws."""

    def __init__(
        self,
        func: Callable[[Dec, int | None, int | None], Dec | None],
        *,
        use_remainder: bool = True,
        name: str = "custom",
    ) -> None:
        self._func = func
        # Instance attributes shadow the class-level defaults
        self.use_remainder = use_remainder  # type: ignore[misc]
        self.name = name  # type: ignore[misc]

    def round(self, quo: Dec, rem_num: int | None, rem_den: int | None) -> Dec | None:
        return self._func(quo, rem_num, rem_den)


# =============================================================================
# Built-in rounders
# =============================================================================

ROUND_EXACT: Rounder = _RoundExact()
ROUND_DOWN: Rounder = _RoundDown()
ROUND_UP: Rounder = _RoundUp()
ROUND_HALF_DOWN: Rounder = _RoundHalfDown()
ROUND_HALF_UP: Rounder = _RoundHalfUp()
ROUND_HALF_EVEN: Rounder = _RoundHalfEven()
ROUND_FLOOR: Rounder = _RoundFloor()
ROUND_CEIL: Rounder = _RoundCeil()


class RoundingMode(str, Enum):
    """Names of the built-in rounders."""

    EXACT = "exact"
    DOWN = "down"
    UP = "up"
    HALF_DOWN = "half-down"
    HALF_UP = "half-up"
    HALF_EVEN = "half-even"
    FLOOR = "floor"
    CEIL = "ceil"

    @property
    def rounder(self) -> Rounder:
        """The built-in Rounder for this mode."""
        return _ROUNDERS[self]


_ROUNDERS: dict[RoundingMode, Rounder] = {
    RoundingMode.EXACT: ROUND_EXACT,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.UP: ROUND_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.CEIL: ROUND_CEIL,
}


def get_rounder(mode: RoundingMode | str) -> Rounder:
    """Look up a built-in Rounder by mode or name.

    Names are case-insensitive, and "_" may be used in place of "-"
    (e.g. "HALF_EVEN", "half-even").

    Raises:
        ValueError: If the name is not a known rounding mode
    """
    if isinstance(mode, RoundingMode):
        return mode.rounder
    key = mode.strip().lower().replace("_", "-")
    try:
        return RoundingMode(key).rounder
    except ValueError as err:
        valid = ", ".join(m.value for m in RoundingMode)
        raise ValueError(f"Unknown rounding mode {mode!r}; expected one of: {valid}") from err
