"""Scale policies for division.

A Scaler picks the scale of a quotient from the two operands, before any
rounding happens. Fixed scalers ignore the operands; scale_quo_exact picks
the smallest scale at which the quotient is exact whenever it is a finite
decimal at all.
"""

from __future__ import annotations

from math import gcd
from typing import TYPE_CHECKING, Protocol

from bigdec.math.integers import factor, factor2

if TYPE_CHECKING:
    from bigdec.dec import Dec

__all__ = [
    "SCALE_FIXED_0",
    "SCALE_FIXED_2",
    "Scaler",
    "ScalerLike",
    "resolve_scaler",
    "scale_fixed",
    "scale_quo_exact",
]


class Scaler(Protocol):
    """Callable returning the scale for the result of an operation on x and y."""

    def __call__(self, x: Dec, y: Dec) -> int: ...


# Anything accepted where a Scaler is expected: a plain int is a fixed scale
ScalerLike = Scaler | int


def scale_fixed(scale: int) -> Scaler:
    """Return a Scaler that always returns scale."""

    def _fixed(x: Dec, y: Dec) -> int:
        return scale

    _fixed.__name__ = f"scale_fixed({scale})"
    return _fixed


# Round to an integer
SCALE_FIXED_0: Scaler = scale_fixed(0)

# Round to two digits after the point (cents)
SCALE_FIXED_2: Scaler = scale_fixed(2)


def scale_quo_exact(x: Dec, y: Dec) -> int:
    """Return the smallest scale >= x.scale - y.scale with an exact quotient.

    x/y is a finite decimal exactly when the reduced denominator of
    x.unscaled / y.unscaled has no prime factors other than 2 and 5. The
    extra digits needed are max(f2, f5), the counts of those factors. When
    other factors remain, the returned scale still only covers the 2s and
    5s, and the division leaves a non-zero remainder.

    Raises:
        ZeroDivisionError: If y is zero
    """
    if y.unscaled == 0:
        raise ZeroDivisionError("division by zero")
    denominator = abs(y.unscaled) // gcd(x.unscaled, y.unscaled)
    extra = max(factor2(denominator), factor(denominator, 5))
    return x.scale - y.scale + extra


def resolve_scaler(scaler: ScalerLike) -> Scaler:
    """Turn an int into a fixed Scaler; pass callables through unchanged.

    Raises:
        TypeError: If scaler is neither an int nor callable
    """
    if isinstance(scaler, bool):
        raise TypeError("Scaler must be an int or callable, got bool")
    if isinstance(scaler, int):
        return scale_fixed(scaler)
    if callable(scaler):
        return scaler
    raise TypeError(f"Scaler must be an int or callable, got {type(scaler).__name__}")
