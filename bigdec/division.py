"""Division of decimals.

Division is not exact in general, so it is always parameterized: a Scaler
picks the scale of the result and a Rounder decides how to round the
truncated quotient. quo_exact combines scale_quo_exact with ROUND_EXACT
and returns None when x/y is not a finite decimal.
"""

from __future__ import annotations

from bigdec.dec import Dec
from bigdec.math.integers import exp10, quo_rem_trunc, quo_trunc
from bigdec.rounder import ROUND_EXACT, Rounder
from bigdec.scaler import ScalerLike, resolve_scaler, scale_quo_exact

__all__ = ["quo", "quo_exact", "quo_rem"]


def quo_rem(x: Dec, y: Dec, scale: int, want_remainder: bool = True) -> tuple[Dec, int | None, int | None]:
    """Compute x/y truncated toward zero at the given scale.

    The results satisfy:

        x / y = q + (rem_num / rem_den) * 10**(-scale)

    with -|rem_den| < rem_num < |rem_den|, rem_den carrying the sign of y
    and rem_num zero or carrying the sign of x.

    Args:
        x: Dividend
        y: Divisor
        scale: Scale of the quotient
        want_remainder: If False, skip the remainder and return None for it

    Returns:
        Tuple of (q, rem_num, rem_den)

    Raises:
        ZeroDivisionError: If y is zero
    """
    # Adjustment relative to the natural quotient scale x.scale - y.scale
    shift = scale - (x.scale - y.scale)
    dividend, divisor = x.unscaled, y.unscaled
    if shift > 0:
        dividend *= exp10(shift)
    elif shift < 0:
        divisor *= exp10(-shift)

    if not want_remainder:
        return Dec(quo_trunc(dividend, divisor), scale), None, None
    q, r = quo_rem_trunc(dividend, divisor)
    return Dec(q, scale), r, divisor


def quo(x: Dec, y: Dec, scaler: ScalerLike, rounder: Rounder) -> Dec | None:
    """Return x/y at the scale from scaler, rounded by rounder.

    scaler may be a plain int, used as a fixed scale.

    Returns:
        The rounded quotient, or None if rounder reports that it cannot be
        represented

    Raises:
        ZeroDivisionError: If y is zero
    """
    scale = resolve_scaler(scaler)(x, y)
    q, rem_num, rem_den = quo_rem(x, y, scale, rounder.use_remainder)
    return rounder.round(q, rem_num, rem_den)


def quo_exact(x: Dec, y: Dec) -> Dec | None:
    """Return x/y if it is a finite decimal, or None otherwise.

    Shorthand for quo(x, y, scale_quo_exact, ROUND_EXACT).
    """
    return quo(x, y, scale_quo_exact, ROUND_EXACT)
