"""Integer primitives used by the decimal core.

This package wraps Python's arbitrary-precision int with the operations the
decimal type needs:
- truncating (toward zero) quotient and remainder
- cached powers of ten
- factor counting for the exact-scale policy
- digit-string conversion without the int/str length limit
"""

from bigdec.math.integers import (
    exp10,
    factor,
    factor2,
    int_from_digits,
    int_to_digits,
    quo_rem_trunc,
    quo_trunc,
)

__all__ = [
    "exp10",
    "factor",
    "factor2",
    "int_from_digits",
    "int_to_digits",
    "quo_rem_trunc",
    "quo_trunc",
]
