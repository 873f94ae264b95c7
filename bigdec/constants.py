"""Constants shared across the bigdec package.

Scale bounds and version bytes must stay stable: encoded data written by
earlier releases depends on them.
"""

# =============================================================================
# Scale
# =============================================================================

# Bytes used by the scale field in the binary encoding
SCALE_SIZE = 4

# Scales are stored as signed 32-bit integers on the wire
SCALE_MIN = -(2**31)
SCALE_MAX = 2**31 - 1

# =============================================================================
# Binary encoding
# =============================================================================

# Trailing version byte of an encoded Dec
DEC_GOB_VERSION = 1

# Version stored in the high bits of the first byte of an encoded integer
INT_GOB_VERSION = 1

# =============================================================================
# Powers of ten
# =============================================================================

# Number of precomputed powers of ten (10^0 .. 10^63)
EXP10_CACHE_SIZE = 64
