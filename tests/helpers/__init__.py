"""Test helpers module for shared test utilities.

- constants: rounding tables shared by rounder and division tests
- factories: Dec construction shortcuts
"""

from tests.helpers.constants import (
    ROUNDER_INPUTS,
    ROUNDER_RESULTS,
    TENTHS_DIVIDENDS,
    TENTHS_RESULTS,
)
from tests.helpers.factories import make_dec, make_int
