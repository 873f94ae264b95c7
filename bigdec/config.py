"""Configuration for the bigdec command-line tool.

The library has no configuration of its own. The CLI reads its defaults
from environment variables:
- BIGDEC_ROUNDING: default rounding mode for quo (default: half-even)
- BIGDEC_SCALE: default quotient scale, an integer or "exact" (default: exact)
- BIGDEC_DEBUG: enable debug logging (default: false)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bigdec.rounder import RoundingMode, get_rounder

# Value of BIGDEC_SCALE / --scale selecting the exact-scale policy
EXACT_SCALE = "exact"


def parse_scale(value: str) -> int | None:
    """Parse a scale setting: an integer, or "exact" for None.

    Raises:
        ValueError: If value is neither an integer nor "exact"
    """
    text = value.strip().lower()
    if text == EXACT_SCALE:
        return None
    try:
        return int(text)
    except ValueError as err:
        raise ValueError(f"Scale must be an integer or '{EXACT_SCALE}', got '{value}'") from err


def parse_rounding(value: str) -> RoundingMode:
    """Parse a rounding mode name such as "half-even" or "HALF_EVEN".

    Raises:
        ValueError: If value is not a known rounding mode
    """
    rounder = get_rounder(value)
    return RoundingMode(rounder.name)


@dataclass(frozen=True)
class CliConfig:
    """Settings for the bigdec CLI.

    Attributes:
        default_rounding: Rounding mode for quo when --round is not given
        default_scale: Quotient scale when --scale is not given; None selects
            the exact-scale policy
        verbose: Enable debug logging
    """

    default_rounding: RoundingMode = RoundingMode.HALF_EVEN
    default_scale: int | None = None
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CliConfig:
        """Build a config from environment variables.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        rounding = env.get("BIGDEC_ROUNDING")
        scale = env.get("BIGDEC_SCALE")
        return cls(
            default_rounding=parse_rounding(rounding) if rounding else cls.default_rounding,
            default_scale=parse_scale(scale) if scale else None,
            verbose=env.get("BIGDEC_DEBUG", "false").lower() in ("true", "1", "yes"),
        )


# Default configuration instance
DEFAULT_CLI_CONFIG = CliConfig()
