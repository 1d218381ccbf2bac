"""
Numeric configuration for quantcalc.

Every value and exponent is a ``decimal.Decimal``; this module decides the
precision and rounding used when they are combined. The default precision of
28 significant digits matches a 96-bit decimal mantissa.

Author: xwest
"""

import logging
from dataclasses import dataclass
from decimal import (
    Context, ROUND_05UP, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR,
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP,
)
from typing import Optional

logger = logging.getLogger(__name__)

# Every rounding mode the decimal module understands
ROUNDING_MODES = frozenset({
    ROUND_05UP, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR,
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP,
})


@dataclass(frozen=True)
class NumericConfig:
    """Configuration for decimal arithmetic"""
    precision: int = 28  # Significant digits kept by every operation
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self):
        if self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"unknown rounding mode {self.rounding!r}")

    def context(self) -> Context:
        """Build the decimal context used by unit and quantity operations."""
        return Context(prec=self.precision, rounding=self.rounding)


# Global numeric configuration
_global_config: Optional[NumericConfig] = None


def get_config() -> NumericConfig:
    """Get the global numeric configuration"""
    global _global_config
    if _global_config is None:
        _global_config = NumericConfig()
    return _global_config


def set_config(config: Optional[NumericConfig]) -> NumericConfig:
    """
    Replace the global numeric configuration.

    Passing None restores the defaults. Returns the configuration now in effect.
    """
    global _global_config
    _global_config = config if config is not None else NumericConfig()
    logger.info("numeric precision set to %d digits (%s)",
                _global_config.precision, _global_config.rounding)
    return _global_config
