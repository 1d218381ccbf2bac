"""
Decimal helpers shared by the lexer, the AST and the unit algebra.

Author: xwest
"""

from decimal import Decimal
from typing import Union

from .config import get_config

NumberLike = Union[Decimal, int, str, float]

ZERO = Decimal(0)
ONE = Decimal(1)


def to_decimal(value: NumberLike) -> Decimal:
    """
    Convert a number into a Decimal.

    Floats go through their shortest repr so that ``0.1`` becomes
    ``Decimal('0.1')`` rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers here")
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, (int, str)):
        return Decimal(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Decimal")


def normalize_zero(value: Decimal) -> Decimal:
    """Drop the sign of a zero, so that 0 * -2 is 0 rather than -0."""
    return value.copy_abs() if value.is_zero() else value


def format_decimal(value: Decimal) -> str:
    """Render a Decimal positionally, never in exponent notation."""
    return format(value, "f")


def context():
    """Decimal context for the current numeric configuration."""
    return get_config().context()
