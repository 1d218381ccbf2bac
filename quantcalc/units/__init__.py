"""
quantcalc Units Package

Dimensional analysis over products of named unit atoms.

Key Features:
- Canonical unit form: merged, zero-free, numerator atoms before denominator atoms
- Exact decimal exponents, so m^0.5 * m^0.5 is exactly m
- Quantity arithmetic that returns None on incompatible units or zero divisors
- Diagnostics for evaluators that want to report why

Author: xwest
"""

from .unit import Unit, UnitAtom, canonicalize
from .quantity import Quantity, apply_binary
from .errors import UnitError

__all__ = [
    "Unit",
    "UnitAtom",
    "canonicalize",
    "Quantity",
    "apply_binary",
    "UnitError",
]
