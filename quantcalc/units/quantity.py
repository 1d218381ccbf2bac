"""
Quantities: decimal values carrying a Unit.

Arithmetic on quantities is partial. Adding metres to seconds or dividing
by zero is ordinary bad input, so those operations return None rather than
raising; ``apply_binary`` is there for callers that want a diagnostic
instead.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, DecimalException
from typing import Optional

from ..numeric import (
    NumberLike, ONE, ZERO, context, format_decimal, normalize_zero, to_decimal,
)
from .unit import Unit, UnitAtom
from .errors import (
    Location, UnitError, create_division_by_zero_error,
    create_incompatible_units_error, create_invalid_exponent_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quantity:
    """
    A measured value: a Decimal and the Unit it is expressed in.

    Zero is stored without a sign, whatever operation produced it.
    """
    value: Decimal
    unit: Unit = field(default_factory=Unit.none)

    def __post_init__(self):
        object.__setattr__(self, 'value', normalize_zero(to_decimal(self.value)))

    @classmethod
    def num(cls, value: NumberLike) -> 'Quantity':
        """A dimensionless quantity."""
        return cls(to_decimal(value), Unit.none())

    @classmethod
    def from_unit(cls, unit: Unit) -> 'Quantity':
        """One of ``unit``."""
        return cls(ONE, unit)

    @classmethod
    def from_atom(cls, atom: UnitAtom) -> 'Quantity':
        return cls(ONE, Unit.from_atom(atom))

    def is_dimensionless(self) -> bool:
        return self.unit.is_dimensionless()

    def negated(self) -> 'Quantity':
        return Quantity(self.value.copy_negate(), self.unit)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, rhs: 'Quantity') -> Optional['Quantity']:
        """Sum, or None when the units differ."""
        if self.unit != rhs.unit:
            logger.debug("rejected %s + %s: incompatible units", self, rhs)
            return None
        return Quantity(context().add(self.value, rhs.value), self.unit)

    def sub(self, rhs: 'Quantity') -> Optional['Quantity']:
        """Difference, or None when the units differ."""
        return self.add(rhs.negated())

    def mul(self, rhs: 'Quantity') -> Optional['Quantity']:
        """Product. Never None; typed Optional like its siblings."""
        return Quantity(context().multiply(self.value, rhs.value), self.unit * rhs.unit)

    def div(self, rhs: 'Quantity') -> Optional['Quantity']:
        """Quotient, or None when the divisor's value is zero."""
        if rhs.value == ZERO:
            logger.debug("rejected %s / %s: zero divisor", self, rhs)
            return None
        return Quantity(context().divide(self.value, rhs.value), self.unit / rhs.unit)

    def pow(self, exponent: 'Quantity') -> Optional['Quantity']:
        """
        Raise to a dimensionless power.

        Returns None when the exponent carries a unit or when the decimal
        power is undefined (``0 ^ -1``, ``(-8) ^ 0.5``, ``0 ^ 0``).
        """
        if not exponent.is_dimensionless():
            logger.debug("rejected %s ^ %s: exponent has a unit", self, exponent)
            return None
        try:
            value = context().power(self.value, exponent.value)
        except DecimalException:
            logger.debug("rejected %s ^ %s: undefined power", self, exponent)
            return None
        if not value.is_finite():
            # 0 ^ -n comes back as Infinity without a signal
            logger.debug("rejected %s ^ %s: undefined power", self, exponent)
            return None
        return Quantity(value, self.unit.pow(exponent.value))

    def __str__(self) -> str:
        return f"{format_decimal(self.value)} {self.unit}"


_OPERATIONS = {
    "+": Quantity.add,
    "-": Quantity.sub,
    "*": Quantity.mul,
    "/": Quantity.div,
    "^": Quantity.pow,
}


def apply_binary(operator: str, lhs: Quantity, rhs: Quantity,
                 location: Location = None) -> Quantity:
    """
    Combine two quantities, raising a UnitError when there is no result.

    Args:
        operator: one of ``+ - * / ^`` or a compound form such as ``+=``
        lhs: left operand
        rhs: right operand
        location: where to point the diagnostic

    Raises:
        UnitError: incompatible units, zero divisor or invalid power
        ValueError: unknown operator
    """
    symbol = operator[:-1] if len(operator) == 2 and operator.endswith('=') else operator
    operation = _OPERATIONS.get(symbol)
    if operation is None:
        raise ValueError(f"unknown operator {operator!r}")

    result = operation(lhs, rhs)
    if result is not None:
        return result

    if symbol in ('+', '-'):
        raise create_incompatible_units_error(symbol, lhs, rhs, location)
    if symbol == '/':
        raise create_division_by_zero_error(lhs, rhs, location)
    if symbol == '^':
        raise create_invalid_exponent_error(lhs, rhs, location)
    raise UnitError(f"{lhs} {symbol} {rhs} has no result", location)
