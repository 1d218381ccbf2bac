"""
Dimensional analysis error reporting for quantcalc.

Quantity arithmetic signals failure by returning None. When an evaluator
needs to tell the user why, these helpers turn the failed operation into
a UnitError with a diagnostic.

Author: xwest
"""

from typing import Optional, List, Union, TYPE_CHECKING

from ..lexer.tokens import SourceLocation, Span
from ..lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .quantity import Quantity

Location = Optional[Union[SourceLocation, Span]]


class UnitError(Exception):
    """
    A dimensional error found while combining quantities.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Location = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "U001": "Incompatible units",
    "U002": "Division by zero",
    "U003": "Exponent must be dimensionless",
    "U004": "Undefined power",
}


def _describe(quantity: 'Quantity') -> str:
    return str(quantity.unit) or "dimensionless"


def create_incompatible_units_error(operator: str, lhs: 'Quantity', rhs: 'Quantity',
                                    location: Location = None) -> UnitError:
    """Create an error for adding or subtracting different units."""
    return UnitError(
        message=f"Incompatible units: {lhs} {operator} {rhs}",
        location=location,
        code="U001",
        help_text=f"Both sides of '{operator}' must have the same unit, "
                  f"got {_describe(lhs)} and {_describe(rhs)}.",
    )


def create_division_by_zero_error(lhs: 'Quantity', rhs: 'Quantity',
                                  location: Location = None) -> UnitError:
    """Create an error for a zero divisor."""
    return UnitError(
        message=f"Division by zero: {lhs} / {rhs}",
        location=location,
        code="U002",
    )


def create_invalid_exponent_error(base: 'Quantity', exponent: 'Quantity',
                                  location: Location = None) -> UnitError:
    """Create an error for a power that cannot be taken."""
    if not exponent.is_dimensionless():
        return UnitError(
            message=f"Exponent must be dimensionless, got {_describe(exponent)}",
            location=location,
            code="U003",
        )
    return UnitError(
        message=f"Undefined power: {base} ^ {exponent}",
        location=location,
        code="U004",
        help_text="Zero cannot take a negative power and negative values cannot take fractional ones.",
    )
