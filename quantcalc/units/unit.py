"""
Unit algebra for quantcalc

A Unit is a product of named atoms raised to decimal exponents, e.g.
``kg m s^-2``. Units are kept in a canonical form so that structural
equality is dimensional equality:

- one atom per name, exponents of repeated names summed
- no atom with a zero exponent
- atoms with non-negative exponents first, negative ones last, each group
  in name order

Multiplication produces that form; division multiplies by the inverse, so
``a / b`` and ``a * b^-1`` are always identical.

Author: xwest
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional, Tuple

from ..numeric import NumberLike, ONE, ZERO, context, format_decimal, to_decimal

_by_name = attrgetter('name')

# One atom of the display form: name or name^exponent
_ATOM_PATTERN = re.compile(r'(?P<name>[^\s\^\[\]]+)(?:\^(?P<exp>[+-]?[0-9]+(?:\.[0-9]+)?))?')


@dataclass(frozen=True)
class UnitAtom:
    """
    A single named dimension raised to an exponent, e.g. ``m^2``.
    """
    name: str
    exp: Decimal = ONE

    def __post_init__(self):
        object.__setattr__(self, 'exp', to_decimal(self.exp))

    @classmethod
    def base(cls, name: str) -> 'UnitAtom':
        """The atom ``name^1``."""
        return cls(name, ONE)

    def negated(self) -> 'UnitAtom':
        return UnitAtom(self.name, self.exp.copy_negate())

    def __str__(self) -> str:
        if self.exp == ONE:
            return self.name
        return f"{self.name}^{format_decimal(self.exp)}"


def canonicalize(atoms: Iterable[UnitAtom]) -> Tuple[UnitAtom, ...]:
    """
    Reduce a sequence of atoms to canonical order.

    Sorts by name (stable), sums the exponents of equal names, drops
    zero exponents, then moves negative exponents behind the others
    without disturbing the name order inside either group.
    """
    ctx = context()
    merged: List[UnitAtom] = []

    for name, group in groupby(sorted(atoms, key=_by_name), key=_by_name):
        run = list(group)
        if len(run) == 1:
            merged.append(run[0])
        else:
            exp = reduce(ctx.add, (atom.exp for atom in run))
            merged.append(UnitAtom(name, exp))

    survivors = [atom for atom in merged if atom.exp != ZERO]
    numerator = [atom for atom in survivors if not atom.exp.is_signed()]
    denominator = [atom for atom in survivors if atom.exp.is_signed()]
    return tuple(numerator + denominator)


@dataclass(frozen=True)
class Unit:
    """
    A product of unit atoms.

    Equality compares the atom sequence as stored. Units built by the
    algebra below are canonical; a Unit constructed directly from atoms
    is taken as given until it goes through ``canonical()`` or any
    multiplication.
    """
    atoms: Tuple[UnitAtom, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'atoms', tuple(self.atoms))

    @classmethod
    def none(cls) -> 'Unit':
        """The dimensionless unit."""
        return cls(())

    @classmethod
    def from_atom(cls, atom: UnitAtom) -> 'Unit':
        return cls((atom,))

    @classmethod
    def base(cls, name: str) -> 'Unit':
        return cls.from_atom(UnitAtom.base(name))

    @classmethod
    def of(cls, *atoms: UnitAtom) -> 'Unit':
        """Canonical unit from any number of atoms."""
        return cls(canonicalize(atoms))

    def canonical(self) -> 'Unit':
        return Unit(canonicalize(self.atoms))

    def is_dimensionless(self) -> bool:
        return not self.atoms

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def multiply(self, other: 'Unit') -> 'Unit':
        """Product of two units, in canonical form."""
        return Unit(canonicalize(self.atoms + other.atoms))

    def divide(self, other: 'Unit') -> 'Unit':
        """Quotient of two units: multiply by ``other`` with exponents negated."""
        return self.multiply(other.inverse())

    def inverse(self) -> 'Unit':
        return Unit(tuple(atom.negated() for atom in self.atoms))

    def pow(self, exponent: NumberLike) -> 'Unit':
        """Raise every atom to ``exponent``; ``pow(0)`` is dimensionless."""
        ctx = context()
        factor = to_decimal(exponent)
        scaled = (UnitAtom(atom.name, ctx.multiply(atom.exp, factor)) for atom in self.atoms)
        return Unit(canonicalize(scaled))

    def __mul__(self, other: 'Unit') -> 'Unit':
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: 'Unit') -> 'Unit':
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __iter__(self) -> Iterator[UnitAtom]:
        return iter(self.atoms)

    def __str__(self) -> str:
        if not self.atoms:
            return ""
        return "[" + " ".join(str(atom) for atom in self.atoms) + "]"

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Optional['Unit']:
        """
        Parse the display form back into a canonical unit.

        Accepts ``[kg m s^-2]`` with or without the brackets; an empty
        string is the dimensionless unit. Returns None when the text is
        not a well formed product of atoms.
        """
        body = text.strip()
        if body.startswith('['):
            if not body.endswith(']'):
                return None
            body = body[1:-1].strip()
        elif body.endswith(']'):
            return None

        atoms = []
        for part in body.split():
            match = _ATOM_PATTERN.fullmatch(part)
            if match is None or not match.group('name').isidentifier():
                return None
            exp = match.group('exp')
            atoms.append(UnitAtom(match.group('name'), Decimal(exp) if exp else ONE))

        return cls.of(*atoms)
