"""
Test suite for the quantcalc unit algebra.

Tests cover:
- Canonical form (merging, cancellation, ordering)
- Multiplication, division and powers
- Display and parsing of units

Author: xwest
"""

import unittest
from decimal import Decimal
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from quantcalc.units.unit import Unit, UnitAtom, canonicalize


m = Unit.base("m")
s = Unit.base("s")
kg = Unit.base("kg")


class TestCanonicalForm(unittest.TestCase):
    """Test the canonical ordering and merging of atoms."""

    def test_multiplication_is_commutative(self):
        self.assertEqual(kg * m, m * kg)
        self.assertEqual((m * s) * kg, m * (s * kg))

    def test_repeated_atoms_merge(self):
        self.assertEqual(m * m, Unit.of(UnitAtom("m", 2)))
        self.assertEqual(str(m * m), "[m^2]")

    def test_cancellation_drops_atom(self):
        """Test an atom whose exponents sum to zero disappears."""
        self.assertEqual(m / m, Unit.none())
        self.assertTrue((m * s / m / s).is_dimensionless())
        self.assertEqual(str(m / m), "")

    def test_negative_exponents_sort_last(self):
        """Test numerator atoms come first, each group in name order."""
        unit = Unit.of(UnitAtom("m", -1), UnitAtom("s"), UnitAtom("kg"))

        self.assertEqual(str(unit), "[kg s m^-1]")
        self.assertEqual([atom.name for atom in unit], ["kg", "s", "m"])

    def test_denominator_keeps_name_order(self):
        unit = Unit.of(UnitAtom("s", -2), UnitAtom("kg"), UnitAtom("A", -1))
        self.assertEqual(str(unit), "[kg A^-1 s^-2]")

    def test_canonicalize_function(self):
        atoms = canonicalize([UnitAtom("s", -1), UnitAtom("m"), UnitAtom("s", 2)])
        self.assertEqual(atoms, (UnitAtom("m"), UnitAtom("s")))

    def test_direct_construction_is_taken_as_given(self):
        raw = Unit((UnitAtom("s"), UnitAtom("m")))

        self.assertNotEqual(raw, m * s)
        self.assertEqual(raw.canonical(), m * s)

    def test_fractional_exponents_combine_exactly(self):
        """Test square roots of metres multiply back to metres."""
        root = Unit.of(UnitAtom("m", Decimal("0.5")))

        self.assertEqual(str(root), "[m^0.5]")
        self.assertEqual(root * root, m)
        self.assertEqual(str(root * root), "[m]")


class TestAlgebra(unittest.TestCase):
    """Test unit operations."""

    def test_none_is_identity(self):
        self.assertEqual(Unit.none() * m, m)
        self.assertEqual(m * Unit.none(), m)
        self.assertEqual(m / Unit.none(), m)

    def test_division_is_multiplication_by_inverse(self):
        velocity = m / s

        self.assertEqual(velocity, m * s.inverse())
        self.assertEqual(velocity, m.multiply(Unit.of(UnitAtom("s", -1))))
        self.assertEqual(str(velocity), "[m s^-1]")

    def test_inverse_of_none(self):
        self.assertEqual(Unit.none() / s, Unit.of(UnitAtom("s", -1)))
        self.assertEqual(Unit.none().inverse(), Unit.none())

    def test_compound_unit(self):
        newton = kg * m / (s * s)
        self.assertEqual(str(newton), "[kg m s^-2]")
        self.assertEqual(str(newton / kg), "[m s^-2]")

    def test_pow(self):
        velocity = m / s

        self.assertEqual(str(velocity.pow(2)), "[m^2 s^-2]")
        self.assertEqual(m.pow(-1), m.inverse())
        self.assertEqual(m.pow(Decimal("0.5")), Unit.of(UnitAtom("m", Decimal("0.5"))))

    def test_pow_zero_is_dimensionless(self):
        self.assertEqual((kg * m / s).pow(0), Unit.none())

    def test_operators_reject_other_types(self):
        with self.assertRaises(TypeError):
            Unit.none() * 3
        with self.assertRaises(TypeError):
            m / "s"


class TestDisplay(unittest.TestCase):
    """Test unit and atom formatting."""

    def test_atom_display(self):
        self.assertEqual(str(UnitAtom("m")), "m")
        self.assertEqual(str(UnitAtom("m", 2)), "m^2")
        self.assertEqual(str(UnitAtom("s", -1)), "s^-1")
        self.assertEqual(str(UnitAtom("m", Decimal("1.0"))), "m")
        self.assertEqual(str(UnitAtom("m", Decimal("0.5"))), "m^0.5")

    def test_unit_display(self):
        self.assertEqual(str(Unit.none()), "")
        self.assertEqual(str(m), "[m]")

    def test_atom_exponent_conversion(self):
        self.assertIsInstance(UnitAtom("m", 2).exp, Decimal)
        self.assertEqual(UnitAtom("m", 0.25).exp, Decimal("0.25"))
        self.assertEqual(UnitAtom.base("m"), UnitAtom("m", 1))
        self.assertEqual(UnitAtom("m", 2).negated(), UnitAtom("m", -2))


class TestParsing(unittest.TestCase):
    """Test reading units back from their display form."""

    def test_round_trip(self):
        for text in ["[kg m s^-2]", "[m^0.5]", "[kg A^-1 s^-2]", "[m]"]:
            with self.subTest(text=text):
                self.assertEqual(str(Unit.parse(text)), text)

    def test_brackets_optional(self):
        self.assertEqual(Unit.parse("kg m"), kg * m)
        self.assertEqual(Unit.parse("  [ s ]  "), s)

    def test_parse_canonicalizes(self):
        self.assertEqual(Unit.parse("s^-1 m"), m / s)
        self.assertEqual(Unit.parse("m m"), m * m)

    def test_empty_is_dimensionless(self):
        self.assertEqual(Unit.parse(""), Unit.none())
        self.assertEqual(Unit.parse("[]"), Unit.none())

    def test_malformed(self):
        for text in ["[kg", "kg]", "kg^x", "2kg", "m^", "m^^2"]:
            with self.subTest(text=text):
                self.assertIsNone(Unit.parse(text))


if __name__ == '__main__':
    unittest.main()
