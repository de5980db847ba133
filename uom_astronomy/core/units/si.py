"""
SI base units and the coherent derived units used by the catalog
"""

from fractions import Fraction
from typing import Dict, Tuple

from .definitions import BaseUnit, Dimension, MultiplyConverter, ProductUnit, Unit


# ===================================================================
# BASE SI UNITS
# ===================================================================

KILOGRAM = BaseUnit("kg", Dimension(mass=1), "kilogram")
METRE = BaseUnit("m", Dimension(length=1), "metre")
SECOND = BaseUnit("s", Dimension(time=1), "second")
AMPERE = BaseUnit("A", Dimension(current=1), "ampere")
KELVIN = BaseUnit("K", Dimension(temperature=1), "kelvin")
MOLE = BaseUnit("mol", Dimension(amount=1), "mole")
CANDELA = BaseUnit("cd", Dimension(luminous_intensity=1), "candela")

# Ordered to match the Dimension fields
SI_BASE_UNITS: Tuple[BaseUnit, ...] = (KILOGRAM, METRE, SECOND, AMPERE, KELVIN, MOLE, CANDELA)

# The kilogram is the base unit, so the gram is the prefixable one
GRAM = KILOGRAM.transform(MultiplyConverter(Fraction(1, 1000)), "g", "gram")

# ===================================================================
# COHERENT DERIVED UNITS
# ===================================================================

SQUARE_METRE = METRE.pow(2)
CUBIC_METRE = METRE.pow(3)
KILOGRAM_PER_CUBIC_METRE = KILOGRAM.divide(CUBIC_METRE)

# Units accepted after a metric prefix when resolving symbols
PREFIXABLE_UNITS: Dict[str, Unit] = {
    unit.symbol: unit for unit in (GRAM, METRE, SECOND, AMPERE, KELVIN, MOLE, CANDELA)
}

SI_UNITS: Dict[str, Unit] = {
    **{unit.symbol: unit for unit in SI_BASE_UNITS},
    GRAM.symbol: GRAM,
    SQUARE_METRE.symbol: SQUARE_METRE,
    CUBIC_METRE.symbol: CUBIC_METRE,
    KILOGRAM_PER_CUBIC_METRE.symbol: KILOGRAM_PER_CUBIC_METRE,
}


def coherent_si_unit(dimension: Dimension) -> Unit:
    """
    SI unit with scale one for ``dimension``

    Args:
        dimension: Dimension to express

    Returns:
        A base unit, or a product of base units (e.g. kg/m³ for density)
    """
    exponents = (
        dimension.mass, dimension.length, dimension.time, dimension.current,
        dimension.temperature, dimension.amount, dimension.luminous_intensity,
    )
    return ProductUnit.of(zip(SI_BASE_UNITS, exponents))
