"""
Units Module for uom_astronomy

Dimensions, unit types, metric prefixes, the SI units and a value
converter built on them.
"""

from .definitions import (
    BaseUnit,
    Dimension,
    MultiplyConverter,
    ProductUnit,
    QuantityKind,
    TransformedUnit,
    Unit,
)
from .prefixes import MetricPrefix
from .si import (
    AMPERE,
    CANDELA,
    CUBIC_METRE,
    GRAM,
    KELVIN,
    KILOGRAM,
    KILOGRAM_PER_CUBIC_METRE,
    METRE,
    MOLE,
    SECOND,
    SI_BASE_UNITS,
    SI_UNITS,
    SQUARE_METRE,
    coherent_si_unit,
)
from .converter import UnitConverter

__all__ = [
    'BaseUnit',
    'Dimension',
    'MultiplyConverter',
    'ProductUnit',
    'QuantityKind',
    'TransformedUnit',
    'Unit',
    'MetricPrefix',
    'AMPERE',
    'CANDELA',
    'CUBIC_METRE',
    'GRAM',
    'KELVIN',
    'KILOGRAM',
    'KILOGRAM_PER_CUBIC_METRE',
    'METRE',
    'MOLE',
    'SECOND',
    'SI_BASE_UNITS',
    'SI_UNITS',
    'SQUARE_METRE',
    'coherent_si_unit',
    'UnitConverter',
]
