"""
Astronomical System of Units

Units used in astronomy, defined against the SI units and registered in
a single process-wide system. The catalog is built once, in order, when
this module is first imported; it is read-only afterwards.
"""

from fractions import Fraction
from typing import Optional

from ..core.units.definitions import MultiplyConverter, QuantityKind, TransformedUnit, Unit
from ..core.units.prefixes import MetricPrefix
from ..core.units.si import GRAM, KILOGRAM, METRE
from .base import AbstractSystemOfUnits


class AstronomicalSystemOfUnits(AbstractSystemOfUnits):
    """
    Registry of astronomy units; use ``get_instance()``

    There is only ever one instance: calling the class returns it.
    """

    NAME = "ASTRONOMICALSYSTEMOFUNITS"

    _instance: Optional['AstronomicalSystemOfUnits'] = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            AbstractSystemOfUnits.__init__(instance)
            cls._instance = instance
        return cls._instance

    def __init__(self):
        # State is created once, in __new__
        pass

    @classmethod
    def get_instance(cls) -> 'AstronomicalSystemOfUnits':
        """Return the shared instance"""
        return cls()

    def get_name(self) -> str:
        return self.NAME


_INSTANCE = AstronomicalSystemOfUnits()


def _add_unit(unit: Unit, kind: Optional[QuantityKind] = None) -> Unit:
    return _INSTANCE.add_unit(unit, kind)


# The solar mass (M☉) is the mass of the Sun, used to express the masses
# of other stars, clusters, nebulae and galaxies.
SOLAR_MASS = _add_unit(TransformedUnit(
    "M☉", KILOGRAM, MultiplyConverter(Fraction("1.9891e30")), "solar mass"))

# Mean Earth-Sun distance
ASTRONOMICAL_UNIT = _add_unit(TransformedUnit(
    "AU", METRE, MultiplyConverter(149597871000), "astronomical unit"))

GRAM_PER_CUBIC_CENTIMETRE = _add_unit(
    GRAM.divide(MetricPrefix.CENTI(METRE).pow(3)), QuantityKind.DENSITY)

SQUARE_KILOMETRE = _add_unit(
    MetricPrefix.KILO(METRE).multiply(MetricPrefix.KILO(METRE)), QuantityKind.AREA)

# Built on SQUARE_KILOMETRE, so it must follow it
CUBIC_KILOMETRE = _add_unit(
    SQUARE_KILOMETRE.multiply(MetricPrefix.KILO(METRE)), QuantityKind.VOLUME)
