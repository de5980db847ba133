"""
SI metric prefixes

Each member is callable and returns the prefixed unit::

    MetricPrefix.KILO(METRE)    # TransformedUnit "km", factor 1000
"""

from enum import Enum
from fractions import Fraction
from typing import List

from .definitions import MultiplyConverter, TransformedUnit, Unit


class MetricPrefix(Enum):
    """Decimal SI prefixes, largest first"""
    YOTTA = ("Y", Fraction(10) ** 24)
    ZETTA = ("Z", Fraction(10) ** 21)
    EXA = ("E", Fraction(10) ** 18)
    PETA = ("P", Fraction(10) ** 15)
    TERA = ("T", Fraction(10) ** 12)
    GIGA = ("G", Fraction(10) ** 9)
    MEGA = ("M", Fraction(10) ** 6)
    KILO = ("k", Fraction(10) ** 3)
    HECTO = ("h", Fraction(10) ** 2)
    DEKA = ("da", Fraction(10))
    DECI = ("d", Fraction(10) ** -1)
    CENTI = ("c", Fraction(10) ** -2)
    MILLI = ("m", Fraction(10) ** -3)
    MICRO = ("µ", Fraction(10) ** -6)
    NANO = ("n", Fraction(10) ** -9)
    PICO = ("p", Fraction(10) ** -12)
    FEMTO = ("f", Fraction(10) ** -15)
    ATTO = ("a", Fraction(10) ** -18)
    ZEPTO = ("z", Fraction(10) ** -21)
    YOCTO = ("y", Fraction(10) ** -24)

    def __init__(self, symbol: str, factor: Fraction):
        self.symbol = symbol
        self.factor = factor

    def __call__(self, unit: Unit) -> TransformedUnit:
        return TransformedUnit(f"{self.symbol}{unit.symbol}", unit, MultiplyConverter(self.factor),
                               f"{self.name.lower()}{unit.name}" if unit.name else "")


def prefixes_by_symbol_length() -> List[MetricPrefix]:
    """Prefixes ordered so longer symbols ("da") are tried before shorter ones"""
    return sorted(MetricPrefix, key=lambda prefix: len(prefix.symbol), reverse=True)
