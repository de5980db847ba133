from .base import AbstractSystemOfUnits
from .astronomical import (
    ASTRONOMICAL_UNIT,
    CUBIC_KILOMETRE,
    GRAM_PER_CUBIC_CENTIMETRE,
    SOLAR_MASS,
    SQUARE_KILOMETRE,
    AstronomicalSystemOfUnits,
)

__all__ = [
    'AbstractSystemOfUnits',
    'AstronomicalSystemOfUnits',
    'SOLAR_MASS',
    'ASTRONOMICAL_UNIT',
    'GRAM_PER_CUBIC_CENTIMETRE',
    'SQUARE_KILOMETRE',
    'CUBIC_KILOMETRE',
]
