"""
uom_astronomy

Astronomy units of measure (solar mass, astronomical unit, and the
density, area and volume units used for planetary bodies) defined on SI
and registered in the astronomical system of units.
"""

import logging

__version__ = "1.0.0"

from .core.exceptions import (
    ConfigurationError,
    ConversionError,
    IncommensurableUnitsError,
    UnknownUnitError,
    UomAstronomyError,
    ValidationError,
)
from .core.units import (
    BaseUnit,
    Dimension,
    MetricPrefix,
    MultiplyConverter,
    ProductUnit,
    QuantityKind,
    TransformedUnit,
    Unit,
    UnitConverter,
)
from .systems import (
    ASTRONOMICAL_UNIT,
    CUBIC_KILOMETRE,
    GRAM_PER_CUBIC_CENTIMETRE,
    SOLAR_MASS,
    SQUARE_KILOMETRE,
    AbstractSystemOfUnits,
    AstronomicalSystemOfUnits,
)
from .config import ConverterConfiguration
from .infrastructure.logging.logger import PACKAGE_LOGGER_NAME, get_logger, setup_logging

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

# Default converter over the astronomical system
default_converter = UnitConverter([AstronomicalSystemOfUnits.get_instance()])


def convert_to_si(value, from_unit):
    """Convert value to coherent SI using the default converter"""
    return default_converter.convert_to_si(value, from_unit)


def convert_value(value, from_unit, to_unit):
    """Convert value between arbitrary units using the default converter"""
    return default_converter.convert(value, from_unit, to_unit)


def get_conversion_factor(from_unit, to_unit):
    """Get conversion factor between units using the default converter"""
    return default_converter.get_conversion_factor(from_unit, to_unit)


__all__ = [
    # Unit framework
    'BaseUnit', 'Dimension', 'MetricPrefix', 'MultiplyConverter', 'ProductUnit',
    'QuantityKind', 'TransformedUnit', 'Unit', 'UnitConverter',

    # Systems and catalog
    'AbstractSystemOfUnits', 'AstronomicalSystemOfUnits',
    'SOLAR_MASS', 'ASTRONOMICAL_UNIT', 'GRAM_PER_CUBIC_CENTIMETRE',
    'SQUARE_KILOMETRE', 'CUBIC_KILOMETRE',

    # Exceptions
    'UomAstronomyError', 'ValidationError', 'ConversionError',
    'IncommensurableUnitsError', 'UnknownUnitError', 'ConfigurationError',

    # Configuration and logging
    'ConverterConfiguration', 'setup_logging', 'get_logger',

    # Convenience functions
    'default_converter', 'convert_to_si', 'convert_value', 'get_conversion_factor',

    # Version info
    '__version__'
]
