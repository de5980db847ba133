# pytest tests for uom_astronomy.core.units.converter and the package-level
# convenience functions.

import numpy as np
import pytest

import uom_astronomy
from uom_astronomy.core.exceptions import (
    ConversionError,
    IncommensurableUnitsError,
    UnknownUnitError,
    ValidationError,
)
from uom_astronomy.core.units import Dimension, KILOGRAM, MetricPrefix, METRE, SECOND, UnitConverter
from uom_astronomy.config import ConverterConfiguration
from uom_astronomy.systems import (
    ASTRONOMICAL_UNIT,
    CUBIC_KILOMETRE,
    GRAM_PER_CUBIC_CENTIMETRE,
    SOLAR_MASS,
    SQUARE_KILOMETRE,
    AstronomicalSystemOfUnits,
)


@pytest.fixture()
def converter():
    """Fresh converter so cache statistics start from zero"""
    return UnitConverter([AstronomicalSystemOfUnits.get_instance()])


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def test_convert_density_symbols(converter):
    assert converter.convert(1.0, "g/cm³", "kg/m³") == 1000.0


def test_convert_to_si(converter):
    assert converter.convert_to_si(1, SOLAR_MASS) == 1.9891e30
    assert converter.convert_to_si(1, "AU") == 149597871000.0
    assert converter.convert_to_si(1, CUBIC_KILOMETRE) == 1e9


def test_convert_between_catalog_units(converter):
    assert converter.convert(1, ASTRONOMICAL_UNIT, "km") == 149597871.0


def test_convert_sequences_to_arrays(converter):
    result = converter.convert([1, 2, 3], "km", "m")
    assert isinstance(result, np.ndarray)
    np.testing.assert_array_equal(result, [1000.0, 2000.0, 3000.0])


def test_convert_array(converter):
    densities = np.array([0.5, 1.0, 5.5])
    np.testing.assert_allclose(converter.convert_to_si(densities, GRAM_PER_CUBIC_CENTIMETRE),
                               [500.0, 1000.0, 5500.0])


def test_convert_prefixed_units(converter):
    assert converter.convert(5, "mm", "m") == pytest.approx(0.005)
    assert converter.convert(1, "Mg", "kg") == 1000.0


def test_incompatible_units_raise(converter):
    with pytest.raises(IncommensurableUnitsError) as excinfo:
        converter.convert(1, "AU", "kg")

    assert isinstance(excinfo.value, ConversionError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.from_unit == "AU"
    assert converter.get_statistics()['errors'] == 1


# ---------------------------------------------------------------------------
# Symbol resolution
# ---------------------------------------------------------------------------

def test_resolve_exact_symbols(converter):
    assert converter.resolve_unit("M☉") is SOLAR_MASS
    assert converter.resolve_unit("km²") is SQUARE_KILOMETRE
    assert converter.resolve_unit(METRE) is METRE


@pytest.mark.parametrize("expression, expected", [
    ("g/cm^3", GRAM_PER_CUBIC_CENTIMETRE),
    ("g / cm**3", GRAM_PER_CUBIC_CENTIMETRE),
    ("km2", SQUARE_KILOMETRE),
    ("km^3", CUBIC_KILOMETRE),
])
def test_resolve_compound_expressions(converter, expression, expected):
    assert converter.resolve_unit(expression) == expected


def test_resolve_product_and_quotient(converter):
    force = converter.resolve_unit("kg·m/s²")
    assert force.dimension == Dimension(mass=1, length=1, time=-2)
    assert force.symbol == "kg·m/s²"


def test_resolve_prefix(converter):
    assert converter.resolve_unit("km") == MetricPrefix.KILO(METRE)
    assert converter.resolve_unit("dam") == MetricPrefix.DEKA(METRE)


@pytest.mark.parametrize("symbol, expected", [
    ("µm", MetricPrefix.MICRO(METRE)),
    ("μm", MetricPrefix.MICRO(METRE)),
    ("um", MetricPrefix.MICRO(METRE)),
    ("us", MetricPrefix.MICRO(SECOND)),
])
def test_resolve_micro_spellings(converter, symbol, expected):
    assert converter.resolve_unit(symbol) == expected


def test_resolve_dimensionless(converter):
    ratio = METRE / METRE
    resolved = converter.resolve_unit(ratio.symbol)

    assert resolved == ratio
    assert resolved.dimension.is_dimensionless
    assert converter.resolve_unit("1/s") == SECOND ** -1


def test_resolve_dot_as_product(converter):
    assert converter.resolve_unit("kg.m/s^2") == converter.resolve_unit("kg·m/s²")


@pytest.mark.parametrize("symbol", ["m^", "m^x", "m^2.5", "m2.5"])
def test_non_integer_exponents_raise(converter, symbol):
    with pytest.raises(UnknownUnitError, match="integer"):
        converter.resolve_unit(symbol)


@pytest.mark.parametrize("symbol", ["furlong", "", "   ", "g/", None])
def test_unknown_symbols_raise(converter, symbol):
    with pytest.raises(UnknownUnitError):
        converter.resolve_unit(symbol)


def test_unknown_unit_is_key_error(converter):
    with pytest.raises(KeyError):
        converter.convert(1, "parsec", "m")


def test_validate_unit(converter):
    assert converter.validate_unit("AU")
    assert converter.validate_unit("g/cm^3")
    assert not converter.validate_unit("xyz")


def test_get_si_equivalent(converter):
    assert converter.get_si_equivalent("g/cm³").symbol == "kg/m³"
    assert converter.get_si_equivalent(SOLAR_MASS) is KILOGRAM


def test_register_unit(converter):
    kilometre = MetricPrefix.KILO(METRE)
    converter.register_unit(kilometre, "klick")
    assert converter.resolve_unit("klick") == kilometre

    with pytest.raises(ValidationError):
        converter.register_unit(METRE, "klick")


# ---------------------------------------------------------------------------
# Caching and statistics
# ---------------------------------------------------------------------------

def test_conversion_factor_is_cached(converter):
    converter.get_conversion_factor("AU", "m")
    converter.get_conversion_factor("AU", "m")

    stats = converter.get_statistics()
    assert stats['cache_hits'] == 1
    assert stats['cache_misses'] == 1
    assert stats['cache_hit_rate'] == 0.5


def test_cache_eviction():
    converter = UnitConverter(cache_size=4)
    for target in ["m", "km", "cm", "mm", "pm", "nm"]:
        converter.get_conversion_factor("Gm", target)

    assert converter.get_statistics()['cache_size'] <= 4


def test_caching_disabled():
    converter = UnitConverter(enable_caching=False)
    converter.get_conversion_factor("km", "m")
    assert converter.get_statistics()['cache_size'] == 0


def test_clear_cache(converter):
    converter.get_conversion_factor("km", "m")
    converter.clear_cache()

    stats = converter.get_statistics()
    assert stats['cache_size'] == 0
    assert stats['cache_misses'] == 0


def test_invalid_cache_size():
    with pytest.raises(ValidationError):
        UnitConverter(cache_size=0)


def test_error_summary(converter):
    for symbol in ["furlong", "parsec"]:
        with pytest.raises(UnknownUnitError):
            converter.convert(1, symbol, "m")

    summary = converter.get_error_summary()
    assert summary['total_errors'] == 2
    assert summary['error_counts'] == {'UnknownUnitError': 2}


def test_from_config():
    config = ConverterConfiguration(enable_caching=False, cache_size=8)
    converter = UnitConverter.from_config(config, [AstronomicalSystemOfUnits.get_instance()])

    assert converter.enable_caching is False
    assert converter.cache_size == 8
    assert converter.resolve_unit("AU") is ASTRONOMICAL_UNIT


# ---------------------------------------------------------------------------
# Package-level helpers
# ---------------------------------------------------------------------------

def test_package_convenience_functions():
    assert uom_astronomy.convert_value(2, "km³", "m³") == 2e9
    assert uom_astronomy.convert_to_si(1, "g/cm³") == 1000.0
    assert uom_astronomy.get_conversion_factor("km²", "m²") == 1e6
