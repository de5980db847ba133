# pytest tests for the unit framework: dimensions, converters, unit
# composition, prefixes and the SI units.

from fractions import Fraction

import pytest

from uom_astronomy.core.exceptions import IncommensurableUnitsError, ValidationError
from uom_astronomy.core.units import (
    GRAM,
    KILOGRAM,
    KILOGRAM_PER_CUBIC_METRE,
    METRE,
    SECOND,
    Dimension,
    MetricPrefix,
    MultiplyConverter,
    ProductUnit,
    QuantityKind,
    TransformedUnit,
    coherent_si_unit,
)


# ---------------------------------------------------------------------------
# Dimension
# ---------------------------------------------------------------------------

def test_dimension_arithmetic():
    length = Dimension(length=1)
    mass = Dimension(mass=1)

    assert length * length == Dimension(length=2)
    assert mass / length ** 3 == Dimension(mass=1, length=-3)
    assert (length / length).is_dimensionless


def test_dimension_str():
    assert str(Dimension()) == "1"
    assert str(Dimension(mass=1, length=-3)) == "[mass]·[length]^-3"


def test_quantity_kind_dimensions():
    assert QuantityKind.AREA.dimension == Dimension(length=2)
    assert QuantityKind.VOLUME.dimension == Dimension(length=3)
    assert QuantityKind.DENSITY.dimension == KILOGRAM_PER_CUBIC_METRE.dimension


# ---------------------------------------------------------------------------
# MultiplyConverter
# ---------------------------------------------------------------------------

def test_multiply_converter_normalises_factor():
    converter = MultiplyConverter("0.25")
    assert converter.factor == Fraction(1, 4)
    assert converter.convert(8) == 2.0


@pytest.mark.parametrize("factor", [0, -3, float("nan"), float("inf"), "abc", None])
def test_multiply_converter_rejects_bad_factors(factor):
    with pytest.raises(ValidationError):
        MultiplyConverter(factor)


def test_multiply_converter_inverse_and_concatenate():
    kilo = MultiplyConverter(1000)
    assert kilo.inverse().factor == Fraction(1, 1000)
    assert kilo.concatenate(kilo.inverse()).is_identity


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

def test_base_unit_scale():
    assert METRE.scale == 1
    assert METRE.dimension == Dimension(length=1)
    assert str(METRE) == "m"


def test_gram_is_transformed_kilogram():
    assert isinstance(GRAM, TransformedUnit)
    assert GRAM.parent is KILOGRAM
    assert GRAM.scale == Fraction(1, 1000)


def test_prefixed_unit():
    kilometre = MetricPrefix.KILO(METRE)
    assert kilometre.symbol == "km"
    assert kilometre.name == "kilometre"
    assert kilometre.scale == 1000
    assert kilometre == MetricPrefix.KILO(METRE)


def test_product_merges_equal_factors():
    kilometre = MetricPrefix.KILO(METRE)
    area = kilometre * kilometre
    assert isinstance(area, ProductUnit)
    assert area.elements == ((kilometre, 2),)
    assert area.symbol == "km²"


def test_product_collapses_to_single_unit():
    kilometre = MetricPrefix.KILO(METRE)
    assert kilometre * METRE / METRE == kilometre


def test_dimensionless_product():
    ratio = METRE / METRE
    assert ratio.symbol == "1"
    assert ratio.dimension.is_dimensionless
    assert ratio.scale == 1


def test_product_symbol_with_denominators():
    acceleration = METRE / SECOND ** 2
    assert acceleration.symbol == "m/s²"
    assert (SECOND ** -1).symbol == "1/s"


def test_density_scale_is_exact():
    density = GRAM / MetricPrefix.CENTI(METRE) ** 3
    assert density.scale == 1000
    assert density.to_si_factor == 1000.0


def test_pow_requires_integer():
    with pytest.raises(ValidationError):
        METRE.pow(0.5)


def test_operators_reject_numbers():
    with pytest.raises(TypeError):
        METRE * 2


def test_converter_between_incompatible_units():
    with pytest.raises(IncommensurableUnitsError):
        METRE.get_converter_to(KILOGRAM)


def test_units_are_hashable():
    kilometre = MetricPrefix.KILO(METRE)
    assert len({kilometre, MetricPrefix.KILO(METRE), METRE}) == 2


# ---------------------------------------------------------------------------
# SI
# ---------------------------------------------------------------------------

def test_coherent_si_unit():
    assert coherent_si_unit(Dimension(length=1)) is METRE
    assert coherent_si_unit(QuantityKind.DENSITY.dimension) == KILOGRAM_PER_CUBIC_METRE
    assert KILOGRAM_PER_CUBIC_METRE.symbol == "kg/m³"
