"""
Unit Definitions for Astronomical Units of Measure

Dimensions, quantity kinds and the three unit types every unit in the
package is built from:

* ``BaseUnit``: a primitive SI unit with scale exactly one
* ``TransformedUnit``: a parent unit multiplied by a constant factor
* ``ProductUnit``: a product of other units raised to integer powers

Scales are carried as exact rationals (``fractions.Fraction``) so composed
units such as g/cm³ reduce to whole-number factors against SI. They become
floats only when a value is actually converted.
"""

import math
from dataclasses import astuple, dataclass, fields
from enum import Enum
from fractions import Fraction
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..exceptions import IncommensurableUnitsError, ValidationError

Number = Union[int, float, Fraction, str]

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


@dataclass(frozen=True)
class Dimension:
    """Integer exponents over the seven SI base dimensions"""
    mass: int = 0
    length: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminous_intensity: int = 0

    def __mul__(self, other: 'Dimension') -> 'Dimension':
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a + b for a, b in zip(astuple(self), astuple(other))))

    def __truediv__(self, other: 'Dimension') -> 'Dimension':
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*(a - b for a, b in zip(astuple(self), astuple(other))))

    def __pow__(self, exponent: int) -> 'Dimension':
        return Dimension(*(a * exponent for a in astuple(self)))

    @property
    def is_dimensionless(self) -> bool:
        return not any(astuple(self))

    def items(self) -> List[Tuple[str, int]]:
        """Non-zero (dimension name, exponent) pairs in SI order"""
        return [(f.name, getattr(self, f.name)) for f in fields(self) if getattr(self, f.name)]

    def __str__(self):
        if self.is_dimensionless:
            return "1"
        parts = []
        for name, exponent in self.items():
            parts.append(f"[{name}]" if exponent == 1 else f"[{name}]^{exponent}")
        return "·".join(parts)


class QuantityKind(Enum):
    """Physical quantity kinds a system of units can map to a canonical unit"""
    MASS = "mass"
    LENGTH = "length"
    AREA = "area"
    VOLUME = "volume"
    DENSITY = "density"

    @property
    def dimension(self) -> Dimension:
        return _KIND_DIMENSIONS[self]


_KIND_DIMENSIONS: Dict[QuantityKind, Dimension] = {
    QuantityKind.MASS: Dimension(mass=1),
    QuantityKind.LENGTH: Dimension(length=1),
    QuantityKind.AREA: Dimension(length=2),
    QuantityKind.VOLUME: Dimension(length=3),
    QuantityKind.DENSITY: Dimension(mass=1, length=-3),
}


@dataclass(frozen=True)
class MultiplyConverter:
    """
    Conversion rule ``value_in_parent = value * factor``

    The factor is normalised to a ``Fraction``. Floats are taken at their
    exact binary value; pass a decimal string or a ``Fraction`` when the
    decimal value itself must be exact.
    """
    factor: Fraction

    def __post_init__(self):
        factor = as_fraction(self.factor)
        if factor is None:
            raise ValidationError("Conversion factor must be a finite number", 'factor', self.factor)

        if factor <= 0:
            raise ValidationError(f"Conversion factor must be positive, got {self.factor}", 'factor', self.factor)

        object.__setattr__(self, 'factor', factor)

    @property
    def is_identity(self) -> bool:
        return self.factor == 1

    def convert(self, value):
        return value * float(self.factor)

    def inverse(self) -> 'MultiplyConverter':
        return MultiplyConverter(1 / self.factor)

    def concatenate(self, other: 'MultiplyConverter') -> 'MultiplyConverter':
        """Converter equivalent to applying ``other`` and then ``self``"""
        return MultiplyConverter(self.factor * other.factor)


class Unit:
    """
    Common behaviour of all units

    Subclasses provide ``symbol``, ``name``, ``dimension`` and ``scale``
    (the exact factor to the coherent SI unit of the same dimension).
    """

    symbol: str
    name: str
    dimension: Dimension
    scale: Fraction

    @property
    def to_si_factor(self) -> float:
        """Multiplication factor from this unit to coherent SI"""
        return float(self.scale)

    # -- composition -------------------------------------------------

    def multiply(self, other: 'Unit') -> 'Unit':
        return ProductUnit.of(_elements(self) + _elements(other))

    def divide(self, other: 'Unit') -> 'Unit':
        return ProductUnit.of(_elements(self) + [(u, -e) for u, e in _elements(other)])

    def pow(self, exponent: int) -> 'Unit':
        if not isinstance(exponent, int):
            raise ValidationError("Unit exponents must be integers", 'exponent', exponent)
        return ProductUnit.of([(u, e * exponent) for u, e in _elements(self)])

    def transform(self, converter: MultiplyConverter, symbol: str, name: str = "") -> 'TransformedUnit':
        return TransformedUnit(symbol, self, converter, name)

    def __mul__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent):
        return self.pow(exponent)

    # -- conversion --------------------------------------------------

    def is_compatible(self, other: 'Unit') -> bool:
        return self.dimension == other.dimension

    def get_converter_to(self, other: 'Unit') -> MultiplyConverter:
        """
        Converter taking values in this unit to values in ``other``

        Raises:
            IncommensurableUnitsError: If the dimensions differ
        """
        if not self.is_compatible(other):
            raise IncommensurableUnitsError(
                f"Cannot convert {self.dimension} to {other.dimension}",
                self.symbol, other.symbol)
        return MultiplyConverter(self.scale / other.scale)

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class BaseUnit(Unit):
    """Primitive SI unit"""
    symbol: str
    dimension: Dimension
    name: str = ""

    @property
    def scale(self) -> Fraction:
        return Fraction(1)


@dataclass(frozen=True)
class TransformedUnit(Unit):
    """Unit defined as a constant multiple of a parent unit"""
    symbol: str
    parent: Unit
    converter: MultiplyConverter
    name: str = ""

    @property
    def dimension(self) -> Dimension:
        return self.parent.dimension

    @property
    def scale(self) -> Fraction:
        return self.parent.scale * self.converter.factor


@dataclass(frozen=True)
class ProductUnit(Unit):
    """
    Product of units raised to integer exponents

    Build instances through ``ProductUnit.of`` or the composition methods
    on ``Unit`` so equal factors are merged and zero powers dropped.
    """
    elements: Tuple[Tuple[Unit, int], ...]
    name: str = ""

    @classmethod
    def of(cls, elements: Iterable[Tuple[Unit, int]]) -> Unit:
        merged: List[List] = []
        for unit, exponent in elements:
            for entry in merged:
                if entry[0] == unit:
                    entry[1] += exponent
                    break
            else:
                merged.append([unit, exponent])

        reduced = tuple((unit, exponent) for unit, exponent in merged if exponent != 0)
        if len(reduced) == 1 and reduced[0][1] == 1:
            return reduced[0][0]
        return cls(reduced)

    @property
    def symbol(self) -> str:
        numerator = [_power_symbol(u, e) for u, e in self.elements if e > 0]
        denominator = [_power_symbol(u, -e) for u, e in self.elements if e < 0]
        symbol = "·".join(numerator) or "1"
        for part in denominator:
            symbol += f"/{part}"
        return symbol

    @property
    def dimension(self) -> Dimension:
        dimension = Dimension()
        for unit, exponent in self.elements:
            dimension = dimension * unit.dimension ** exponent
        return dimension

    @property
    def scale(self) -> Fraction:
        return math.prod((unit.scale ** exponent for unit, exponent in self.elements), start=Fraction(1))


def _elements(unit: Unit) -> List[Tuple[Unit, int]]:
    if isinstance(unit, ProductUnit):
        return list(unit.elements)
    return [(unit, 1)]


def _power_symbol(unit: Unit, exponent: int) -> str:
    symbol = unit.symbol
    if isinstance(unit, ProductUnit):
        symbol = f"({symbol})"
    if exponent == 1:
        return symbol
    return symbol + str(exponent).translate(_SUPERSCRIPTS)


def as_fraction(value: Number) -> Optional[Fraction]:
    """Exact rational for ``value``, or None when it is not a finite number"""
    try:
        return Fraction(value)
    except (TypeError, ValueError, OverflowError):
        return None
