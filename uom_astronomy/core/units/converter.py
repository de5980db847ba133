"""
Unit Conversion

Converts scalars and numpy arrays between units, resolving unit symbols
and simple compound expressions ("g/cm^3", "kg·m/s²") on the way.
"""

import re
from typing import Any, Dict, Iterable, List, Tuple, Union

import numpy as np

from ..exceptions import (
    ConversionError,
    UnknownUnitError,
    UomAstronomyError,
    ValidationError,
    create_error_summary,
)
from ...infrastructure.logging.logger import get_logger
from .definitions import ProductUnit, Unit
from .prefixes import MetricPrefix, prefixes_by_symbol_length
from .si import PREFIXABLE_UNITS, SI_UNITS, coherent_si_unit

logger = get_logger(__name__)

Value = Union[int, float, np.ndarray, list, tuple]
UnitLike = Union[Unit, str]

_SUPERSCRIPT_RUN = re.compile(r'[⁻]?[⁰¹²³⁴⁵⁶⁷⁸⁹]+')
_FROM_SUPERSCRIPT = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹⁻", "0123456789-")
_CARET_EXPONENT = re.compile(r'^(.+?)\^(.*)$')
_TRAILING_EXPONENT = re.compile(r'^(.+?)(-?\d+)?$')
_DECIMAL_EXPONENT = re.compile(r'\d+\.\d+$')
_INTEGER = re.compile(r'-?\d+')
# '.' as a product separator, but not inside a decimal number
_PRODUCT_DOT = re.compile(r'(?<!\d)\.|\.(?!\d)')

_GREEK_MU = '\u03bc'
_ASCII_MICRO = 'u'

_MAX_RECORDED_ERRORS = 100


class UnitConverter:
    """
    Unit converter with factor caching and usage statistics

    Symbols are resolved against the SI units plus every unit of the
    systems passed in (any object with a ``get_units()`` method).
    """

    def __init__(self, systems: Iterable[Any] = (), enable_caching: bool = True,
                 cache_size: int = 256):
        """
        Initialize unit converter

        Args:
            systems: Systems of units whose units can be looked up by symbol
            enable_caching: Enable conversion factor caching
            cache_size: Maximum number of cached conversion factors
        """
        if cache_size <= 0:
            raise ValidationError("Cache size must be positive", 'cache_size', cache_size)

        self.enable_caching = enable_caching
        self.cache_size = cache_size

        self._symbols: Dict[str, Unit] = dict(SI_UNITS)
        for system in systems:
            for unit in system.get_units():
                self._symbols.setdefault(unit.symbol, unit)

        self._conversion_cache: Dict[Tuple[Unit, Unit], float] = {}
        self._errors: List[Exception] = []

        self._stats = {
            'conversions': 0,
            'cache_hits': 0,
            'cache_misses': 0,
            'errors': 0
        }

    @classmethod
    def from_config(cls, config, systems: Iterable[Any] = ()) -> 'UnitConverter':
        """Create a converter from a ConverterConfiguration"""
        return cls(systems, enable_caching=config.enable_caching, cache_size=config.cache_size)

    # ---------------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------------

    def convert(self, value: Value, from_unit: UnitLike, to_unit: UnitLike) -> Union[float, np.ndarray]:
        """
        Convert value between units

        Args:
            value: Scalar, sequence or array to convert
            from_unit: Source unit or symbol
            to_unit: Target unit or symbol

        Returns:
            Converted value(s); sequences come back as numpy arrays

        Raises:
            UnknownUnitError: If a symbol cannot be resolved
            IncommensurableUnitsError: If the dimensions differ
        """
        factor = self.get_conversion_factor(from_unit, to_unit)
        self._stats['conversions'] += 1
        return _as_numeric(value) * factor

    def convert_to_si(self, value: Value, from_unit: UnitLike) -> Union[float, np.ndarray]:
        """Convert value to the coherent SI unit of the same dimension"""
        source = self._resolve_tracked(from_unit)
        return self.convert(value, source, coherent_si_unit(source.dimension))

    def get_conversion_factor(self, from_unit: UnitLike, to_unit: UnitLike) -> float:
        """
        Get multiplication factor from one unit to another

        Raises:
            UnknownUnitError: If a symbol cannot be resolved
            IncommensurableUnitsError: If the dimensions differ
        """
        source = self._resolve_tracked(from_unit)
        target = self._resolve_tracked(to_unit)
        cache_key = (source, target)

        if self.enable_caching and cache_key in self._conversion_cache:
            self._stats['cache_hits'] += 1
            return self._conversion_cache[cache_key]

        self._stats['cache_misses'] += 1

        try:
            factor = float(source.get_converter_to(target).factor)
        except ConversionError as e:
            self._record_error(e)
            raise

        if self.enable_caching:
            if len(self._conversion_cache) >= self.cache_size:
                # Drop the oldest quarter
                items_to_remove = max(1, self.cache_size // 4)
                for _ in range(items_to_remove):
                    self._conversion_cache.pop(next(iter(self._conversion_cache)))
                logger.debug(f"Evicted {items_to_remove} cached conversion factors")

            self._conversion_cache[cache_key] = factor

        return factor

    # ---------------------------------------------------------------
    # Symbol resolution
    # ---------------------------------------------------------------

    def resolve_unit(self, unit: UnitLike) -> Unit:
        """
        Resolve a unit or unit symbol to a Unit

        Lookup order: exact symbol, metric prefix + SI unit, compound
        expression.

        Raises:
            UnknownUnitError: If the symbol cannot be resolved
        """
        if isinstance(unit, Unit):
            return unit

        if not isinstance(unit, str) or not unit.strip():
            raise UnknownUnitError(f"Not a unit symbol: {unit!r}", repr(unit))

        symbol = unit.strip()
        found = self._lookup_symbol(symbol)
        if found is not None:
            return found

        return self._parse_compound_unit(symbol)

    def register_unit(self, unit: Unit, symbol: str = None) -> Unit:
        """
        Make ``unit`` resolvable by symbol

        Raises:
            ValidationError: If the symbol is already bound to another unit
        """
        symbol = symbol or unit.symbol
        existing = self._symbols.get(symbol)
        if existing is not None and existing != unit:
            raise ValidationError(f"Unit '{symbol}' already registered", 'symbol', symbol)

        self._symbols[symbol] = unit
        return unit

    def _resolve_tracked(self, unit: UnitLike) -> Unit:
        try:
            return self.resolve_unit(unit)
        except UnknownUnitError as e:
            self._record_error(e)
            raise

    def _lookup_symbol(self, symbol: str):
        if symbol in self._symbols:
            return self._symbols[symbol]

        # Greek mu and the micro sign are both written for MICRO
        symbol = symbol.replace(_GREEK_MU, MetricPrefix.MICRO.symbol)
        if symbol in self._symbols:
            return self._symbols[symbol]

        for prefix in prefixes_by_symbol_length():
            if symbol.startswith(prefix.symbol):
                base = PREFIXABLE_UNITS.get(symbol[len(prefix.symbol):])
                if base is not None:
                    return prefix(base)

        if symbol.startswith(_ASCII_MICRO):
            base = PREFIXABLE_UNITS.get(symbol[len(_ASCII_MICRO):])
            if base is not None:
                return MetricPrefix.MICRO(base)

        return None

    def _parse_compound_unit(self, unit_expr: str) -> Unit:
        """
        Parse expressions like 'g / cm^3' or 'kg·m/s²'

        Everything after the first '/' is in the denominator.
        """
        cleaned = self._clean_unit_string(unit_expr)
        parts = cleaned.split('/')
        numerator, denominators = parts[0], parts[1:]

        elements = []
        for part in self._split_product(numerator):
            elements.append(self._parse_single_unit(part, unit_expr))
        for denominator in denominators:
            if not denominator:
                raise UnknownUnitError(f"Empty denominator in '{unit_expr}'", unit_expr)
            for part in self._split_product(denominator):
                unit, exponent = self._parse_single_unit(part, unit_expr)
                elements.append((unit, -exponent))

        if not elements:
            if numerator == '1' and not denominators:
                # Dimensionless, as printed for an empty product
                return ProductUnit.of([])
            raise UnknownUnitError(f"Unknown unit: '{unit_expr}'", unit_expr)

        return ProductUnit.of(elements)

    @staticmethod
    def _split_product(part: str) -> List[str]:
        return [p for p in part.split('·') if p and p != '1']

    def _parse_single_unit(self, unit: str, unit_expr: str) -> Tuple[Unit, int]:
        caret = _CARET_EXPONENT.match(unit)
        if caret:
            base_symbol, exp_str = caret.groups()
            if not _INTEGER.fullmatch(exp_str):
                raise UnknownUnitError(
                    f"Exponent must be an integer, got '{exp_str}' in '{unit_expr}'", unit_expr)
        elif _DECIMAL_EXPONENT.search(unit):
            raise UnknownUnitError(
                f"Exponent must be an integer in '{unit}' of '{unit_expr}'", unit_expr)
        else:
            base_symbol, exp_str = _TRAILING_EXPONENT.match(unit).groups()
        exponent = int(exp_str) if exp_str else 1

        base_unit = self._lookup_symbol(base_symbol)
        if base_unit is None:
            raise UnknownUnitError(f"Unknown base unit: '{base_symbol}' in '{unit_expr}'", base_symbol)

        return base_unit, exponent

    @staticmethod
    def _clean_unit_string(unit: str) -> str:
        cleaned = unit.replace(' ', '').replace('**', '^').replace('*', '·')
        cleaned = _PRODUCT_DOT.sub('·', cleaned)
        return _SUPERSCRIPT_RUN.sub(lambda m: '^' + m.group(0).translate(_FROM_SUPERSCRIPT), cleaned)

    # ---------------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------------

    def validate_unit(self, unit: UnitLike) -> bool:
        """Check if unit is recognized by the converter"""
        try:
            self.resolve_unit(unit)
            return True
        except UnknownUnitError:
            return False

    def get_si_equivalent(self, unit: UnitLike) -> Unit:
        """Coherent SI unit with the same dimension as ``unit``"""
        return coherent_si_unit(self._resolve_tracked(unit).dimension)

    def get_statistics(self) -> Dict[str, Any]:
        """Get converter usage statistics"""
        stats = self._stats.copy()
        stats.update({
            'cache_size': len(self._conversion_cache),
            'cache_hit_rate': (self._stats['cache_hits'] /
                               max(1, self._stats['cache_hits'] + self._stats['cache_misses'])),
            'registered_units': len(self._symbols)
        })
        return stats

    def get_error_summary(self) -> Dict[str, Any]:
        """Summary of the most recent conversion errors"""
        return create_error_summary(self._errors)

    def clear_cache(self):
        """Clear conversion factor cache"""
        self._conversion_cache.clear()
        self._stats['cache_hits'] = 0
        self._stats['cache_misses'] = 0

    def _record_error(self, error: UomAstronomyError):
        self._stats['errors'] += 1
        self._errors.append(error)
        del self._errors[:-_MAX_RECORDED_ERRORS]
        logger.warning(f"Unit conversion failed: {error}")


def _as_numeric(value: Value):
    if isinstance(value, (list, tuple)):
        return np.asarray(value, dtype=float)
    return value
