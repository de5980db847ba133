"""
Systems of Units

Base class for a named collection of units with one canonical unit per
quantity kind.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional

from ..core.units.definitions import Dimension, QuantityKind, Unit
from ..infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AbstractSystemOfUnits(ABC):
    """
    Ordered collection of units plus a quantity kind to unit mapping

    Units are kept in registration order and are not de-duplicated.
    Registering a second unit for a kind replaces the first.
    """

    def __init__(self):
        self._units: List[Unit] = []
        self._quantity_to_unit: Dict[QuantityKind, Unit] = {}

    @abstractmethod
    def get_name(self) -> str:
        """Identifying name of this system"""

    def add_unit(self, unit: Unit, kind: Optional[QuantityKind] = None) -> Unit:
        """
        Add a unit, optionally as the canonical unit for ``kind``

        Args:
            unit: The unit being added
            kind: Quantity kind the unit becomes canonical for

        Returns:
            ``unit``, unchanged
        """
        self._units.append(unit)

        if kind is not None:
            previous = self._quantity_to_unit.get(kind)
            if previous is not None:
                logger.debug(f"{self.get_name()}: {kind.name} remapped from {previous} to {unit}")
            self._quantity_to_unit[kind] = unit

        logger.debug(f"{self.get_name()}: registered {unit}" + (f" for {kind.name}" if kind is not None else ""))
        return unit

    def get_units(self, dimension: Optional[Dimension] = None) -> List[Unit]:
        """All registered units, optionally only those of ``dimension``"""
        if dimension is None:
            return list(self._units)
        return [unit for unit in self._units if unit.dimension == dimension]

    def get_unit(self, kind: QuantityKind) -> Optional[Unit]:
        """Canonical unit for ``kind``, or None"""
        return self._quantity_to_unit.get(kind)

    def get_unit_by_symbol(self, symbol: str) -> Optional[Unit]:
        """First registered unit with ``symbol``, or None"""
        for unit in self._units:
            if unit.symbol == symbol:
                return unit
        return None

    def get_kinds(self) -> List[QuantityKind]:
        """Quantity kinds that have a canonical unit"""
        return list(self._quantity_to_unit)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(list(self._units))

    def __contains__(self, unit) -> bool:
        return unit in self._units

    def __repr__(self):
        return f"<{type(self).__name__} {self.get_name()}: {len(self._units)} units>"
