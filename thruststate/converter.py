"""Fixed-factor unit conversion.

The conversion table maps ``(from_unit, to_unit)`` to a multiplicative factor
such that ``value_in_to = value_in_from * factor``.  Only the directions that
are explicitly registered exist; an inverse is never derived on the fly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from thruststate.constants import (
    H_TO_S,
    KM_TO_M,
    KPH_TO_MPS,
    M_TO_KM,
    MPS2_TO_KPH2,
    MPS_TO_KPH,
    S_TO_H,
)
from thruststate.errors import ConversionError, UnitMismatchError
from thruststate.quantity import Quantity, UnitTag, require_known_unit

logger = logging.getLogger(__name__)

ConversionTable = Mapping[tuple[str, str], float]

# ---------------------------------------------------------------------------
# Default factors
# ---------------------------------------------------------------------------

DEFAULT_FACTORS: dict[tuple[str, str], float] = {
    (UnitTag.M_PER_S2, UnitTag.KM_PER_H2): MPS2_TO_KPH2,
    (UnitTag.SECOND, UnitTag.HOUR): S_TO_H,
    (UnitTag.HOUR, UnitTag.SECOND): H_TO_S,
    (UnitTag.M_PER_S, UnitTag.KM_PER_H): MPS_TO_KPH,
    (UnitTag.KM_PER_H, UnitTag.M_PER_S): KPH_TO_MPS,
    (UnitTag.METER, UnitTag.KM): M_TO_KM,
    (UnitTag.KM, UnitTag.METER): KM_TO_M,
}


def build_conversion_table(
    factors: Mapping[tuple[str, str], float] | None = None,
) -> ConversionTable:
    """Freeze a factor mapping into a read-only conversion table.

    Args:
        factors: ``(from_unit, to_unit) -> factor`` entries.  Defaults to
            :data:`DEFAULT_FACTORS`.

    Returns:
        A ``MappingProxyType`` over a private copy of the entries.

    Raises:
        UnknownUnitError: If any entry names a unit outside :class:`UnitTag`.
    """
    source = DEFAULT_FACTORS if factors is None else factors
    entries: dict[tuple[str, str], float] = {}
    for (from_unit, to_unit), factor in source.items():
        require_known_unit(from_unit)
        require_known_unit(to_unit)
        entries[(str(from_unit), str(to_unit))] = float(factor)
    return MappingProxyType(entries)


class UnitConverter:
    """Convert quantities using an immutable conversion table."""

    def __init__(self, table: ConversionTable | None = None) -> None:
        self._table = build_conversion_table(table)

    @property
    def table(self) -> ConversionTable:
        return self._table

    def supports(self, from_unit: str, to_unit: str) -> bool:
        return from_unit == to_unit or (from_unit, to_unit) in self._table

    def factor(self, from_unit: str, to_unit: str) -> float:
        """Return the factor for ``from_unit -> to_unit``.

        Raises:
            ConversionError: If the pair is not registered, which includes
                any pair naming a unit outside :class:`UnitTag`.
        """
        if from_unit == to_unit:
            return 1.0
        try:
            return self._table[(from_unit, to_unit)]
        except KeyError:
            raise ConversionError(from_unit, to_unit) from None

    def convert(self, quantity: Quantity, from_unit: str, to_unit: str) -> Quantity:
        """Express *quantity* (declared in *from_unit*) in *to_unit*.

        Raises:
            UnknownUnitError: If the quantity carries an unknown unit tag.
            UnitMismatchError: If ``quantity.unit`` is not *from_unit*.
            ConversionError: If no factor is registered for the pair.
        """
        require_known_unit(quantity.unit)
        if quantity.unit != from_unit:
            raise UnitMismatchError("quantity", from_unit, quantity.unit)
        factor = self.factor(from_unit, to_unit)
        converted = Quantity(quantity.value * factor, str(to_unit))
        logger.debug("Converted %s -> %s (factor %g)", quantity, converted, factor)
        return converted


def default_converter() -> UnitConverter:
    """Return a converter over :data:`DEFAULT_FACTORS`."""
    return UnitConverter()
