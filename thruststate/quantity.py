"""Unit-tagged quantities.

A :class:`Quantity` is a plain value object.  Building one never fails, even
with an unrecognised unit tag; the validation helpers here are what stop a bad
quantity from reaching any arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from thruststate.errors import (
    NegativeQuantityError,
    NonFiniteQuantityError,
    UnitMismatchError,
    UnknownUnitError,
)


class UnitTag(StrEnum):
    """Closed set of unit tags understood by the converter."""

    KM_PER_H = "km/h"
    M_PER_S = "m/s"
    M_PER_S2 = "m/s^2"
    KM_PER_H2 = "km/h^2"
    SECOND = "s"
    HOUR = "h"
    KM = "km"
    METER = "m"
    KG = "kg"
    KG_PER_S = "kg/s"


_KNOWN_UNITS: frozenset[str] = frozenset(tag.value for tag in UnitTag)


@dataclass(frozen=True)
class Quantity:
    """A numeric value paired with its unit of measurement."""

    value: float
    unit: str

    @property
    def is_known_unit(self) -> bool:
        return is_known_unit(self.unit)

    def __str__(self) -> str:
        return f"{self.value:.10g} {self.unit}"


def is_known_unit(unit: str) -> bool:
    """Return True when *unit* is one of the :class:`UnitTag` values."""
    return unit in _KNOWN_UNITS


def require_known_unit(unit: str) -> None:
    if not is_known_unit(unit):
        raise UnknownUnitError(unit)


def require_unit(quantity: Quantity, expected: str, name: str) -> None:
    """Check that *quantity* is declared in *expected*.

    Raises:
        UnknownUnitError: If the quantity's tag is not a known unit.
        UnitMismatchError: If the tag is known but differs from *expected*.
    """
    require_known_unit(quantity.unit)
    if quantity.unit != expected:
        raise UnitMismatchError(name, str(expected), quantity.unit)


def require_finite(quantity: Quantity, name: str) -> None:
    if not math.isfinite(quantity.value):
        raise NonFiniteQuantityError(name, quantity.value)


def require_non_negative(quantity: Quantity, name: str) -> None:
    if quantity.value < 0:
        raise NegativeQuantityError(name, quantity.value)
