"""Exception types raised by unit conversion and state transitions."""

from __future__ import annotations


class ThrustStateError(ValueError):
    """Base class for every calculation failure in thruststate."""


class ConversionError(ThrustStateError):
    """No conversion factor is registered for a (from_unit, to_unit) pair."""

    def __init__(self, from_unit: str, to_unit: str) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Conversion factor not found for units {from_unit} to {to_unit}")


class UnitMismatchError(ThrustStateError):
    """A quantity is declared in a different unit than the caller expects."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must be expressed in {expected}, got {actual}")


class UnknownUnitError(ThrustStateError):
    """A unit tag is outside the closed set of known units."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit {unit!r}")


class NonFiniteQuantityError(ThrustStateError):
    """A quantity holds NaN or an infinite value."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} is not a finite number: {value!r}")


class NegativeQuantityError(ThrustStateError):
    """A quantity that cannot be negative holds a negative value."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must not be negative, got {value!r}")


class DepletedResourceError(ThrustStateError):
    """A consumable would drop below zero before the elapsed time is over.

    ``achievable_time_s`` is how long the resource actually lasts at the
    given burn rate.
    """

    def __init__(
        self,
        resource: str,
        available: float,
        required: float,
        achievable_time_s: float,
    ) -> None:
        self.resource = resource
        self.available = available
        self.required = required
        self.achievable_time_s = achievable_time_s
        super().__init__(
            f"{resource} depleted: {required:g} required but only {available:g} available "
            f"(lasts {achievable_time_s:g} s)"
        )
