"""Immutable motion-and-fuel state."""

from __future__ import annotations

from dataclasses import dataclass, fields

from thruststate.quantity import (
    Quantity,
    UnitTag,
    require_finite,
    require_non_negative,
    require_unit,
)

# Unit each State field must carry on input to a transition.
INPUT_UNITS: dict[str, UnitTag] = {
    "velocity": UnitTag.KM_PER_H,
    "acceleration": UnitTag.M_PER_S2,
    "time": UnitTag.SECOND,
    "distance": UnitTag.KM,
    "fuel": UnitTag.KG,
    "fuel_burn_rate": UnitTag.KG_PER_S,
}

# Fields that must not be negative on input to a transition.
NON_NEGATIVE_FIELDS: frozenset[str] = frozenset({"time", "fuel", "fuel_burn_rate"})

# Seed scenario, keyed like the arguments of State.from_values.
SEED_VALUES: dict[str, float] = {
    "velocity_kmh": 10000.0,
    "acceleration_mps2": 3.0,
    "time_s": 3600.0,
    "distance_km": 0.0,
    "fuel_kg": 5000.0,
    "fuel_burn_rate_kgps": 0.5,
}


@dataclass(frozen=True)
class State:
    """The six named quantities describing motion and fuel at one instant."""

    velocity: Quantity
    acceleration: Quantity
    time: Quantity
    distance: Quantity
    fuel: Quantity
    fuel_burn_rate: Quantity

    @classmethod
    def from_values(
        cls,
        *,
        velocity_kmh: float,
        acceleration_mps2: float,
        time_s: float,
        distance_km: float,
        fuel_kg: float,
        fuel_burn_rate_kgps: float,
    ) -> State:
        """Build a State from plain numbers in the canonical input units."""
        return cls(
            velocity=Quantity(float(velocity_kmh), UnitTag.KM_PER_H),
            acceleration=Quantity(float(acceleration_mps2), UnitTag.M_PER_S2),
            time=Quantity(float(time_s), UnitTag.SECOND),
            distance=Quantity(float(distance_km), UnitTag.KM),
            fuel=Quantity(float(fuel_kg), UnitTag.KG),
            fuel_burn_rate=Quantity(float(fuel_burn_rate_kgps), UnitTag.KG_PER_S),
        )

    def quantities(self) -> dict[str, Quantity]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def seed_state() -> State:
    """Return the fixed seed scenario."""
    return State.from_values(**SEED_VALUES)


def validate_input_state(state: State) -> None:
    """Check every field is finite and carries its expected input unit.

    Elapsed time, fuel and fuel burn rate must also be non-negative.

    Raises:
        UnknownUnitError: A field carries a tag outside :class:`UnitTag`.
        UnitMismatchError: A field is in a different known unit.
        NonFiniteQuantityError: A field is NaN or infinite.
        NegativeQuantityError: Time, fuel or burn rate is below zero.
    """
    for name, quantity in state.quantities().items():
        require_unit(quantity, INPUT_UNITS[name], name)
        require_finite(quantity, name)
        if name in NON_NEGATIVE_FIELDS:
            require_non_negative(quantity, name)
