"""Single-step state transition under constant acceleration and fuel burn.

Velocity and distance are combined on a km/h basis, so acceleration is
converted to km/h^2 and elapsed time to hours first.  Fuel is the exception:
the burn rate is in kg/s, so it is multiplied by the elapsed time in seconds,
not the converted hours.  :func:`validate_input_state` guarantees both of
those units before any arithmetic runs.
"""

from __future__ import annotations

import logging
import math

from thruststate.converter import UnitConverter, default_converter
from thruststate.errors import DepletedResourceError, NonFiniteQuantityError
from thruststate.quantity import Quantity, UnitTag
from thruststate.state import State, validate_input_state

logger = logging.getLogger(__name__)

# Burning "all" the fuel can overshoot zero by float rounding (0.1 * 3 > 0.3).
FUEL_REL_TOL = 1e-12


def _check_fuel(fuel_kg: float, burn_rate_kgps: float, time_s: float) -> float:
    """Return remaining fuel, raising when it would go negative."""
    required = burn_rate_kgps * time_s
    remaining = fuel_kg - required
    if remaining < 0 and math.isclose(fuel_kg, required, rel_tol=FUEL_REL_TOL):
        remaining = 0.0
    if remaining < 0:
        achievable_s = max(fuel_kg, 0.0) / burn_rate_kgps if burn_rate_kgps > 0 else math.inf
        raise DepletedResourceError("fuel", fuel_kg, required, achievable_s)
    return remaining


def _require_finite_result(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise NonFiniteQuantityError(name, value)
    return value


def apply(state: State, converter: UnitConverter) -> State:
    """Advance *state* by its elapsed time and return the new State.

    Args:
        state: Input state; see :data:`thruststate.state.INPUT_UNITS` for the
            unit each field must carry.
        converter: Supplies the ``m/s^2 -> km/h^2`` and ``s -> h`` factors.

    Returns:
        A new State with velocity in km/h, distance in km and fuel in kg.
        Acceleration, time and fuel burn rate are passed through unchanged.

    Raises:
        ThrustStateError: Any unit, conversion, finiteness or fuel-depletion
            failure.  No partial state is returned.
    """
    validate_input_state(state)

    acc = converter.convert(state.acceleration, UnitTag.M_PER_S2, UnitTag.KM_PER_H2)
    time_h = converter.convert(state.time, UnitTag.SECOND, UnitTag.HOUR)

    distance = state.distance.value + state.velocity.value * time_h.value
    velocity = state.velocity.value + acc.value * time_h.value
    fuel = _check_fuel(state.fuel.value, state.fuel_burn_rate.value, state.time.value)

    new_state = State(
        velocity=Quantity(_require_finite_result("velocity", velocity), UnitTag.KM_PER_H),
        acceleration=state.acceleration,
        time=state.time,
        distance=Quantity(_require_finite_result("distance", distance), UnitTag.KM),
        fuel=Quantity(_require_finite_result("fuel", fuel), UnitTag.KG),
        fuel_burn_rate=state.fuel_burn_rate,
    )
    logger.debug(
        "Transition over %s: velocity %s -> %s, distance %s -> %s, fuel %s -> %s",
        state.time,
        state.velocity,
        new_state.velocity,
        state.distance,
        new_state.distance,
        state.fuel,
        new_state.fuel,
    )
    return new_state


def calculate_new_state(initial_state: State, converter: UnitConverter | None = None) -> State:
    """Public entry point: apply one transition with the default converter."""
    if converter is None:
        converter = default_converter()
    return apply(initial_state, converter)
