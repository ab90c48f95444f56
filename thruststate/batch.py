"""Vectorised transitions over many independent states.

Every state must carry the canonical input units, so the two conversion
factors are looked up once and applied to whole arrays.  The result matches
calling :func:`thruststate.transition.apply` on each state in turn.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from thruststate.converter import UnitConverter
from thruststate.errors import DepletedResourceError, NonFiniteQuantityError
from thruststate.quantity import Quantity, UnitTag
from thruststate.state import State, validate_input_state
from thruststate.transition import FUEL_REL_TOL

logger = logging.getLogger(__name__)


def _column(states: Sequence[State], name: str) -> np.ndarray:
    return np.array([getattr(s, name).value for s in states], dtype=np.float64)


def apply_batch(states: Sequence[State], converter: UnitConverter) -> list[State]:
    """Apply one transition to each state in *states*.

    Raises:
        ThrustStateError: The first failure found.  Validation errors are
            raised before any arithmetic; a depleted state is reported by
            index and no results are returned.
    """
    if not states:
        return []

    for state in states:
        validate_input_state(state)

    acc_factor = converter.factor(UnitTag.M_PER_S2, UnitTag.KM_PER_H2)
    time_factor = converter.factor(UnitTag.SECOND, UnitTag.HOUR)

    velocity = _column(states, "velocity")
    acceleration = _column(states, "acceleration")
    time_s = _column(states, "time")
    distance = _column(states, "distance")
    fuel = _column(states, "fuel")
    burn_rate = _column(states, "fuel_burn_rate")

    time_h = time_s * time_factor
    new_distance = distance + velocity * time_h
    new_velocity = velocity + (acceleration * acc_factor) * time_h
    required = burn_rate * time_s
    new_fuel = fuel - required
    exhausted = (new_fuel < 0) & np.isclose(fuel, required, rtol=FUEL_REL_TOL, atol=0.0)
    new_fuel[exhausted] = 0.0

    depleted = np.flatnonzero(new_fuel < 0)
    if depleted.size:
        i = int(depleted[0])
        achievable_s = (
            max(float(fuel[i]), 0.0) / float(burn_rate[i]) if burn_rate[i] > 0 else float("inf")
        )
        logger.debug("Batch state %d of %d depletes fuel", i, len(states))
        raise DepletedResourceError(f"fuel (state {i})", float(fuel[i]), float(required[i]), achievable_s)

    for name, values in (
        ("velocity", new_velocity),
        ("distance", new_distance),
        ("fuel", new_fuel),
    ):
        bad = np.flatnonzero(~np.isfinite(values))
        if bad.size:
            i = int(bad[0])
            raise NonFiniteQuantityError(f"{name} (state {i})", float(values[i]))

    logger.debug("Applied batch transition to %d states", len(states))
    return [
        State(
            velocity=Quantity(float(new_velocity[i]), UnitTag.KM_PER_H),
            acceleration=state.acceleration,
            time=state.time,
            distance=Quantity(float(new_distance[i]), UnitTag.KM),
            fuel=Quantity(float(new_fuel[i]), UnitTag.KG),
            fuel_burn_rate=state.fuel_burn_rate,
        )
        for i, state in enumerate(states)
    ]
