"""Plain-text formatting of transition results."""

from __future__ import annotations

from thruststate.state import State


def format_state(state: State) -> list[str]:
    """Return the report lines for a computed state."""
    return [
        f"New Velocity: {state.velocity}",
        f"New Distance: {state.distance}",
        f"Remaining Fuel: {state.fuel}",
    ]


def format_error(exc: Exception) -> str:
    return f"Error: {exc}"
