"""Shared test fixtures for thruststate tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from thruststate.converter import UnitConverter
from thruststate.state import SEED_VALUES, State, seed_state

# Type alias for the state_factory fixture
StateFactory = Callable[..., State]


@pytest.fixture
def converter() -> UnitConverter:
    return UnitConverter()


@pytest.fixture
def seed() -> State:
    return seed_state()


@pytest.fixture
def state_factory() -> StateFactory:
    """Return a factory building States from seed values with overrides."""

    def _factory(**overrides: float) -> State:
        values = dict(SEED_VALUES)
        values.update(overrides)
        return State.from_values(**values)

    return _factory
