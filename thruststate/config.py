"""Application settings via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from thruststate.state import SEED_VALUES, State

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """thruststate configuration.

    Values are loaded from ``THRUSTSTATE_*`` environment variables, falling
    back to a ``.env`` file in the working directory.  The defaults are the
    seed scenario.
    """

    model_config = SettingsConfigDict(
        env_prefix="THRUSTSTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Initial state, in canonical input units
    velocity_kmh: float = SEED_VALUES["velocity_kmh"]
    acceleration_mps2: float = SEED_VALUES["acceleration_mps2"]
    time_s: float = SEED_VALUES["time_s"]
    distance_km: float = SEED_VALUES["distance_km"]
    fuel_kg: float = SEED_VALUES["fuel_kg"]
    fuel_burn_rate_kgps: float = SEED_VALUES["fuel_burn_rate_kgps"]

    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def initial_state(self) -> State:
        return State.from_values(
            velocity_kmh=self.velocity_kmh,
            acceleration_mps2=self.acceleration_mps2,
            time_s=self.time_s,
            distance_km=self.distance_km,
            fuel_kg=self.fuel_kg,
            fuel_burn_rate_kgps=self.fuel_burn_rate_kgps,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
