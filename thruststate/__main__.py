"""Command-line entry point: compute one transition and print the result."""

from __future__ import annotations

import argparse
import logging
import sys

from thruststate.config import LOG_LEVELS, Settings, get_settings
from thruststate.errors import ThrustStateError
from thruststate.report import format_error, format_state
from thruststate.transition import calculate_new_state

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thruststate",
        description="Compute velocity, distance and remaining fuel after one burn.",
    )
    parser.add_argument("--velocity", type=float, default=settings.velocity_kmh, help="km/h")
    parser.add_argument(
        "--acceleration", type=float, default=settings.acceleration_mps2, help="m/s^2"
    )
    parser.add_argument("--time", type=float, default=settings.time_s, help="s")
    parser.add_argument("--distance", type=float, default=settings.distance_km, help="km")
    parser.add_argument("--fuel", type=float, default=settings.fuel_kg, help="kg")
    parser.add_argument(
        "--fuel-burn-rate", type=float, default=settings.fuel_burn_rate_kgps, help="kg/s"
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level
    )
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level)

    run_settings = settings.model_copy(
        update={
            "velocity_kmh": args.velocity,
            "acceleration_mps2": args.acceleration,
            "time_s": args.time,
            "distance_km": args.distance,
            "fuel_kg": args.fuel,
            "fuel_burn_rate_kgps": args.fuel_burn_rate,
            "log_level": args.log_level,
        }
    )
    try:
        new_state = calculate_new_state(run_settings.initial_state())
    except ThrustStateError as exc:
        logger.warning("Transition failed: %s", exc)
        print(format_error(exc), file=sys.stderr)
        return 1

    for line in format_state(new_state):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
