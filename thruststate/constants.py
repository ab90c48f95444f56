"""Shared constants for the thruststate engine.

Centralises conversion factors used by the default conversion table.
"""

from __future__ import annotations

SECONDS_PER_HOUR: float = 3600.0
METERS_PER_KM: float = 1000.0

# Speed conversion: meters per second → kilometers per hour
MPS_TO_KPH: float = 3.6
KPH_TO_MPS: float = 1.0 / MPS_TO_KPH

# Acceleration conversion: m/s^2 → km/h^2 (3.6 km/h per m/s, per second → per hour)
MPS2_TO_KPH2: float = MPS_TO_KPH * SECONDS_PER_HOUR

# Time conversion
S_TO_H: float = 1.0 / SECONDS_PER_HOUR
H_TO_S: float = SECONDS_PER_HOUR

# Length conversion
M_TO_KM: float = 1.0 / METERS_PER_KM
KM_TO_M: float = METERS_PER_KM
