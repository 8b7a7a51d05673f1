"""Drone control configuration constants."""

from __future__ import annotations
from typing import Final, Optional

# --- Movement mapping ---
# Orientation (radians) inside [-DEAD_ZONE, DEAD_ZONE] only resets the axis.
DEAD_ZONE: Final[float] = 0.5

# --- Take-off / landing transitions ---
# None waits for the drone indefinitely.
TRANSITION_TIMEOUT_SECONDS: Final[Optional[float]] = None
RECOVER_ON_FAILURE: Final[bool] = False

# --- Drone velocity scaling factors ---
VELOCITY_FACTOR_X: Final[float] = 0.3
VELOCITY_FACTOR_Z: Final[float] = 0.3
VELOCITY_FACTOR_YAW: Final[float] = 0.5
