"""scenetick-gravity - Precomputed falling-and-bouncing motion for actors."""
from __future__ import annotations

from scenetick_gravity.action import (
    DEFAULT_GRAVITY,
    MAX_BOUNCES,
    GravityAction,
    fall_distance,
    time_to_fall,
)
from scenetick_gravity.factories import gravity

__all__ = [
    "GravityAction",
    "gravity",
    "time_to_fall",
    "fall_distance",
    "DEFAULT_GRAVITY",
    "MAX_BOUNCES",
]
