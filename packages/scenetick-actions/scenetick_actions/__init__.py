"""scenetick-actions - Composable timed actions and duration aggregation."""
from __future__ import annotations

from scenetick_actions.action_list import ActionList
from scenetick_actions.base import Action, FiniteDuration
from scenetick_actions.composite import Delay, Delegate, Forever, Parallel, Run, Sequence
from scenetick_actions.duration import action_duration, max_duration
from scenetick_actions.easing import EASINGS
from scenetick_actions.factories import (
    default_pool,
    delay,
    forever,
    move_to_y,
    parallel,
    run,
    sequence,
)
from scenetick_actions.pool import ActionPool
from scenetick_actions.temporal import MoveToY, Temporal

__all__ = [
    "Action",
    "FiniteDuration",
    "Temporal",
    "MoveToY",
    "Delegate",
    "Delay",
    "Forever",
    "Sequence",
    "Parallel",
    "Run",
    "EASINGS",
    "ActionPool",
    "default_pool",
    "delay",
    "sequence",
    "parallel",
    "forever",
    "run",
    "move_to_y",
    "action_duration",
    "max_duration",
    "ActionList",
]
