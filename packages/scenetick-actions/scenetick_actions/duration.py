"""Duration aggregation over nested action compositions.

Pure functions; the action tree is only read, never mutated.
"""
from __future__ import annotations

from typing import Any, Iterable

from scenetick_actions.base import FiniteDuration
from scenetick_actions.composite import Delay, Delegate, Forever, Parallel, Sequence
from scenetick_actions.temporal import Temporal


def action_duration(action: Any) -> float:
    """Total seconds ``action`` takes from start to completion.

    Dispatch order is significant: an action exposing an explicit derived
    duration is answered from it even when it is also ``Temporal``. Actions
    whose duration is infinite or unknown count as 0.
    """
    if isinstance(action, FiniteDuration):
        return action.total_duration()
    if isinstance(action, Temporal):
        return action.duration
    if isinstance(action, Forever):
        return 0.0
    # Delay is a Delegate, so it must be matched first.
    if isinstance(action, Delay):
        return action.duration + action_duration(action.action)
    if isinstance(action, Delegate):
        return action_duration(action.action)
    # Sequence is a Parallel, so it must be matched first.
    if isinstance(action, Sequence):
        return sum(action_duration(a) for a in action.actions)
    if isinstance(action, Parallel):
        return max_duration(action.actions)
    return 0.0


def max_duration(actions: Iterable[Any]) -> float:
    """Longest ``action_duration`` among ``actions``, 0 for none."""
    return max((action_duration(a) for a in actions), default=0.0)
