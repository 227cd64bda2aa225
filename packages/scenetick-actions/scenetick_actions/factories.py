"""Helpers that obtain pooled actions and initialize them in one call."""
from __future__ import annotations

from typing import Callable

from scenetick_actions.base import Action
from scenetick_actions.composite import Delay, Forever, Parallel, Run, Sequence
from scenetick_actions.easing import EASINGS
from scenetick_actions.pool import ActionPool
from scenetick_actions.temporal import MoveToY

default_pool = ActionPool()


def delay(
    duration: float, action: Action | None = None, pool: ActionPool | None = None
) -> Delay:
    d = (pool or default_pool).obtain(Delay)
    d.duration = duration
    d.action = action
    return d


def sequence(*actions: Action, pool: ActionPool | None = None) -> Sequence:
    s = (pool or default_pool).obtain(Sequence)
    for action in actions:
        s.add(action)
    return s


def parallel(*actions: Action, pool: ActionPool | None = None) -> Parallel:
    p = (pool or default_pool).obtain(Parallel)
    for action in actions:
        p.add(action)
    return p


def forever(action: Action, pool: ActionPool | None = None) -> Forever:
    f = (pool or default_pool).obtain(Forever)
    f.action = action
    return f


def run(callback: Callable[[], None], pool: ActionPool | None = None) -> Run:
    r = (pool or default_pool).obtain(Run)
    r.callback = callback
    return r


def move_to_y(
    y: float,
    duration: float,
    easing: str = "linear",
    pool: ActionPool | None = None,
) -> MoveToY:
    if duration < 0:
        raise ValueError("duration must be non-negative")
    if easing not in EASINGS:
        raise ValueError(f"Unknown easing {easing!r}")
    m = (pool or default_pool).obtain(MoveToY)
    m.y = y
    m.duration = duration
    m.easing = easing
    return m
