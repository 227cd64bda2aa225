"""Pooled construction of gravity actions."""
from __future__ import annotations

from scenetick_actions import ActionPool, default_pool

from scenetick_gravity.action import GravityAction


def gravity(
    gravity: float,
    from_y: float,
    to_y: float,
    bounces: int,
    bounciness: float,
    pool: ActionPool | None = None,
) -> GravityAction:
    """Obtain a ``GravityAction`` from ``pool`` and initialize it.

    Args:
        gravity: The gravity coefficient (must be positive).
        from_y: The initial y-coordinate (cannot be greater than ``to_y``).
        to_y: The resting y-coordinate.
        bounces: Bounces after first reaching ``to_y`` (0 to 20 inclusive).
        bounciness: Factor applied to the previous bounce height (or the
            initial drop for the first bounce), between 0 and 1.

    Raises:
        InvalidParameterError: if any parameter is out of range. The
            obtained instance goes back to the pool first.
    """
    pool = pool or default_pool
    action = pool.obtain(GravityAction)
    try:
        return action.init(gravity, from_y, to_y, bounces, bounciness)
    except ValueError:
        action.pool = None
        pool.free(action)
        raise
