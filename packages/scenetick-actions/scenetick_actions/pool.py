"""ActionPool - reusable action instances keyed by type."""
from __future__ import annotations

import logging
from typing import TypeVar

from scenetick_actions.base import Action

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Action)


class ActionPool:
    """Hands out reset action instances and takes them back when done.

    Every instance leaving the pool is in its freshly constructed state;
    ``free`` resets before storing, so nothing from a previous run survives.
    """

    def __init__(self, max_per_type: int = 16) -> None:
        if max_per_type < 0:
            raise ValueError("max_per_type must be non-negative")
        self._max_per_type = max_per_type
        self._free: dict[type[Action], list[Action]] = {}

    @property
    def max_per_type(self) -> int:
        return self._max_per_type

    def obtain(self, cls: type[A]) -> A:
        """Return an idle instance of ``cls``, constructing one if none is left."""
        idle = self._free.get(cls)
        if idle:
            action = idle.pop()
        else:
            logger.debug("pool miss for %s", cls.__qualname__)
            action = cls()
        action.pool = self
        return action  # type: ignore[return-value]

    def free(self, action: Action) -> None:
        action.reset()
        idle = self._free.setdefault(type(action), [])
        if len(idle) < self._max_per_type and not any(a is action for a in idle):
            idle.append(action)

    def free_count(self, cls: type[Action]) -> int:
        return len(self._free.get(cls, ()))

    def clear(self) -> None:
        self._free.clear()
