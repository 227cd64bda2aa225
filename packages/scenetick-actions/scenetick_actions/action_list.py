"""ActionList - batches unrelated actions behind one completion callback."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from scenetick_actions.duration import max_duration

if TYPE_CHECKING:
    from scenetick import Actor, Stage

logger = logging.getLogger(__name__)


class ActionList:
    """Accumulates pending (action, actor) pairs for one stage.

    ``process`` starts every pending action on its actor and asks the stage
    for a single callback once the slowest of them has finished.
    """

    def __init__(self, stage: Stage) -> None:
        self._stage = stage
        self._pending: list[tuple[Any, Actor]] = []

    @property
    def stage(self) -> Stage:
        return self._stage

    def count(self) -> int:
        return len(self._pending)

    def get(self, index: int) -> Any:
        return self._pending[index][0]

    def actor_at(self, index: int) -> Actor:
        return self._pending[index][1]

    def add(self, action: Any, actor: Actor | None = None) -> None:
        """Queue ``action`` for ``actor``, defaulting to the action's own actor."""
        if action is None:
            raise ValueError("action must not be None")
        if actor is None:
            actor = getattr(action, "actor", None)
        if actor is None:
            raise ValueError(
                f"No target actor for {type(action).__qualname__}"
            )
        self._pending.append((action, actor))

    def clear(self) -> None:
        self._pending.clear()

    def max_duration(self) -> float:
        return max_duration(action for action, _ in self._pending)

    def process(self, on_complete: Callable[[], None], extra_delay: float = 0.0) -> float:
        """Start every pending action, clear the list, schedule ``on_complete``.

        Returns the delay handed to the stage. A negative total delay raises
        ``ValueError`` with the batch and its actors left as they were.
        """
        delay = self.max_duration() + extra_delay
        if not delay >= 0:
            raise ValueError("delay must be non-negative")
        pending, self._pending = self._pending, []
        for action, actor in pending:
            actor.add_action(action)
        logger.debug(
            "processed %d pending actions, completion in %.4fs", len(pending), delay
        )
        self._stage.schedule(delay, on_complete)
        return delay
