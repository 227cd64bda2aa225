"""Action base class and the explicit-duration capability."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scenetick import Actor

    from scenetick_actions.pool import ActionPool


class Action:
    """Unit of per-frame work run by an actor.

    Setting ``actor`` to None on a pooled action hands it back to its pool,
    which resets it.
    """

    def __init__(self) -> None:
        self._actor: Actor | None = None
        self.pool: ActionPool | None = None

    @property
    def actor(self) -> Actor | None:
        return self._actor

    @actor.setter
    def actor(self, actor: Actor | None) -> None:
        self._set_actor(actor)

    def _set_actor(self, actor: Actor | None) -> None:
        self._actor = actor
        if actor is None and self.pool is not None:
            pool, self.pool = self.pool, None
            pool.free(self)

    def act(self, delta: float) -> bool:
        """Advance by ``delta`` seconds. Returns True once complete."""
        raise NotImplementedError

    def restart(self) -> None:
        """Rewind so the action can run again from the beginning."""

    def reset(self) -> None:
        """Drop every reference and return to the freshly constructed state."""
        self._actor = None
        self.pool = None
        self.restart()


@runtime_checkable
class FiniteDuration(Protocol):
    """Actions that derive their own total duration from their parameters.

    Unlike ``Temporal`` actions, the duration is never given by the caller.
    """

    def total_duration(self) -> float: ...
