"""Actor - a positioned scene node that runs attached actions every frame."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scenetick.stage import Stage
    from scenetick.types import Steppable


class Actor:
    def __init__(self, name: str = "", x: float = 0.0, y: float = 0.0) -> None:
        self.name = name
        self.x = x
        self.y = y
        self.stage: Stage | None = None
        self._actions: list[Steppable] = []

    def __repr__(self) -> str:
        return f"Actor({self.name!r}, x={self.x}, y={self.y})"

    @property
    def actions(self) -> tuple[Steppable, ...]:
        return tuple(self._actions)

    def has_actions(self) -> bool:
        return bool(self._actions)

    def add_action(self, action: Steppable) -> None:
        action.actor = self
        self._actions.append(action)

    def remove_action(self, action: Steppable) -> None:
        try:
            self._actions.remove(action)
        except ValueError:
            return
        _release(action)

    def clear_actions(self) -> None:
        actions, self._actions = self._actions, []
        for action in actions:
            _release(action)

    def act(self, delta: float) -> None:
        # Snapshot: actions added while acting start next frame.
        for action in list(self._actions):
            if action not in self._actions:
                continue
            if action.act(delta) and action in self._actions:
                self._actions.remove(action)
                _release(action)


def _release(action: Steppable) -> None:
    # Pooled actions return themselves to their pool once detached.
    action.actor = None
