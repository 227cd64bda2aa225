"""Composite and wrapper actions: Delegate, Delay, Forever, Sequence, Parallel, Run."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from scenetick_actions.base import Action

if TYPE_CHECKING:
    from scenetick import Actor


# --- Wrappers ---


class Delegate(Action):
    """Wraps a single action and forwards every frame to it."""

    def __init__(self, action: Action | None = None) -> None:
        super().__init__()
        self.action = action

    def _set_actor(self, actor: Actor | None) -> None:
        if self.action is not None:
            self.action.actor = actor
        super()._set_actor(actor)

    def act(self, delta: float) -> bool:
        if self.action is None:
            return True
        return self.action.act(delta)

    def restart(self) -> None:
        if self.action is not None:
            self.action.restart()

    def reset(self) -> None:
        super().reset()
        self.action = None


class Delay(Delegate):
    """Waits ``duration`` seconds, then runs the wrapped action (if any).

    Time left over on the frame the delay expires is passed on to the
    wrapped action.
    """

    def __init__(self, duration: float = 0.0, action: Action | None = None) -> None:
        super().__init__(action)
        self.duration = duration
        self.time = 0.0

    def act(self, delta: float) -> bool:
        if self.time < self.duration:
            self.time += delta
            if self.time < self.duration:
                return False
            delta = self.time - self.duration
        if self.action is None:
            return True
        return self.action.act(delta)

    def restart(self) -> None:
        super().restart()
        self.time = 0.0

    def reset(self) -> None:
        super().reset()
        self.duration = 0.0


class Forever(Delegate):
    """Restarts the wrapped action each time it completes. Never completes."""

    def act(self, delta: float) -> bool:
        if self.action is None:
            return True
        if self.action.act(delta):
            self.action.restart()
        return False


# --- Composites ---


class Parallel(Action):
    """Runs every child each frame; complete once all children are."""

    def __init__(self, *actions: Action) -> None:
        super().__init__()
        self.actions: list[Action] = []
        self._done: set[int] = set()
        for action in actions:
            self.add(action)

    def add(self, action: Action) -> None:
        self.actions.append(action)
        if self.actor is not None:
            action.actor = self.actor

    def _set_actor(self, actor: Actor | None) -> None:
        for action in self.actions:
            action.actor = actor
        super()._set_actor(actor)

    def act(self, delta: float) -> bool:
        for i, action in enumerate(list(self.actions)):
            if i in self._done:
                continue
            if action.act(delta):
                self._done.add(i)
        return len(self._done) == len(self.actions)

    def restart(self) -> None:
        self._done.clear()
        for action in self.actions:
            action.restart()

    def reset(self) -> None:
        super().reset()
        self.actions.clear()


class Sequence(Parallel):
    """Runs children one after another, moving on the frame after each completes."""

    def __init__(self, *actions: Action) -> None:
        self.index = 0
        super().__init__(*actions)

    def act(self, delta: float) -> bool:
        if self.index >= len(self.actions):
            return True
        if self.actions[self.index].act(delta):
            self.index += 1
        return self.index >= len(self.actions)

    def restart(self) -> None:
        super().restart()
        self.index = 0


# --- Instant ---


class Run(Action):
    """Calls ``callback()`` once on its first frame."""

    def __init__(self, callback: Callable[[], None] | None = None) -> None:
        super().__init__()
        self.callback = callback
        self.ran = False

    def act(self, delta: float) -> bool:
        if not self.ran:
            self.ran = True
            if self.callback is not None:
                self.callback()
        return True

    def restart(self) -> None:
        self.ran = False

    def reset(self) -> None:
        super().reset()
        self.callback = None
