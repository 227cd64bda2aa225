"""Temporal actions - interpolation over a caller-given duration."""
from __future__ import annotations

from scenetick_actions.base import Action
from scenetick_actions.easing import EASINGS


class Temporal(Action):
    """Runs ``update(percent)`` every frame until ``duration`` seconds pass.

    ``percent`` is the eased progress in [0, 1]. A zero duration completes
    on the first ``act``.
    """

    def __init__(self, duration: float = 0.0, easing: str = "linear") -> None:
        super().__init__()
        if duration < 0:
            raise ValueError("duration must be non-negative")
        if easing not in EASINGS:
            raise ValueError(f"Unknown easing {easing!r}")
        self.duration = duration
        self.easing = easing
        self.elapsed = 0.0
        self.began = False
        self.complete = False

    def act(self, delta: float) -> bool:
        if self.complete:
            return True
        if not self.began:
            self.begin()
            self.began = True
        self.elapsed += delta
        self.complete = self.elapsed >= self.duration
        t = 1.0 if self.complete else min(self.elapsed / self.duration, 1.0)
        self.update(EASINGS[self.easing](t))
        if self.complete:
            self.end()
        return self.complete

    def begin(self) -> None:
        pass

    def update(self, percent: float) -> None:
        pass

    def end(self) -> None:
        pass

    def restart(self) -> None:
        self.elapsed = 0.0
        self.began = False
        self.complete = False

    def reset(self) -> None:
        super().reset()
        self.duration = 0.0
        self.easing = "linear"


class MoveToY(Temporal):
    """Moves the actor's y from wherever it is at begin to ``y``."""

    def __init__(
        self, y: float = 0.0, duration: float = 0.0, easing: str = "linear"
    ) -> None:
        super().__init__(duration, easing)
        self.y = y
        self.start_y = 0.0

    def begin(self) -> None:
        if self.actor is not None:
            self.start_y = self.actor.y

    def update(self, percent: float) -> None:
        if self.actor is not None:
            self.actor.y = self.start_y + (self.y - self.start_y) * percent

    def reset(self) -> None:
        super().reset()
        self.y = 0.0
        self.start_y = 0.0
