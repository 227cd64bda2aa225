"""Stage - owns actors, drives the frame loop and deferred callbacks."""

from __future__ import annotations

from typing import Callable

from scenetick.actor import Actor
from scenetick.clock import Clock
from scenetick.config import StageConfig
from scenetick.timers import DeferredCall, TimerQueue
from scenetick.types import FrameHook


class Stage:
    def __init__(self, config: StageConfig | None = None) -> None:
        if config is None:
            config = StageConfig()
        if config.time_scale < 0:
            raise ValueError("time_scale must be non-negative")
        self._config = config
        self._clock = Clock(config.fps)
        self._timers = TimerQueue()
        self._actors: list[Actor] = []
        self._frame_hooks: list[FrameHook] = []

    @property
    def config(self) -> StageConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def timers(self) -> TimerQueue:
        return self._timers

    @property
    def actors(self) -> tuple[Actor, ...]:
        return tuple(self._actors)

    def add_actor(self, actor: Actor) -> None:
        if actor.stage is not None and actor.stage is not self:
            actor.stage.remove_actor(actor)
        if actor not in self._actors:
            self._actors.append(actor)
        actor.stage = self

    def remove_actor(self, actor: Actor) -> None:
        """Stop acting on ``actor``. Its running actions are left in place."""
        try:
            self._actors.remove(actor)
        except ValueError:
            return
        actor.stage = None

    def schedule(self, delay: float, callback: Callable[[], None]) -> DeferredCall:
        """Call ``callback`` once after ``delay`` seconds of scene time."""
        return self._timers.schedule(delay, callback)

    def on_frame(self, hook: FrameHook) -> None:
        self._frame_hooks.append(hook)

    def act(self, delta: float) -> None:
        delta *= self._config.time_scale
        self._clock.advance(delta)
        for actor in list(self._actors):
            if actor.stage is self:
                actor.act(delta)
        self._timers.advance(delta)
        ctx = self._clock.context()
        for hook in self._frame_hooks:
            hook(self, ctx)

    def step(self) -> None:
        self.act(self._clock.dt)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
