"""Stage configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StageConfig:
    """Immutable configuration for a stage.

    Attributes:
        fps: Frames per second used by ``Stage.step()``.
        time_scale: Multiplier applied to every frame delta before actors
            and deferred calls see it. 0 pauses the scene.
    """

    fps: int = 60
    time_scale: float = 1.0
