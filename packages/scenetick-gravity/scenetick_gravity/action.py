"""GravityAction - falling and bouncing along y without a physics engine."""
from __future__ import annotations

import logging
import math

from scenetick import InvalidParameterError

from scenetick_actions import Action

logger = logging.getLogger(__name__)

DEFAULT_GRAVITY = 3000.0
MAX_BOUNCES = 20

# One initial fall plus a rise/fall pair per bounce.
_MAX_SEGMENTS = 1 + 2 * MAX_BOUNCES


def time_to_fall(distance: float, gravity: float) -> float:
    """Seconds to fall ``distance`` from rest under ``gravity``."""
    return math.sqrt(2 * distance / gravity)


def fall_distance(time: float, gravity: float) -> float:
    """Distance fallen from rest after ``time`` seconds under ``gravity``."""
    return 0.5 * gravity * time * time


class GravityAction(Action):
    """Drops the actor from ``from_y`` to ``to_y`` and bounces it in place.

    y grows in the direction of the fall, so ``from_y <= to_y``. Each bounce
    reaches ``bounciness`` times the height of the previous one. The whole
    trajectory is precomputed by ``init`` as a table of segments: segment 0
    is the initial fall, then every bounce adds a rise (odd index) and a
    fall (even index) of equal duration. Position is then a pure function
    of elapsed time, so the action keeps no velocity state.

    Instances are poolable: ``reset`` restores the defaults and ``init``
    recomputes everything, so nothing from a previous run survives.
    """

    def __init__(self) -> None:
        super().__init__()
        self.reset()

    def init(
        self,
        gravity: float,
        from_y: float,
        to_y: float,
        bounces: int,
        bounciness: float,
    ) -> GravityAction:
        """Validate the parameters and rebuild the segment table.

        Raises ``InvalidParameterError`` before touching any state.
        """
        # Preconditions are written positively so NaN fails them.
        if not gravity > 0:
            raise InvalidParameterError("gravity", gravity, "gravity must be positive")
        if not from_y <= to_y:
            raise InvalidParameterError("from_y", from_y, "from_y cannot be > to_y")
        if not 0 <= bounces <= MAX_BOUNCES:
            raise InvalidParameterError(
                "bounces", bounces, f"bounces should be between 0 and {MAX_BOUNCES}"
            )
        if bounces != int(bounces):
            raise InvalidParameterError("bounces", bounces, "bounces must be a whole number")
        if not 0 <= bounciness <= 1:
            raise InvalidParameterError(
                "bounciness", bounciness, "bounciness should be between 0 and 1"
            )
        bounces = int(bounces)

        segments = 1 + 2 * bounces
        durations = [0.0] * _MAX_SEGMENTS
        heights = [0.0] * _MAX_SEGMENTS
        cumulative = [0.0] * _MAX_SEGMENTS

        distance = to_y - from_y
        heights[0] = from_y
        durations[0] = time_to_fall(distance, gravity)
        for i in range(1, segments, 2):
            distance *= bounciness
            heights[i] = heights[i + 1] = to_y - distance
            durations[i] = durations[i + 1] = time_to_fall(distance, gravity)

        total = 0.0
        for i in range(segments):
            total += durations[i]
            cumulative[i] = total

        self._gravity = gravity
        self._from_y = from_y
        self._to_y = to_y
        self._bounces = bounces
        self._bounciness = bounciness
        self._segments = segments
        self._durations = durations
        self._heights = heights
        self._cumulative = cumulative
        self._duration = total
        self._elapsed = 0.0

        logger.debug(
            "gravity action: %d segments over %.4fs (g=%s, %s -> %s)",
            segments, total, gravity, from_y, to_y,
        )
        return self

    # -- Read-only views --

    @property
    def gravity(self) -> float:
        return self._gravity

    @property
    def from_y(self) -> float:
        return self._from_y

    @property
    def to_y(self) -> float:
        return self._to_y

    @property
    def bounces(self) -> int:
        return self._bounces

    @property
    def bounciness(self) -> float:
        return self._bounciness

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def segment_count(self) -> int:
        return self._segments

    @property
    def segment_durations(self) -> tuple[float, ...]:
        return tuple(self._durations[: self._segments])

    @property
    def cumulative_durations(self) -> tuple[float, ...]:
        return tuple(self._cumulative[: self._segments])

    @property
    def segment_heights(self) -> tuple[float, ...]:
        return tuple(self._heights[: self._segments])

    @property
    def finished(self) -> bool:
        return self._elapsed >= self._duration

    def total_duration(self) -> float:
        return self._duration

    # -- Evaluation --

    def y_at(self, elapsed: float) -> float:
        """The y-coordinate ``elapsed`` seconds after the action started."""
        if elapsed >= self._duration:
            return self._to_y
        i = self._segment_index(elapsed)
        if i % 2 != 0:
            # Rising: mirror of the fall that ends at this segment's apex.
            t = self._cumulative[i] - elapsed
        elif i > 0:
            t = elapsed - self._cumulative[i - 1]
        else:
            t = elapsed
        return self._heights[i] + fall_distance(t, self._gravity)

    def _segment_index(self, elapsed: float) -> int:
        for i in range(self._segments):
            if elapsed < self._cumulative[i]:
                return i
        return self._segments - 1

    def step(self, delta: float) -> tuple[float, bool]:
        """Advance by ``delta`` seconds. Returns ``(y, finished)``."""
        if not delta >= 0:
            raise ValueError("delta must be non-negative")
        self._elapsed += delta
        return self.y_at(self._elapsed), self._elapsed >= self._duration

    def act(self, delta: float) -> bool:
        y, finished = self.step(delta)
        if self.actor is not None:
            self.actor.y = y
        return finished

    def restart(self) -> None:
        self._elapsed = 0.0

    def reset(self) -> None:
        super().reset()
        self._gravity = DEFAULT_GRAVITY
        self._from_y = 0.0
        self._to_y = 0.0
        self._bounces = 0
        self._bounciness = 0.0
        self._segments = 1
        self._durations = [0.0] * _MAX_SEGMENTS
        self._heights = [0.0] * _MAX_SEGMENTS
        self._cumulative = [0.0] * _MAX_SEGMENTS
        self._duration = 0.0
        self._elapsed = 0.0
