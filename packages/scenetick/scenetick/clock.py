"""Clock and FrameContext for the frame-stepped stage."""

from scenetick.types import FrameContext


class Clock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._elapsed = 0.0
        self._last_delta = 0.0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        """Scene seconds accumulated across every advance."""
        return self._elapsed

    def advance(self, delta: float) -> int:
        if not delta >= 0:
            raise ValueError("delta must be non-negative")
        self._frame_number += 1
        self._elapsed += delta
        self._last_delta = delta
        return self._frame_number

    def context(self) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._last_delta,
            elapsed=self._elapsed,
        )

    def reset(self) -> None:
        self._frame_number = 0
        self._elapsed = 0.0
        self._last_delta = 0.0
