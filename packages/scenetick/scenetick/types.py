"""Shared types, protocols and errors for the scenetick host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float


class InvalidParameterError(ValueError):
    """Raised when an action is initialized with out-of-range parameters."""

    def __init__(self, parameter: str, value: Any, message: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(message)


@runtime_checkable
class Steppable(Protocol):
    """Anything an actor can run once per frame.

    ``act(delta)`` returns True once the work is complete.
    """

    actor: Any

    def act(self, delta: float) -> bool: ...


if TYPE_CHECKING:
    from scenetick.stage import Stage

FrameHook = Callable[["Stage", FrameContext], None]
