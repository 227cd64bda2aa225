"""scenetick - A frame-stepped stage for 2D actors and their actions."""

from scenetick.actor import Actor
from scenetick.clock import Clock
from scenetick.config import StageConfig
from scenetick.stage import Stage
from scenetick.timers import DeferredCall, TimerQueue
from scenetick.types import FrameContext, InvalidParameterError, Steppable

__all__ = [
    "Stage",
    "StageConfig",
    "Actor",
    "Clock",
    "FrameContext",
    "TimerQueue",
    "DeferredCall",
    "InvalidParameterError",
    "Steppable",
]
