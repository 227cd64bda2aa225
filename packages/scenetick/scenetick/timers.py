"""TimerQueue - fire-once deferred callbacks measured in scene seconds."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class DeferredCall:
    """One-shot countdown. Fires when remaining reaches 0, then is dropped."""

    remaining: float
    callback: Callable[[], None]
    fired: bool = False


class TimerQueue:
    """Owns the pending deferred calls of one stage."""

    def __init__(self) -> None:
        self._calls: list[DeferredCall] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> DeferredCall:
        if not delay >= 0:
            raise ValueError("delay must be non-negative")
        call = DeferredCall(remaining=delay, callback=callback)
        self._calls.append(call)
        logger.debug("scheduled deferred call in %.4fs", delay)
        return call

    def cancel(self, call: DeferredCall) -> None:
        try:
            self._calls.remove(call)
        except ValueError:
            pass

    def pending(self) -> int:
        return len(self._calls)

    def clear(self) -> None:
        self._calls.clear()

    def advance(self, delta: float) -> None:
        """Count every pending call down by ``delta`` and fire the expired ones.

        Calls scheduled from inside a callback start counting on the next
        advance.
        """
        due: list[DeferredCall] = []
        for call in list(self._calls):
            call.remaining -= delta
            if call.remaining <= 0:
                self._calls.remove(call)
                due.append(call)
        for call in due:
            call.fired = True
            logger.debug("firing deferred call (overshoot %.4fs)", -call.remaining)
            call.callback()
