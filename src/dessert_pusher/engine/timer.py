"""Dessert timer — counts the seconds the screen spends started.

Runs on START, pauses on STOP.  There is no background thread: elapsed time
is read from the clock whenever it is asked for.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from dessert_pusher.engine.lifecycle import LifecycleEvent

logger = logging.getLogger(__name__)


class DessertTimer:
    """Lifecycle observer accumulating started time.

    Parameters
    ----------
    clock : Callable[[], float]
        Monotonic seconds source; tests pass a fake.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._accumulated = 0.0
        self._started_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def seconds_count(self) -> int:
        """Whole seconds over all started intervals, including the running one."""
        total = self._accumulated
        if self._started_at is not None:
            total += self._clock() - self._started_at
        return int(total)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is None:
            return
        self._accumulated += self._clock() - self._started_at
        self._started_at = None
        logger.info("Timer is at : %d", self.seconds_count)

    def on_lifecycle_event(self, event: LifecycleEvent) -> None:
        if event is LifecycleEvent.START:
            self.start()
        elif event is LifecycleEvent.STOP:
            self.stop()
