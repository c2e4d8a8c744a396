"""Screen lifecycle — explicit notifications from the host to observers.

The host calls :meth:`Lifecycle.dispatch` at each transition; observers
registered with :meth:`Lifecycle.add_observer` receive the event in
registration order.  Nothing here touches session state.

State machine (``SAVE_STATE`` does not move it)::

  INITIALIZED ─CREATE→ CREATED ─START→ STARTED ─RESUME→ RESUMED
                         ▲  ▲            │   ▲             │
                         │  └───STOP─────┘   └───PAUSE─────┘
                    RESTART
  any ─DESTROY→ DESTROYED   (terminal)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from dessert_pusher.exceptions import LifecycleError

logger = logging.getLogger(__name__)


class LifecycleEvent(str, Enum):
    CREATE = "create"
    START = "start"
    RESUME = "resume"
    PAUSE = "pause"
    STOP = "stop"
    RESTART = "restart"
    DESTROY = "destroy"
    SAVE_STATE = "save_state"


class LifecycleState(str, Enum):
    INITIALIZED = "initialized"
    CREATED = "created"
    STARTED = "started"
    RESUMED = "resumed"
    DESTROYED = "destroyed"


_NEXT_STATE: dict[LifecycleEvent, LifecycleState] = {
    LifecycleEvent.CREATE: LifecycleState.CREATED,
    LifecycleEvent.START: LifecycleState.STARTED,
    LifecycleEvent.RESUME: LifecycleState.RESUMED,
    LifecycleEvent.PAUSE: LifecycleState.STARTED,
    LifecycleEvent.STOP: LifecycleState.CREATED,
    LifecycleEvent.RESTART: LifecycleState.CREATED,
    LifecycleEvent.DESTROY: LifecycleState.DESTROYED,
}


class LifecycleObserver(Protocol):
    def on_lifecycle_event(self, event: LifecycleEvent) -> None: ...


class Lifecycle:
    """Observer registry plus the current lifecycle state."""

    def __init__(self) -> None:
        self._state = LifecycleState.INITIALIZED
        self._observers: list[LifecycleObserver] = []

    @property
    def state(self) -> LifecycleState:
        return self._state

    def add_observer(self, observer: LifecycleObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: LifecycleObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def dispatch(self, event: LifecycleEvent) -> None:
        """Move to the event's state, then notify every observer."""
        if self._state is LifecycleState.DESTROYED:
            raise LifecycleError(f"cannot dispatch {event.value!r} after destroy")
        self._state = _NEXT_STATE.get(event, self._state)
        for observer in list(self._observers):
            observer.on_lifecycle_event(event)


# ═══════════════════════════════════════════════════════════════════════════
# Logging observer
# ═══════════════════════════════════════════════════════════════════════════

_MESSAGES: dict[LifecycleEvent, str] = {
    LifecycleEvent.CREATE: "onCreate() called",
    LifecycleEvent.START: "onStart() called",
    LifecycleEvent.RESUME: "onResume() called",
    LifecycleEvent.PAUSE: "onPause() called",
    LifecycleEvent.STOP: "onStop() called",
    LifecycleEvent.RESTART: "onRestart() called",
    LifecycleEvent.DESTROY: "onDestroy() called",
    LifecycleEvent.SAVE_STATE: "saveInstanceState",
}


class LifecycleLogger:
    """Logs every lifecycle event at INFO and remembers the sequence."""

    def __init__(self) -> None:
        self.history: list[LifecycleEvent] = []

    def on_lifecycle_event(self, event: LifecycleEvent) -> None:
        self.history.append(event)
        logger.info(_MESSAGES[event])
