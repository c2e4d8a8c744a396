"""Engine — tier selection, projections, and the screen controller."""

from dessert_pusher.engine.tier import record_action, select_dessert
from dessert_pusher.engine.state import (
    REVENUE_KEY,
    new_session,
    restore_session,
    save_instance_state,
)
from dessert_pusher.engine.projection import (
    actions_until_next_dessert,
    dessert_indices,
    price_schedule,
    revenue_curve,
)
from dessert_pusher.engine.lifecycle import (
    Lifecycle,
    LifecycleEvent,
    LifecycleLogger,
    LifecycleObserver,
    LifecycleState,
)
from dessert_pusher.engine.timer import DessertTimer
from dessert_pusher.engine.pusher import DessertPusher

__all__ = [
    "select_dessert",
    "record_action",
    "REVENUE_KEY",
    "new_session",
    "save_instance_state",
    "restore_session",
    "dessert_indices",
    "price_schedule",
    "revenue_curve",
    "actions_until_next_dessert",
    "Lifecycle",
    "LifecycleEvent",
    "LifecycleLogger",
    "LifecycleObserver",
    "LifecycleState",
    "DessertTimer",
    "DessertPusher",
]
