"""State models — session counters and click results."""

from dessert_pusher.models.session import ActionResult, SessionState

__all__ = [
    "ActionResult",
    "SessionState",
]
