"""Session creation and the save/restore bundle.

Only revenue survives a restore.  The sales count and the current dessert
start over, so a restored session can show a cupcake next to a revenue that
was earned on oreos.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from dessert_pusher.config.dessert import Dessert
from dessert_pusher.models.session import SessionState

REVENUE_KEY = "REVENUE"
"""Bundle key under which revenue is checkpointed."""


def new_session(catalog: Sequence[Dessert], revenue: int = 0) -> SessionState:
    """Fresh session: nothing sold, first dessert on display."""
    return SessionState(revenue=revenue, desserts_sold=0, current_dessert=catalog[0])


def save_instance_state(state: SessionState) -> dict[str, int]:
    """Checkpoint *state* into a bundle (revenue only)."""
    return {REVENUE_KEY: state.revenue}


def restore_session(
    catalog: Sequence[Dessert],
    bundle: Mapping[str, int] | None,
) -> SessionState:
    """Rebuild a session from a saved bundle, or start fresh when there is none."""
    if bundle is None:
        return new_session(catalog)
    return new_session(catalog, revenue=int(bundle.get(REVENUE_KEY, 0)))
