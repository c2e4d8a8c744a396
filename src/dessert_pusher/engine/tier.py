"""Tier selector — which dessert is in production for a given sales count.

The catalog is sorted by ``start_production_amount``.  The current dessert is
the last one whose threshold is at or below the count; the scan stops at the
first threshold above it.

A click is scored at the price of the dessert on display *before* the
click, then the tier is recomputed:

  revenue'        = revenue + current.price
  desserts_sold'  = desserts_sold + 1
  current'        = select_dessert(catalog, desserts_sold')
"""

from __future__ import annotations

import logging
from typing import Sequence

from dessert_pusher.config.dessert import Dessert
from dessert_pusher.models.session import ActionResult, SessionState

logger = logging.getLogger(__name__)


def select_dessert(catalog: Sequence[Dessert], desserts_sold: int) -> Dessert:
    """Return the catalog entry in production after *desserts_sold* sales.

    Falls back to the first entry when no threshold is reached, which cannot
    happen for a valid catalog (its first threshold is 0).
    """
    selected = catalog[0]
    for dessert in catalog:
        if desserts_sold >= dessert.start_production_amount:
            selected = dessert
        else:
            break
    return selected


def record_action(catalog: Sequence[Dessert], state: SessionState) -> ActionResult:
    """Sell one dessert and return the updated state.

    Pure function — *state* is left untouched.
    """
    desserts_sold = state.desserts_sold + 1
    revenue = state.revenue + state.current_dessert.price
    new_dessert = select_dessert(catalog, desserts_sold)

    changed = new_dessert is not state.current_dessert
    if changed:
        logger.debug(
            "Dessert changed %s -> %s at %d sold",
            state.current_dessert.name, new_dessert.name, desserts_sold,
        )

    new_state = SessionState(
        revenue=revenue,
        desserts_sold=desserts_sold,
        current_dessert=new_dessert,
    )
    return ActionResult(state=new_state, dessert_changed=changed)
