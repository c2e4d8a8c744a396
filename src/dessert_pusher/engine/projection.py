"""Revenue projection — the tier rule evaluated over many clicks at once.

``select_dessert`` answers "which dessert now?" one click at a time.  The
dashboard also wants the whole curve ahead of the player ("what will the
next 250 clicks earn?"), so the same rule is vectorised here:

  index(count) = searchsorted(thresholds, count, side="right") − 1

``side="right"`` makes the threshold inclusive and, for equal thresholds,
picks the last of them, exactly like the linear scan.  Click *k* (1-based)
is charged at the dessert current *before* it, i.e. ``index(start + k − 1)``.

The module is pure NumPy — no side-effects, no state.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from dessert_pusher.config.dessert import Dessert


def _thresholds(catalog: Sequence[Dessert]) -> np.ndarray:
    return np.array([d.start_production_amount for d in catalog], dtype=np.int64)


def _prices(catalog: Sequence[Dessert]) -> np.ndarray:
    return np.array([d.price for d in catalog], dtype=np.int64)


def dessert_indices(catalog: Sequence[Dessert], counts: np.ndarray | Sequence[int]) -> np.ndarray:
    """Catalog index of the current dessert for each sales count in *counts*."""
    idx = np.searchsorted(_thresholds(catalog), np.asarray(counts, dtype=np.int64), side="right") - 1
    return np.clip(idx, 0, None)


def price_schedule(
    catalog: Sequence[Dessert],
    n_actions: int,
    start_sold: int = 0,
) -> np.ndarray:
    """Price charged for each of the next *n_actions* clicks.

    Parameters
    ----------
    catalog : Sequence[Dessert]
        Threshold-ordered desserts.
    n_actions : int
        Number of future clicks (≥ 0).
    start_sold : int
        Desserts already sold when the projection starts.

    Returns
    -------
    np.ndarray
        Shape ``(n_actions,)`` int64 array.
    """
    if n_actions < 0:
        raise ValueError(f"n_actions must be >= 0, got {n_actions}")
    counts_before = start_sold + np.arange(n_actions, dtype=np.int64)
    return _prices(catalog)[dessert_indices(catalog, counts_before)]


def revenue_curve(
    catalog: Sequence[Dessert],
    n_actions: int,
    start_sold: int = 0,
    start_revenue: int = 0,
) -> np.ndarray:
    """Cumulative revenue after each of the next *n_actions* clicks.

    Element ``k − 1`` equals ``state.revenue`` after ``k`` calls to
    ``record_action`` from a session with the given starting counters.
    """
    return start_revenue + np.cumsum(price_schedule(catalog, n_actions, start_sold))


def actions_until_next_dessert(catalog: Sequence[Dessert], desserts_sold: int) -> int | None:
    """Clicks left before the dessert changes.  ``None`` on the last tier."""
    thresholds = _thresholds(catalog)
    pos = int(np.searchsorted(thresholds, desserts_sold, side="right"))
    if pos >= len(thresholds):
        return None
    return int(thresholds[pos]) - desserts_sold
