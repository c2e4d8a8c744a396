"""Session state — the contract between the tier selector and the host.

``SessionState`` is immutable.  Every click produces a new value; the host
keeps the single mutable slot that points at the latest one.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from dessert_pusher.config.dessert import Dessert


class SessionState(BaseModel):
    """Counters for one running screen."""

    model_config = ConfigDict(frozen=True)

    revenue: int = Field(ge=0, description="Total revenue earned ($)")
    desserts_sold: int = Field(ge=0, description="Total desserts clicked")
    current_dessert: Dessert
    """The dessert currently on display — the catalog's own object, not a copy."""


@dataclass(frozen=True)
class ActionResult:
    """Output of one click.

    ``dessert_changed`` is only a rendering hint: the host swaps the picture
    when it is True.
    """

    state: SessionState
    dessert_changed: bool
