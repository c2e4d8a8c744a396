"""DessertPusher — the host-side controller for one dessert screen.

Holds the only mutable slot (the latest ``SessionState``) and forwards host
callbacks: clicks go through the tier selector, lifecycle transitions go to
the registered observers.

Usage::

    pusher = DessertPusher(default_catalog(), saved_state=bundle)
    pusher.on_create(); pusher.on_start(); pusher.on_resume()

    result = pusher.on_dessert_clicked()
    if result.dessert_changed:
        show(pusher.image_path())

    bundle = pusher.on_save_instance_state()   # before the screen goes away
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Mapping

from dessert_pusher.config.catalog import DessertCatalog
from dessert_pusher.config.dessert import Dessert
from dessert_pusher.config.settings import AppSettings
from dessert_pusher.engine.lifecycle import Lifecycle, LifecycleEvent, LifecycleLogger
from dessert_pusher.engine.state import restore_session, save_instance_state
from dessert_pusher.engine.tier import record_action
from dessert_pusher.engine.timer import DessertTimer
from dessert_pusher.exceptions import ShareUnavailableError
from dessert_pusher.models.session import ActionResult, SessionState

logger = logging.getLogger(__name__)


class DessertPusher:
    """One screen's worth of game state plus its lifecycle observers."""

    def __init__(
        self,
        catalog: DessertCatalog,
        saved_state: Mapping[str, int] | None = None,
        settings: AppSettings | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.catalog = catalog
        self.settings = settings or AppSettings()
        self.state: SessionState = restore_session(catalog, saved_state)

        self.lifecycle = Lifecycle()
        self.lifecycle_logger = LifecycleLogger()
        self.timer = DessertTimer(clock=clock)
        self.lifecycle.add_observer(self.lifecycle_logger)
        self.lifecycle.add_observer(self.timer)

    # ── Lifecycle callbacks ─────────────────────────────────────────────

    def on_create(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.CREATE)

    def on_start(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.START)

    def on_resume(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.RESUME)

    def on_pause(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.PAUSE)

    def on_stop(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.STOP)

    def on_restart(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.RESTART)

    def on_destroy(self) -> None:
        self.lifecycle.dispatch(LifecycleEvent.DESTROY)

    def on_save_instance_state(self) -> dict[str, int]:
        self.lifecycle.dispatch(LifecycleEvent.SAVE_STATE)
        return save_instance_state(self.state)

    # ── User actions ────────────────────────────────────────────────────

    def on_dessert_clicked(self) -> ActionResult:
        """Sell one dessert; the new state replaces the old one."""
        result = record_action(self.catalog, self.state)
        self.state = result.state
        return result

    def share_text(self) -> str:
        return self.settings.share_template.format(
            desserts_sold=self.state.desserts_sold,
            revenue=self.state.revenue,
        )

    def share(self, send: Callable[[str], None]) -> str | None:
        """Hand the share text to *send*.

        Returns a notice for the user when *send* raises
        ``ShareUnavailableError``; ``None`` when the text was accepted.
        """
        try:
            send(self.share_text())
        except ShareUnavailableError as exc:
            logger.warning("Share failed: %s", exc)
            return self.settings.sharing_not_available
        return None

    def image_path(self, dessert: Dessert | None = None) -> Path | None:
        """Picture for *dessert* (default: the current one), or None if unavailable."""
        if self.settings.images_dir is None:
            return None
        dessert = dessert or self.state.current_dessert
        path = self.settings.images_dir / dessert.image
        if not path.is_file():
            logger.warning("Missing dessert image %s", path)
            return None
        return path
