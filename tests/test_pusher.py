"""Tests for engine/pusher.py — the host-side screen controller.

Covers:
  - Clicks thread state through the tier selector
  - Lifecycle callbacks reach logger and timer
  - Save / restore round trip keeps revenue only
  - Share text, share fallback notice, state untouched on failure
  - Image lookup with and without an images directory
"""

from __future__ import annotations

import logging

import pytest

from dessert_pusher.config import AppSettings
from dessert_pusher.engine.lifecycle import LifecycleEvent, LifecycleState
from dessert_pusher.engine.pusher import DessertPusher
from dessert_pusher.exceptions import LifecycleError, ShareUnavailableError


@pytest.fixture
def pusher(abc_catalog, clock) -> DessertPusher:
    return DessertPusher(abc_catalog, clock=clock)


# ═══════════════════════════════════════════════════════════════════════════
# Clicks
# ═══════════════════════════════════════════════════════════════════════════

class TestClicks:

    def test_fresh_screen(self, pusher, abc_catalog):
        assert pusher.state.revenue == 0
        assert pusher.state.desserts_sold == 0
        assert pusher.state.current_dessert is abc_catalog[0]

    def test_click_updates_slot(self, pusher):
        before = pusher.state
        result = pusher.on_dessert_clicked()
        assert pusher.state is result.state
        assert before.desserts_sold == 0
        assert pusher.state.desserts_sold == 1

    def test_five_clicks(self, pusher):
        changes = [pusher.on_dessert_clicked().dessert_changed for _ in range(5)]
        assert (pusher.state.desserts_sold, pusher.state.revenue) == (5, 40)
        assert pusher.state.current_dessert.name == "C"
        assert changes == [False, True, False, False, True]


# ═══════════════════════════════════════════════════════════════════════════
# Lifecycle
# ═══════════════════════════════════════════════════════════════════════════

class TestLifecycleCallbacks:

    def test_callbacks_reach_observers(self, pusher, clock, caplog):
        with caplog.at_level(logging.INFO):
            pusher.on_create()
            pusher.on_start()
            pusher.on_resume()
            clock.advance(8)
            pusher.on_pause()
            pusher.on_stop()
            pusher.on_restart()
            pusher.on_destroy()
        assert pusher.lifecycle_logger.history == [
            LifecycleEvent.CREATE, LifecycleEvent.START, LifecycleEvent.RESUME,
            LifecycleEvent.PAUSE, LifecycleEvent.STOP, LifecycleEvent.RESTART,
            LifecycleEvent.DESTROY,
        ]
        assert pusher.timer.seconds_count == 8
        assert pusher.lifecycle.state is LifecycleState.DESTROYED
        assert "onDestroy() called" in caplog.messages
        assert "Timer is at : 8" in caplog.messages

    def test_no_callbacks_after_destroy(self, pusher):
        pusher.on_destroy()
        with pytest.raises(LifecycleError):
            pusher.on_start()

    def test_lifecycle_does_not_touch_state(self, pusher):
        pusher.on_dessert_clicked()
        before = pusher.state
        pusher.on_create()
        pusher.on_start()
        pusher.on_stop()
        assert pusher.state is before


# ═══════════════════════════════════════════════════════════════════════════
# Save / restore
# ═══════════════════════════════════════════════════════════════════════════

class TestSaveRestore:

    def test_bundle_and_event(self, pusher):
        for _ in range(3):
            pusher.on_dessert_clicked()
        bundle = pusher.on_save_instance_state()
        assert bundle == {"REVENUE": 20}
        assert pusher.lifecycle_logger.history[-1] is LifecycleEvent.SAVE_STATE

    def test_recreated_screen_keeps_revenue_only(self, pusher, abc_catalog):
        for _ in range(5):
            pusher.on_dessert_clicked()
        bundle = pusher.on_save_instance_state()
        pusher.on_destroy()

        recreated = DessertPusher(abc_catalog, saved_state=bundle)
        assert recreated.state.revenue == 40
        assert recreated.state.desserts_sold == 0
        assert recreated.state.current_dessert is abc_catalog[0]

    def test_restore_with_revenue_100(self, abc_catalog):
        recreated = DessertPusher(abc_catalog, saved_state={"REVENUE": 100})
        assert recreated.state.current_dessert is abc_catalog[0]
        recreated.on_dessert_clicked()
        assert recreated.state.revenue == 105


# ═══════════════════════════════════════════════════════════════════════════
# Share
# ═══════════════════════════════════════════════════════════════════════════

class TestShare:

    def test_share_text(self, pusher):
        for _ in range(3):
            pusher.on_dessert_clicked()
        assert pusher.share_text() == (
            "I've clicked 3 Desserts for a total of 20$ #AndroidDessertPusher"
        )

    def test_custom_template(self, abc_catalog):
        settings = AppSettings(share_template="{revenue}/{desserts_sold}")
        p = DessertPusher(abc_catalog, settings=settings)
        p.on_dessert_clicked()
        assert p.share_text() == "5/1"

    def test_share_success(self, pusher):
        sent: list[str] = []
        assert pusher.share(sent.append) is None
        assert sent == [pusher.share_text()]

    def test_share_unavailable_gives_notice(self, pusher, caplog):
        pusher.on_dessert_clicked()
        before = pusher.state

        def _no_handler(text: str) -> None:
            raise ShareUnavailableError("nothing installed")

        with caplog.at_level(logging.WARNING):
            notice = pusher.share(_no_handler)
        assert notice == "Sharing Not Available"
        assert pusher.state is before
        assert "nothing installed" in caplog.text

    def test_other_errors_propagate(self, pusher):
        def _broken(text: str) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            pusher.share(_broken)


# ═══════════════════════════════════════════════════════════════════════════
# Images
# ═══════════════════════════════════════════════════════════════════════════

class TestImagePath:

    def test_no_images_dir(self, pusher):
        assert pusher.image_path() is None

    def test_existing_image(self, abc_catalog, tmp_path):
        (tmp_path / "a.png").write_bytes(b"png")
        p = DessertPusher(abc_catalog, settings=AppSettings(images_dir=tmp_path))
        assert p.image_path() == tmp_path / "a.png"

    def test_missing_image_is_none(self, abc_catalog, tmp_path, caplog):
        p = DessertPusher(abc_catalog, settings=AppSettings(images_dir=tmp_path))
        with caplog.at_level(logging.WARNING):
            assert p.image_path(abc_catalog[2]) is None
        assert "c.png" in caplog.text
