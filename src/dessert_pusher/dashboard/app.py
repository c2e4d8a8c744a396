"""Dessert Pusher — Streamlit host screen.

Layout: dessert button + revenue / sold metrics in the main area, share
panel underneath; sidebar shows the catalog and a revenue projection.

Streamlit reruns this script on every interaction.  The ``DessertPusher``
controller lives in ``st.session_state`` so counters survive reruns; the
"Simulate restart" button goes through the save-bundle path instead, which
keeps revenue only.
"""

from __future__ import annotations

import os
import webbrowser
from urllib.parse import quote

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from dessert_pusher.config import AppSettings, load_settings
from dessert_pusher.engine import DessertPusher, actions_until_next_dessert, revenue_curve
from dessert_pusher.exceptions import CatalogLoadError, ShareUnavailableError
from dessert_pusher.logging_config import configure_logging

CONFIG_ENV_VAR = "DESSERT_PUSHER_CONFIG"
PROJECTION_CLICKS = 250

# ---------------------------------------------------------------------------
# Page config + settings
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Dessert Pusher", page_icon="🧁", layout="centered")


def _load_settings() -> AppSettings:
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AppSettings()
    try:
        return load_settings(path)
    except CatalogLoadError as exc:
        st.warning(f"Using default settings — {exc}")
        return AppSettings()


settings = _load_settings()
configure_logging(settings.log_level)

try:
    catalog = settings.load_catalog()
except CatalogLoadError as exc:
    st.error(f"Catalog could not be loaded: {exc}")
    st.stop()


def _launch(saved_state: dict[str, int] | None = None) -> DessertPusher:
    pusher = DessertPusher(catalog, saved_state=saved_state, settings=settings)
    pusher.on_create()
    pusher.on_start()
    pusher.on_resume()
    return pusher


def _send_via_mail(text: str) -> None:
    if not webbrowser.open(f"mailto:?body={quote(text)}"):
        raise ShareUnavailableError("no browser or mail handler available")


if "pusher" not in st.session_state:
    st.session_state["pusher"] = _launch()
pusher: DessertPusher = st.session_state["pusher"]
catalog = pusher.catalog

# ---------------------------------------------------------------------------
# SIDEBAR — catalog + projection
# ---------------------------------------------------------------------------
st.sidebar.header("Desserts")
current_idx = catalog.index_of(pusher.state.current_dessert)
st.sidebar.dataframe(
    pd.DataFrame(
        [
            {
                "": "▶" if i == current_idx else "",
                "Dessert": d.name,
                "Price ($)": d.price,
                "Starts at": d.start_production_amount,
            }
            for i, d in enumerate(catalog)
        ]
    ),
    hide_index=True,
    use_container_width=True,
)

with st.sidebar.expander("Revenue projection", expanded=False):
    curve = revenue_curve(
        catalog,
        PROJECTION_CLICKS,
        start_sold=pusher.state.desserts_sold,
        start_revenue=pusher.state.revenue,
    )
    clicks = np.arange(1, PROJECTION_CLICKS + 1) + pusher.state.desserts_sold
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=clicks,
        y=curve,
        mode="lines",
        line=dict(color="#e17055", width=2),
        fill="tozeroy",
        fillcolor="rgba(225,112,85,0.2)",
    ))
    fig.update_layout(
        xaxis_title="Desserts sold",
        yaxis_title="Revenue ($)",
        height=260,
        margin=dict(l=20, r=20, t=20, b=20),
        showlegend=False,
    )
    st.plotly_chart(fig, use_container_width=True)
    st.caption(f"Next {PROJECTION_CLICKS} clicks would earn ${int(curve[-1]) - pusher.state.revenue:,}")

st.sidebar.caption(f"Screen started for {pusher.timer.seconds_count} s")

# ---------------------------------------------------------------------------
# MAIN — dessert button + counters
# ---------------------------------------------------------------------------
st.title("Dessert Pusher")

dessert = pusher.state.current_dessert
image = pusher.image_path()
if image is not None:
    st.image(str(image), width=220)
else:
    st.markdown(f"### 🧁 {dessert.name}")
    if settings.images_dir is not None:
        st.caption(f"Picture {dessert.image} not found")

if st.button(f"Sell a {dessert.name} (${dessert.price})", type="primary", use_container_width=True):
    result = pusher.on_dessert_clicked()
    if result.dessert_changed:
        st.toast(f"Now producing {result.state.current_dessert.name}!")
    st.rerun()

c1, c2 = st.columns(2)
c1.metric("Revenue", f"${pusher.state.revenue:,}")
c2.metric("Desserts sold", f"{pusher.state.desserts_sold:,}")

remaining = actions_until_next_dessert(catalog, pusher.state.desserts_sold)
if remaining is None:
    st.caption("Top of the menu — nothing left to unlock.")
else:
    next_start = pusher.state.desserts_sold + remaining
    span = max(next_start - dessert.start_production_amount, 1)
    st.progress(1 - remaining / span, text=f"{remaining} more until the next dessert")

# ---------------------------------------------------------------------------
# Share + restart
# ---------------------------------------------------------------------------
st.divider()
s1, s2 = st.columns(2)
if s1.button("Share", use_container_width=True):
    notice = pusher.share(_send_via_mail)
    if notice:
        st.warning(notice)
    st.code(pusher.share_text(), language=None)

if s2.button("Simulate restart", use_container_width=True,
             help="Save state, tear the screen down and recreate it. Only revenue is restored."):
    bundle = pusher.on_save_instance_state()
    pusher.on_pause()
    pusher.on_stop()
    pusher.on_destroy()
    st.session_state["pusher"] = _launch(saved_state=bundle)
    st.rerun()

with st.expander("Lifecycle log", expanded=False):
    st.write(", ".join(e.value for e in pusher.lifecycle_logger.history) or "—")
