"""Celestial Explorer — Streamlit app for the Sun/Earth/Moon toy model."""

import datetime
import logging

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from celestialexplorer import config  # noqa: E402
from celestialexplorer.i18n import t  # noqa: E402
from celestialexplorer.models import DragTarget  # noqa: E402
from celestialexplorer.parsing import format_date, format_time  # noqa: E402
from celestialexplorer.phases import phase_label  # noqa: E402
from celestialexplorer.projection import map_to_world  # noqa: E402
from celestialexplorer.renderers.minimap import render_minimap_html  # noqa: E402
from celestialexplorer.renderers.plotly_2d import (  # noqa: E402
    render_sky_chart,
    render_universe_map,
)
from celestialexplorer.store import CelestialStore  # noqa: E402

logging.basicConfig(
    level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT
)
config.validate_settings()

# Streamlit can't rerun a fragment every 50 ms, so each refresh applies a
# fixed batch of clock steps instead. Still fixed-step: nothing here reads
# the wall clock.
_REFRESH_S = 0.5

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", config.DEFAULT_LANG)

# Narrow viewports get the mobile scale for both the map and the mini-map
if "mobile" not in st.session_state:
    _width: int | None = streamlit_js_eval(
        js_expressions="window.innerWidth", key="_width_detect", height=0
    )
    if _width is not None:
        st.session_state.mobile = _width < 768

_mobile: bool = st.session_state.get("mobile", False)

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🪐",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "store" not in st.session_state:
    st.session_state.store = CelestialStore()
if "view" not in st.session_state:
    st.session_state.view = "home"
if "paused" not in st.session_state:
    st.session_state.paused = False
if "time_error" not in st.session_state:
    st.session_state.time_error = False

store: CelestialStore = st.session_state.store
_ticks_per_refresh = max(1, round(_REFRESH_S / store.clock.tick_interval_s))

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #00000a !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .ce-title {
        font-weight: 900;
        letter-spacing: -0.05em;
        text-transform: uppercase;
        background: linear-gradient(90deg, #60a5fa, #c084fc);
        -webkit-background-clip: text;
        color: transparent;
    }
    .ce-clock { color: #ffffff; font: 700 2.2rem monospace; margin: 0; }
    .ce-date { color: #bfdbfe; font: 700 1.3rem monospace; margin: 0; }
    .ce-phase { color: #fef08a; font-weight: 700; font-size: 0.85rem; }
    .ce-orbit { color: rgba(255,255,255,0.4); font: 0.7rem monospace; }
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
        font-size: 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# --- Edit handlers (run before the rerun that redraws) ---


def _on_date_change() -> None:
    value = st.session_state.date_input
    if value is not None:
        store.edit_date(value)


def _on_time_change() -> None:
    st.session_state.time_error = not store.edit_time(st.session_state.time_input)


def _on_map_select() -> None:
    event = st.session_state.universe_map
    points = event.get("selection", {}).get("points", [])
    if not points:
        return
    target = DragTarget(st.session_state.drag_target)
    # Moon inversion must use the Earth orbit radius the map was drawn with
    store.drag.earth_orbit_radius = (
        config.MOBILE_EARTH_ORBIT_RADIUS if _mobile else config.EARTH_ORBIT_RADIUS
    )
    # A click is a one-move drag: begin, move to the clicked point, release
    store.begin_drag(target)
    try:
        point = points[-1]
        store.update_drag(map_to_world(float(point["x"]), float(point["y"])))
    finally:
        store.end_drag()


def _toggle_view() -> None:
    st.session_state.view = "universe" if st.session_state.view == "home" else "home"


# --- Controls ---
with st.sidebar:
    st.toggle(t("label_paused", _lang), key="paused")
    st.date_input(
        t("label_date", _lang),
        value=store.get_state().date,
        min_value=datetime.date(1900, 1, 1),
        max_value=datetime.date(2100, 12, 31),
        key="date_input",
        on_change=_on_date_change,
    )
    st.text_input(
        t("label_time", _lang),
        value=format_time(store.get_state().time),
        max_chars=5,
        placeholder="HH:MM",
        key="time_input",
        on_change=_on_time_change,
    )
    if st.session_state.time_error:
        st.caption(t("error_time", _lang))


@st.fragment(run_every=None if st.session_state.paused else _REFRESH_S)
def _live_view() -> None:
    if not st.session_state.paused and store.controls_enabled:
        for _ in range(_ticks_per_refresh):
            store.on_tick()
    state = store.get_state()

    head, side = st.columns([2, 1])
    with head:
        st.markdown(
            f"<div class='ce-title'>{t('page_title', _lang)}</div>"
            f"<p class='ce-date'>{format_date(state.date)}</p>"
            f"<p class='ce-clock'>{format_time(state.time)}</p>"
            f"<p class='ce-phase'>{phase_label(state.moon_orbit_progress, _lang, overhead=True)}</p>"
            f"<div class='ce-orbit'>{t('label_earth_orbit', _lang)}: "
            f"{state.earth_orbit_progress * 100:.1f}%<br>"
            f"{t('label_moon_orbit', _lang)}: {state.moon_orbit_progress * 100:.1f}%</div>",
            unsafe_allow_html=True,
        )

    if st.session_state.view == "home":
        with side:
            components.html(
                render_minimap_html(state, lang=_lang, mobile=_mobile), height=300
            )
        st.plotly_chart(
            render_sky_chart(state, lang=_lang),
            use_container_width=True,
            config={"displayModeBar": False},
        )
    else:
        with side:
            st.radio(
                t("label_drag_target", _lang),
                options=[DragTarget.EARTH.value, DragTarget.MOON.value],
                format_func=lambda v: t(f"body_{v}", _lang),
                horizontal=True,
                key="drag_target",
            )
            st.caption(t("hint_drag", _lang))
        st.plotly_chart(
            render_universe_map(state, lang=_lang, mobile=_mobile),
            use_container_width=True,
            config={"scrollZoom": True, "displayModeBar": False},
            key="universe_map",
            on_select=_on_map_select,
            selection_mode="points",
        )


_live_view()

st.button(
    t("btn_open_universe", _lang)
    if st.session_state.view == "home"
    else t("btn_return_home", _lang),
    on_click=_toggle_view,
)
