"""Plotly 2D renderers — the top-down universe map and the observer sky.

The universe map is the world projection: chart x is world x, chart y is
world -z (see ``projection.world_to_map``). A grid of invisible pick points
covers the map so a click anywhere reports a world position back through the
Streamlit selection API.
"""

import numpy as np
import plotly.graph_objects as go

from celestialexplorer import config
from celestialexplorer.geometry import (
    orbit_path,
    sky_moon_position,
    sky_sun_position,
    system_layout,
    visible_constellations,
)
from celestialexplorer.i18n import t
from celestialexplorer.models import CelestialState, PlacedConstellation
from celestialexplorer.phases import moon_appearance, moon_light, phase_label
from celestialexplorer.projection import world_to_map

_BG = "#00000a"
_STAR_COLOR = "#ffffff"
_SUN_COLOR = "#ffcc33"
_EARTH_COLOR = "#3b82f6"
_MOON_COLOR = "#d1d5db"
_MARKER_COLOR = "#ff4d4d"
_ORBIT_COLOR = "rgba(59,130,246,0.3)"
_MOON_ORBIT_COLOR = "rgba(255,255,255,0.2)"
_SKY_DAY = "#3a6ea5"
_SKY_NIGHT = "#020414"
_CONSTELLATION_COLOR = "#ffeb3b"

PICK_TRACE_NAME = "pick"


def _background_stars(extent: float, count: int = 400, seed: int = 7) -> go.Scatter:
    # Seeded so the field doesn't jump between reruns
    rng = np.random.default_rng(seed)
    xy = rng.uniform(-extent, extent, size=(count, 2))
    return go.Scatter(
        x=xy[:, 0],
        y=xy[:, 1],
        mode="markers",
        marker=dict(size=rng.uniform(1, 2.5, count), color=_STAR_COLOR, opacity=0.5),
        hoverinfo="skip",
        name="stars",
    )


def _pick_grid(extent: float, step: float) -> go.Scatter:
    ticks = np.arange(-extent, extent + step, step)
    gx, gy = np.meshgrid(ticks, ticks)
    return go.Scatter(
        x=gx.ravel(),
        y=gy.ravel(),
        mode="markers",
        marker=dict(size=step / 4, color="rgba(0,0,0,0)"),
        hoverinfo="none",
        name=PICK_TRACE_NAME,
    )


def _ring(points: np.ndarray, color: str, width: float, name: str) -> go.Scatter:
    mx, my = world_to_map(points[:, 0], points[:, 1])
    return go.Scatter(
        x=mx,
        y=my,
        mode="lines",
        line=dict(color=color, width=width),
        hoverinfo="skip",
        name=name,
    )


def _body(
    xy: tuple[float, float], size: float, color: str, label: str, name: str
) -> go.Scatter:
    mx, my = world_to_map(*xy)
    return go.Scatter(
        x=[mx],
        y=[my],
        mode="markers+text",
        marker=dict(size=size, color=color, line=dict(width=0)),
        text=[label],
        textposition="top center",
        textfont=dict(color=color, size=12),
        hoverinfo="skip",
        name=name,
    )


def _constellation(placed: PlacedConstellation, lang: str) -> go.Scatter:
    ox, oy, _ = placed.position
    scale = config.SKY_CONSTELLATION_SCALE
    stars = placed.constellation.stars
    label = t(f"constellation_{placed.constellation.key}", lang)
    return go.Scatter(
        x=[ox + sx * scale for sx, _ in stars],
        y=[oy + sy * scale for _, sy in stars],
        mode="lines+markers+text",
        line=dict(color=_CONSTELLATION_COLOR, width=2),
        marker=dict(size=6, color=_CONSTELLATION_COLOR),
        # Name under the first star only
        text=[label] + [""] * (len(stars) - 1),
        textposition="bottom center",
        textfont=dict(color=_CONSTELLATION_COLOR, size=11),
        hoverinfo="skip",
        name=f"constellation_{placed.constellation.key}",
    )


def render_universe_map(
    state: CelestialState,
    lang: str = "en",
    mobile: bool = False,
    pick_step: float | None = 20.0,
) -> go.Figure:
    """Render the top-down Sun/Earth/Moon map for one state.

    Args:
        state: Celestial state to draw.
        lang: Language code for body labels.
        mobile: Use the enlarged mobile scale.
        pick_step: Spacing of the invisible click grid in world units, or None
            to omit it (static exports).

    Returns:
        Plotly Figure object.
    """
    if mobile:
        earth_orbit = config.MOBILE_EARTH_ORBIT_RADIUS
        moon_orbit = config.MOBILE_MOON_ORBIT_RADIUS
        marker_radius = config.MOBILE_VIEW_MARKER_RADIUS
    else:
        earth_orbit = config.EARTH_ORBIT_RADIUS
        moon_orbit = config.MOON_ORBIT_RADIUS
        marker_radius = config.VIEW_MARKER_RADIUS

    layout = system_layout(state, earth_orbit, moon_orbit, marker_radius)
    extent = earth_orbit + moon_orbit + 60

    ex, ez = layout.earth
    moon_ring = orbit_path(moon_orbit, 64) + np.array([ex, ez])
    marker_xy = (ex + layout.view_marker_local[0], ez + layout.view_marker_local[1])

    traces = [
        _background_stars(extent),
        _ring(orbit_path(earth_orbit), _ORBIT_COLOR, 1.5, "earth_orbit"),
        _ring(moon_ring, _MOON_ORBIT_COLOR, 1, "moon_orbit"),
        _body((0.0, 0.0), 40, _SUN_COLOR, t("body_sun", lang), "sun"),
        _body(layout.earth, 18, _EARTH_COLOR, t("body_earth", lang), "earth"),
        _body(marker_xy, 6, _MARKER_COLOR, t("body_view", lang), "view_marker"),
        _body(layout.moon, 10, _MOON_COLOR, t("body_moon", lang), "moon"),
    ]
    if pick_step is not None:
        traces.append(_pick_grid(extent, pick_step))

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=800,
        height=800,
        dragmode="pan",
        clickmode="event+select",
        xaxis=dict(visible=False, range=[-extent, extent], fixedrange=False),
        yaxis=dict(
            visible=False,
            range=[-extent, extent],
            scaleanchor="x",
            scaleratio=1,
            fixedrange=False,
        ),
        annotations=[
            dict(
                text=phase_label(state.moon_orbit_progress, lang, overhead=True),
                xref="paper",
                yref="paper",
                x=0.02,
                y=0.98,
                showarrow=False,
                font=dict(color="#fef08a", size=14),
                xanchor="left",
            )
        ],
    )
    return fig


def render_sky_chart(state: CelestialState, lang: str = "en") -> go.Figure:
    """Render the observer's sky: horizon, Sun, constellations and the Moon disc.

    Sky positions are flattened to (azimuth-ish x, height y). The Moon's
    brightness follows the directional light policy in ``phases``.
    """
    appearance = moon_appearance(state.moon_orbit_progress, state.time)
    sun = sky_sun_position(state.time)
    moon = sky_moon_position(state.time, state.moon_orbit_progress)
    light = moon_light(
        state.moon_orbit_progress, sun, moon, np.array(config.SKY_CAMERA_POSITION)
    )

    moon_r = 18.0
    shapes: list[dict] = [
        dict(
            type="line",
            x0=-config.SKY_RADIUS,
            x1=config.SKY_RADIUS,
            y0=0,
            y1=0,
            line=dict(color="#334466", width=1),
        )
    ]
    traces: list[go.Scatter] = [
        _constellation(placed, lang) for placed in visible_constellations(state)
    ]
    if appearance.daytime:
        traces.append(
            go.Scatter(
                x=[float(sun[0])],
                y=[float(sun[1])],
                mode="markers",
                marker=dict(size=30, color="#ffffff", line=dict(width=0)),
                hoverinfo="skip",
                name="sun",
            )
        )

    if appearance.visible:
        mx, my = float(moon[0]), float(moon[1])
        opacity = min(1.0, 0.25 + light.intensity / 80)
        shapes.append(
            dict(
                type="circle",
                x0=mx - moon_r,
                x1=mx + moon_r,
                y0=my - moon_r,
                y1=my + moon_r,
                fillcolor=f"rgba(255,255,255,{opacity:.2f})",
                line=dict(width=0),
            )
        )
        if appearance.shadow is not None:
            # Occluder is the full disc shifted sideways; the visible sliver is what it misses
            sx = mx + appearance.shadow.offset_x
            shapes.append(
                dict(
                    type="circle",
                    x0=sx - moon_r,
                    x1=sx + moon_r,
                    y0=my - moon_r,
                    y1=my + moon_r,
                    fillcolor=_SKY_DAY if appearance.daytime else _SKY_NIGHT,
                    line=dict(width=0),
                )
            )

    fig = go.Figure(data=traces)
    bg = _SKY_DAY if appearance.daytime else _SKY_NIGHT
    fig.update_layout(
        paper_bgcolor=bg,
        plot_bgcolor=bg,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=800,
        height=400,
        xaxis=dict(visible=False, range=[-config.SKY_RADIUS, config.SKY_RADIUS]),
        yaxis=dict(visible=False, range=[-20, config.SKY_RADIUS * 0.6]),
        shapes=shapes,
        annotations=[
            dict(
                text=phase_label(state.moon_orbit_progress, lang),
                xref="paper",
                yref="paper",
                x=0.5,
                y=0.95,
                showarrow=False,
                font=dict(color="#ffffcc", size=14),
            )
        ],
    )
    return fig
