"""Mini-map overlay renderer.

Produces a self-contained HTML string for embedding via
st.components.v1.html(). Bodies are positioned with nested CSS transforms,
``rotate(φ) translateX(r)``, exactly like a DOM overlay would be:

  Sun   — centre of the box
  Earth — rotate(earth_deg) translateX(earth_arm) around the Sun
  Moon  — rotate(moon_relative_deg) translateX(moon_arm) inside the Earth arm

CSS rotation is clockwise-positive with y pointing down, the opposite
handedness of the world projection; all angles come from
``projection.overlay_angles`` which applies the single sign correction.
"""

from __future__ import annotations

import html

import numpy as np

from celestialexplorer import config
from celestialexplorer.i18n import t
from celestialexplorer.models import CelestialState
from celestialexplorer.parsing import format_date, format_time
from celestialexplorer.phases import phase_label
from celestialexplorer.projection import overlay_angles

_BG = "#000000"
_SUN_COLOR = "#facc15"
_EARTH_COLOR = "#3b82f6"
_MOON_COLOR = "#d1d5db"
_TITLE_COLOR = "#60a5fa"


def _star_dots(count: int = 50, seed: int = 3) -> str:
    """Fixed background dots; seeded so they don't move between ticks."""
    rng = np.random.default_rng(seed)
    parts = []
    for left, top, opacity in zip(
        rng.uniform(0, 100, count),
        rng.uniform(0, 100, count),
        rng.uniform(0.3, 1.0, count),
    ):
        parts.append(
            f'<div class="star" style="left:{left:.1f}%;top:{top:.1f}%;'
            f'opacity:{opacity:.2f}"></div>'
        )
    return "\n    ".join(parts)


def render_minimap_html(
    state: CelestialState,
    lang: str = "en",
    mobile: bool = False,
    earth_arm_px: int | None = None,
    moon_arm_px: int | None = None,
) -> str:
    """Return an HTML page with the live mini-map.

    Args:
        state: Celestial state to draw.
        lang: Language code ('ko' or 'en') for labels.
        mobile: Use the smaller mobile arm lengths.
        earth_arm_px: Earth–Sun distance in CSS px, overriding the layout default.
        moon_arm_px: Moon–Earth distance in CSS px, overriding the layout default.

    Returns:
        HTML string suitable for st.components.v1.html().
    """
    if mobile:
        default_earth, default_moon = (
            config.MOBILE_MINIMAP_EARTH_ARM_PX,
            config.MOBILE_MINIMAP_MOON_ARM_PX,
        )
    else:
        default_earth, default_moon = config.MINIMAP_EARTH_ARM_PX, config.MINIMAP_MOON_ARM_PX
    earth_arm_px = earth_arm_px or default_earth
    moon_arm_px = moon_arm_px or default_moon
    angles = overlay_angles(state)
    # Overhead narration: the map labels phases from the Sun's side
    phase = html.escape(phase_label(state.moon_orbit_progress, lang, overhead=True))
    title = html.escape(t("minimap_title", lang))
    stamp = f"{format_date(state.date)} {format_time(state.time)}"
    ring = earth_arm_px * 2

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{ width: 100%; height: 100%; background: {_BG}; overflow: hidden; }}
#map {{
    position: relative;
    width: 100%;
    height: 100%;
    border: 2px solid rgba(255,255,255,0.2);
    border-radius: 16px;
    overflow: hidden;
    background: linear-gradient(135deg, #000 0%, rgba(23,37,84,0.2) 50%, #000 100%);
}}
.star {{ position: absolute; width: 2px; height: 2px; background: #fff; border-radius: 50%; }}
.centre {{ position: absolute; inset: 0; display: flex; align-items: center; justify-content: center; }}
#sun {{
    position: absolute; width: 48px; height: 48px; border-radius: 50%;
    background: {_SUN_COLOR}; box-shadow: 0 0 30px rgba(255,204,51,0.8);
}}
#earth-orbit {{
    position: absolute; width: {ring}px; height: {ring}px; border-radius: 50%;
    border: 1px solid rgba(59,130,246,0.3);
}}
.arm {{ position: absolute; }}
#earth {{
    position: absolute; width: 24px; height: 24px; border-radius: 50%;
    transform: translate(-50%, -50%); background: {_EARTH_COLOR};
    box-shadow: 0 0 10px rgba(59,130,246,0.8);
}}
#moon-arm {{ left: 50%; top: 50%; }}
#moon {{
    width: 12px; height: 12px; border-radius: 50%; transform: translate(-50%, -50%);
    background: {_MOON_COLOR}; box-shadow: 0 0 5px rgba(209,213,219,0.6);
}}
#title {{
    position: absolute; top: 8px; left: 8px; padding: 2px 8px; border-radius: 4px;
    background: rgba(0,0,0,0.6); color: {_TITLE_COLOR}; font: 900 10px sans-serif;
    letter-spacing: 0.2em; text-transform: uppercase; opacity: 0.6;
}}
#caption {{
    position: absolute; bottom: 8px; left: 8px; color: #fef08a;
    font: 700 11px monospace;
}}
</style>
</head>
<body>
<div id="map">
  <div id="stars">
    {_star_dots()}
  </div>
  <div class="centre">
    <div id="sun"></div>
    <div id="earth-orbit"></div>
    <div class="arm" id="earth-arm"
         style="transform: rotate({angles.earth_deg:.4f}deg) translateX({earth_arm_px}px)">
      <div id="earth"></div>
      <div class="arm" id="moon-arm"
           style="transform: rotate({angles.moon_relative_deg:.4f}deg) translateX({moon_arm_px}px)">
        <div id="moon"></div>
      </div>
    </div>
  </div>
  <div id="title">{title}</div>
  <div id="caption">{stamp} · {phase}</div>
</div>
</body>
</html>"""
