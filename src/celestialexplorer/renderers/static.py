"""Matplotlib static PNG renderer of the universe map."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from celestialexplorer import config
from celestialexplorer.geometry import orbit_path, system_layout
from celestialexplorer.i18n import t
from celestialexplorer.models import CelestialState
from celestialexplorer.parsing import format_date, format_time
from celestialexplorer.phases import phase_label
from celestialexplorer.projection import world_to_map

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(state: CelestialState, chart_size: int = 8) -> Figure:
    """Render the universe map as a static matplotlib figure.

    Args:
        state: Celestial state to draw.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    layout = system_layout(state)
    extent = config.EARTH_ORBIT_RADIUS + config.MOON_ORBIT_RADIUS + 60

    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    ring = orbit_path(config.EARTH_ORBIT_RADIUS)
    rx, ry = world_to_map(ring[:, 0], ring[:, 1])
    ax.plot(rx, ry, color="#3b82f6", linewidth=0.8, alpha=0.4, zorder=1)

    ex, ez = layout.earth
    moon_ring = orbit_path(config.MOON_ORBIT_RADIUS, 64)
    mrx, mry = world_to_map(moon_ring[:, 0] + ex, moon_ring[:, 1] + ez)
    ax.plot(mrx, mry, color="white", linewidth=0.5, alpha=0.25, zorder=1)

    bodies = [
        ((0.0, 0.0), config.SUN_RADIUS, "#ffcc33", "body_sun"),
        (layout.earth, config.EARTH_RADIUS, "#3b82f6", "body_earth"),
        (layout.moon, config.MOON_RADIUS, "#d1d5db", "body_moon"),
    ]
    for (bx, bz), radius, color, key in bodies:
        cx, cy = world_to_map(bx, bz)
        ax.add_patch(Circle((cx, cy), radius, color=color, zorder=2))
        # Labels are always English; the default font has no Hangul glyphs
        ax.annotate(
            t(key, "en"),
            (cx, cy + radius + 12),
            color=color,
            ha="center",
            fontsize=9,
            zorder=3,
        )

    vx, vy = world_to_map(ex + layout.view_marker_local[0], ez + layout.view_marker_local[1])
    ax.scatter([vx], [vy], s=12, color="#ff4d4d", zorder=4)

    ax.text(
        -extent + 20,
        extent - 40,
        f"{format_date(state.date)} {format_time(state.time)}\n"
        f"{phase_label(state.moon_orbit_progress, 'en', overhead=True)}",
        color="#fef08a",
        fontsize=10,
        family="monospace",
        va="top",
    )

    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(state: CelestialState, output_path: Path | None = None) -> Path:
    """Save the universe map as a PNG file.

    Args:
        state: Celestial state to draw.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = f"{state.date.strftime('%Y_%m_%d')}_{format_time(state.time).replace(':', '_')}"
        output_path = _ROOT / "results" / f"universe__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(state)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
