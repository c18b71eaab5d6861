"""Projection sync — the one place angles cross between world and overlay handedness.

The world projection (top-down camera, Plotly map, static PNG) places an angle
θ at ``(cos θ, -sin θ)`` on the x/z plane. The mini-map overlay is built from
CSS ``rotate(φ) translateX(r)`` transforms, which place φ at
``(cos φ, sin φ)`` with screen y pointing down. Drawing world +z as screen
down, the same body therefore needs φ = -θ. That negation is
``OVERLAY_HANDEDNESS`` and renderers must not re-derive it.
"""

import math

from celestialexplorer.angles import TAU, signed_delta_degrees
from celestialexplorer.geometry import (
    angle_to_sun,
    earth_position,
    moon_world_angle,
)
from celestialexplorer.models import (
    CelestialState,
    OverlayAngles,
    WorldAngles,
    WorldPoint,
)

OVERLAY_HANDEDNESS = -1.0


def to_overlay_degrees(world_angle: float) -> float:
    """World angle (radians) to overlay rotation (degrees)."""
    return OVERLAY_HANDEDNESS * math.degrees(world_angle)


def to_world_radians(overlay_deg: float) -> float:
    """Overlay rotation (degrees) back to a world angle (radians)."""
    return math.radians(OVERLAY_HANDEDNESS * overlay_deg)


def world_to_map(x: float, z: float) -> tuple[float, float]:
    """World (x, z) to y-up chart coordinates of the top-down camera.

    The camera looks down the y axis with world -z at the top of the screen.
    """
    return x, -z


def map_to_world(map_x: float, map_y: float) -> WorldPoint:
    """Chart coordinates back to a point on the orbital plane."""
    return WorldPoint(x=map_x, y=0.0, z=-map_y)


def world_angles(state: CelestialState) -> WorldAngles:
    """Earth and Moon angles as the world projection places them."""
    ex, ez = earth_position(state.earth_orbit_progress, 1.0)
    return WorldAngles(
        earth=state.earth_orbit_progress * TAU,
        moon=moon_world_angle(state.moon_orbit_progress, angle_to_sun(ex, ez)),
    )


def overlay_angles(state: CelestialState) -> OverlayAngles:
    """CSS rotations for the mini-map.

    Earth's rotation is read straight off its world position (``atan2(z, x)``
    already is screen handedness). The Moon's is its world angle negated,
    and the nested Moon arm rotates by the difference since it sits inside
    the Earth arm's transform.
    """
    ex, ez = earth_position(state.earth_orbit_progress, 1.0)
    earth_deg = math.degrees(math.atan2(ez, ex))
    moon_deg = to_overlay_degrees(
        moon_world_angle(state.moon_orbit_progress, angle_to_sun(ex, ez))
    )
    return OverlayAngles(
        earth_deg=earth_deg,
        moon_deg=moon_deg,
        moon_relative_deg=moon_deg - earth_deg,
    )


def overlay_screen_positions(
    angles: OverlayAngles, earth_arm: float, moon_arm: float
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Where the overlay's nested CSS transforms put Earth and Moon.

    Returns screen (x, y) offsets from the Sun, y pointing down.
    """
    e = math.radians(angles.earth_deg)
    m = math.radians(angles.earth_deg + angles.moon_relative_deg)
    earth = (math.cos(e) * earth_arm, math.sin(e) * earth_arm)
    moon = (earth[0] + math.cos(m) * moon_arm, earth[1] + math.sin(m) * moon_arm)
    return earth, moon


def angle_mismatch_degrees(state: CelestialState) -> tuple[float, float]:
    """Absolute Earth and Moon disagreement between the two projections."""
    world = world_angles(state)
    overlay = overlay_angles(state)
    earth = signed_delta_degrees(overlay.earth_deg - to_overlay_degrees(world.earth))
    moon = signed_delta_degrees(overlay.moon_deg - to_overlay_degrees(world.moon))
    return abs(earth), abs(moon)


def projections_agree(state: CelestialState, tolerance_deg: float = 1e-9) -> bool:
    """True when both projections place Earth and Moon at the same angles."""
    earth, moon = angle_mismatch_degrees(state)
    return earth <= tolerance_deg and moon <= tolerance_deg
