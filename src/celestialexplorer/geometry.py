"""Orbit geometry — pure mappings from phase values to positions and angles.

Convention (shared by every projection): the orbital plane is world x/z seen
from above, and an angle θ places a body at ``(cos θ, -sin θ)``. Progress p
maps to θ = 2πp, so bodies move clockwise on screen when +z points down.
Every other angle (Sun direction, Moon placement, view marker) is derived
relative to Earth's position in this convention; projections with the
opposite handedness go through ``projection`` instead of re-deriving signs.
"""

import math

import numpy as np

from celestialexplorer import config
from celestialexplorer.angles import TAU
from celestialexplorer.models import (
    BodyLayout,
    CelestialState,
    Constellation,
    PlacedConstellation,
)
from celestialexplorer.phases import is_daytime


def polar_to_plane(angle: float, radius: float) -> tuple[float, float]:
    """Place a point at ``angle`` on a circle of ``radius`` in the shared convention."""
    return math.cos(angle) * radius, -math.sin(angle) * radius


def earth_position(progress: float, radius: float) -> tuple[float, float]:
    """Earth's (x, z) on its orbit around the Sun at the origin."""
    return polar_to_plane(progress * TAU, radius)


def angle_to_sun(earth_x: float, earth_z: float) -> float:
    """Direction from Earth back toward the Sun, ``atan2(-z, -x)``.

    Note this is measured with the plain ``atan2(z, x)`` handedness, as the
    Moon's world angle is built on top of it.
    """
    return math.atan2(-earth_z, -earth_x)


def moon_world_angle(progress: float, sun_angle: float) -> float:
    """Moon's world angle: the Earth–Sun direction plus its own orbit phase."""
    return sun_angle + progress * TAU


def moon_position(
    progress: float, sun_angle: float, radius: float
) -> tuple[float, float]:
    """Moon's (x, z) relative to Earth's centre."""
    return polar_to_plane(moon_world_angle(progress, sun_angle), radius)


def view_marker_angle(sun_angle: float, time_of_day: float) -> float:
    """Angle of the observer marker on Earth's surface, in Earth's local frame.

    Sweeps one revolution per simulated day on top of the Sun direction,
    independent of Earth's orbital motion.
    """
    return sun_angle + (time_of_day / 24) * TAU


def view_marker_position(
    sun_angle: float, time_of_day: float, radius: float
) -> tuple[float, float]:
    """Observer marker (x, z) relative to Earth's centre."""
    return polar_to_plane(view_marker_angle(sun_angle, time_of_day), radius)


def orbit_path(radius: float, segments: int = 128) -> np.ndarray:
    """Closed circle of ``segments + 1`` (x, z) points for drawing an orbit ring."""
    theta = np.linspace(0.0, TAU, segments + 1)
    return np.column_stack((np.cos(theta) * radius, -np.sin(theta) * radius))


def system_layout(
    state: CelestialState,
    earth_orbit_radius: float = config.EARTH_ORBIT_RADIUS,
    moon_orbit_radius: float = config.MOON_ORBIT_RADIUS,
    view_marker_radius: float = config.VIEW_MARKER_RADIUS,
) -> BodyLayout:
    """Compute world positions of every body for ``state``.

    Args:
        state: Celestial state to lay out.
        earth_orbit_radius: Earth–Sun distance in world units.
        moon_orbit_radius: Moon–Earth distance in world units.
        view_marker_radius: Marker distance from Earth's centre.

    Returns:
        BodyLayout with Earth, Moon and marker positions.
    """
    ex, ez = earth_position(state.earth_orbit_progress, earth_orbit_radius)
    sun_angle = angle_to_sun(ex, ez)
    mx, mz = moon_position(state.moon_orbit_progress, sun_angle, moon_orbit_radius)
    marker = view_marker_position(sun_angle, state.time, view_marker_radius)
    return BodyLayout(
        earth=(ex, ez),
        moon=(ex + mx, ez + mz),
        moon_local=(mx, mz),
        view_marker_local=marker,
        angle_to_sun=sun_angle,
        moon_world_angle=moon_world_angle(state.moon_orbit_progress, sun_angle),
        earth_orbit_radius=earth_orbit_radius,
        moon_orbit_radius=moon_orbit_radius,
    )


# --- Observer sky (the view from the marker on Earth) ---


def sky_sun_azimuth(time_of_day: float) -> float:
    """Sun azimuth in the observer sky: due south (0) at noon, 15° per hour."""
    return (time_of_day - 12) * (math.pi / 12)


def sky_sun_position(time_of_day: float) -> np.ndarray:
    """Sun position on the observer's sky dome. Above the horizon between 06 and 18."""
    azimuth = sky_sun_azimuth(time_of_day)
    return np.array(
        [
            math.sin(azimuth) * config.SKY_RADIUS,
            math.cos(azimuth) * config.SKY_SUN_HEIGHT,
            -math.cos(azimuth) * config.SKY_RADIUS,
        ]
    )


def sky_moon_position(time_of_day: float, moon_progress: float) -> np.ndarray:
    """Moon position on the observer's sky dome, trailing the Sun by its orbit phase."""
    azimuth = sky_sun_azimuth(time_of_day) + moon_progress * TAU
    radius = config.SKY_RADIUS - config.SKY_MOON_INSET
    return np.array(
        [
            math.sin(azimuth) * radius,
            math.cos(azimuth) * config.SKY_MOON_HEIGHT + config.SKY_MOON_LIFT,
            -math.cos(azimuth) * radius,
        ]
    )


# Seasonal figures. Each is drawn for a window of months and turns with the
# year (Earth progress) and against the hour.
CONSTELLATIONS: tuple[Constellation, ...] = (
    Constellation(
        key="leo",
        months=frozenset({2, 3, 4, 5}),
        base_angle=math.pi / 2,
        stars=(
            (0, 0), (1, 1.5), (2, 2), (2.5, 1.5), (2.5, 0), (3, -1),
            (5, -1.5), (4, -3), (3, -1),
        ),
    ),
    Constellation(
        key="big_dipper",
        months=frozenset({4, 5, 6, 7, 8}),
        base_angle=math.pi * 1.5,
        stars=(
            (0, 0), (1.5, -0.5), (3, -0.8), (4.5, -0.5),
            (5.5, 1), (6.5, 1.2), (7, -0.3), (5.5, 1),
        ),
    ),
    Constellation(
        key="pegasus",
        months=frozenset({8, 9, 10, 11}),
        base_angle=math.pi,
        stars=((0, 0), (0, 3), (3, 3), (3, 0), (0, 0), (0, 3), (-1, 4), (-1.5, 5)),
    ),
    Constellation(
        key="cassiopeia",
        months=frozenset({10, 11, 12, 1, 2}),
        base_angle=0.0,
        stars=((0, 0), (1, -1.5), (2, 0), (3, -1.5), (4, 0)),
    ),
)


def constellation_azimuth(
    base_angle: float, earth_progress: float, time_of_day: float
) -> float:
    """Sky azimuth of a constellation: base + 2π·earth progress − (t/24)·2π."""
    return base_angle + earth_progress * TAU - (time_of_day / 24) * TAU


def visible_constellations(state: CelestialState) -> list[PlacedConstellation]:
    """Constellations drawn in the observer sky for ``state``.

    None are drawn in daylight (06:00 to 18:00). At night each figure shows
    only in its months, placed on a ring around the observer.
    """
    if is_daytime(state.time):
        return []
    placed = []
    for constellation in CONSTELLATIONS:
        if state.date.month not in constellation.months:
            continue
        azimuth = constellation_azimuth(
            constellation.base_angle, state.earth_orbit_progress, state.time
        )
        placed.append(
            PlacedConstellation(
                constellation=constellation,
                azimuth=azimuth,
                position=(
                    math.sin(azimuth) * config.SKY_CONSTELLATION_RADIUS,
                    config.SKY_CONSTELLATION_HEIGHT,
                    -math.cos(azimuth) * config.SKY_CONSTELLATION_RADIUS,
                ),
            )
        )
    return placed
