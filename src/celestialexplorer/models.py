"""Data model definitions — the celestial state, its patches, and shared value types."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class CelestialState:
    """The single source of truth. Replaced wholesale by its owner, never mutated."""

    time: float  # Hours within the day, [0, 24)
    date: date  # Calendar date, advances when time wraps past 24
    earth_orbit_progress: float  # Fraction of an Earth orbit, [0, 1)
    moon_orbit_progress: float  # Fraction of a Moon orbit relative to the Earth–Sun line, [0, 1)


class DragTarget(Enum):
    """Body that a pointer drag moves."""

    EARTH = "earth"
    MOON = "moon"


class PhaseName(Enum):
    """The 8 named Moon phase buckets."""

    NEW_MOON = "new_moon"
    WAXING_CRESCENT = "waxing_crescent"
    FIRST_QUARTER = "first_quarter"
    WAXING_GIBBOUS = "waxing_gibbous"
    FULL_MOON = "full_moon"
    WANING_GIBBOUS = "waning_gibbous"
    LAST_QUARTER = "last_quarter"
    WANING_CRESCENT = "waning_crescent"


@dataclass(frozen=True)
class WorldPoint:
    """A point in world space. The orbital plane is y=0, seen from above along -y."""

    x: float
    y: float
    z: float


# --- State patches: one case per settable field ---


@dataclass(frozen=True)
class SetTime:
    """Replace the time of day (hours). Wrapped into [0, 24)."""

    hours: float


@dataclass(frozen=True)
class SetDate:
    """Jump to a calendar date. Orbit progress is re-derived from the date."""

    date: date


@dataclass(frozen=True)
class SetEarthOrbit:
    """Replace Earth's orbit progress. Wrapped into [0, 1)."""

    progress: float


@dataclass(frozen=True)
class SetMoonOrbit:
    """Replace the Moon's orbit progress. Wrapped into [0, 1)."""

    progress: float


StatePatch = SetTime | SetDate | SetEarthOrbit | SetMoonOrbit


@dataclass(frozen=True)
class BodyLayout:
    """World-space placement of every body for one state. Input to renderers."""

    earth: tuple[float, float]  # Earth centre (x, z)
    moon: tuple[float, float]  # Moon centre (x, z), world frame
    moon_local: tuple[float, float]  # Moon relative to Earth centre (x, z)
    view_marker_local: tuple[float, float]  # Observer marker relative to Earth centre (x, z)
    angle_to_sun: float  # Radians, direction from Earth to the Sun
    moon_world_angle: float  # Radians, Moon's angle around Earth in world frame
    earth_orbit_radius: float
    moon_orbit_radius: float


@dataclass(frozen=True)
class TerminatorShadow:
    """Half-sphere occluder approximating the unlit part of the Moon disc."""

    offset_x: float  # Occluder centre offset from the Moon centre (scene units)
    covers: str  # "left" or "right" hemisphere


@dataclass(frozen=True)
class MoonLight:
    """Directional light that shapes the Moon in the observer sky."""

    position: tuple[float, float, float]  # Light position relative to the Moon
    intensity: float


@dataclass(frozen=True)
class MoonAppearance:
    """Everything a renderer needs to draw the Moon for one state."""

    phase: PhaseName
    progress: float  # Normalized moon orbit progress
    visible: bool
    daytime: bool
    shadow: TerminatorShadow | None


@dataclass(frozen=True)
class OverlayAngles:
    """CSS-rotation angles (degrees) for the 2D mini-map overlay."""

    earth_deg: float  # rotate() applied to the Earth arm around the Sun
    moon_deg: float  # Absolute Moon angle in overlay handedness
    moon_relative_deg: float  # rotate() applied to the Moon arm inside the Earth arm


@dataclass(frozen=True)
class WorldAngles:
    """Angles (radians) as seen by the top-down world projection."""

    earth: float  # Earth's angle around the Sun in the clockwise convention (2πp)
    moon: float  # Moon's world angle around Earth


@dataclass(frozen=True)
class Constellation:
    """A seasonal stick-figure constellation for the observer sky."""

    key: str  # i18n suffix, e.g. "leo" -> "constellation_leo"
    months: frozenset[int]  # Calendar months (1-12) in which it is drawn
    base_angle: float  # Azimuth offset (radians) at earth progress 0, midnight
    stars: tuple[tuple[float, float], ...]  # Figure polyline in star units, (x, y)


@dataclass(frozen=True)
class PlacedConstellation:
    """A constellation positioned on the sky dome for one state."""

    constellation: Constellation
    azimuth: float
    position: tuple[float, float, float]  # Figure origin (x, y, z) in sky units
