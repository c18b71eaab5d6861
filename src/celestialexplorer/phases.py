"""Moon phase classification and the lighting/visibility policy derived from it."""

import numpy as np

from celestialexplorer.angles import wrap_unit
from celestialexplorer.i18n import t
from celestialexplorer.models import (
    MoonAppearance,
    MoonLight,
    PhaseName,
    TerminatorShadow,
)

# Upper bounds of the half-open buckets, in progress order. Anything above
# the last bound wraps back to New Moon.
_BUCKETS: tuple[tuple[float, PhaseName], ...] = (
    (0.03, PhaseName.NEW_MOON),
    (0.22, PhaseName.WAXING_CRESCENT),
    (0.28, PhaseName.FIRST_QUARTER),
    (0.47, PhaseName.WAXING_GIBBOUS),
    (0.53, PhaseName.FULL_MOON),
    (0.72, PhaseName.WANING_GIBBOUS),
    (0.78, PhaseName.LAST_QUARTER),
    (0.97, PhaseName.WANING_CRESCENT),
)

# The overhead map narrates the same ranges from the Sun's side of the orbit,
# so waxing/waning and first/last quarter trade places there.
_OVERHEAD_SWAP: dict[PhaseName, PhaseName] = {
    PhaseName.WAXING_CRESCENT: PhaseName.WANING_CRESCENT,
    PhaseName.WANING_CRESCENT: PhaseName.WAXING_CRESCENT,
    PhaseName.FIRST_QUARTER: PhaseName.LAST_QUARTER,
    PhaseName.LAST_QUARTER: PhaseName.FIRST_QUARTER,
    PhaseName.WAXING_GIBBOUS: PhaseName.WANING_GIBBOUS,
    PhaseName.WANING_GIBBOUS: PhaseName.WAXING_GIBBOUS,
}

_SHADOWS: dict[PhaseName, TerminatorShadow] = {
    PhaseName.WAXING_CRESCENT: TerminatorShadow(offset_x=-13.0, covers="left"),
    PhaseName.FIRST_QUARTER: TerminatorShadow(offset_x=-9.0, covers="left"),
    PhaseName.LAST_QUARTER: TerminatorShadow(offset_x=9.0, covers="right"),
    PhaseName.WANING_CRESCENT: TerminatorShadow(offset_x=13.0, covers="right"),
}

# Light policy thresholds on distance from New Moon, min(p, 1 - p)
DARK_THRESHOLD = 0.005
BRIGHT_THRESHOLD = 0.1
CRESCENT_PUSH_THRESHOLD = 0.25
CRESCENT_PUSH_SCALE = 1.15
CRESCENT_PUSH_EXPONENT = 0.6
LIGHT_DISTANCE = 100.0
INTENSITY_BRIGHT = 80.0
INTENSITY_NOMINAL = 30.0


def normalize_progress(progress: float) -> float:
    """Fold any real progress, negative included, into [0, 1).

    Equivalent to ``((p % 1) + 1) % 1`` in a truncating-modulo language.
    Python's ``%`` is already floored, and skipping the ``+ 1`` keeps
    in-range values bit-identical (``(0.22 + 1) % 1 != 0.22``).
    """
    return wrap_unit(progress)


def classify(progress: float) -> PhaseName:
    """Map a Moon orbit progress to one of the 8 phase buckets.

    Buckets are half-open ``[lower, upper)``; New Moon straddles the wrap
    point (``p < 0.03`` or ``p > 0.97``).
    """
    p = normalize_progress(progress)
    for upper, name in _BUCKETS:
        if p < upper:
            return name
    if p == _BUCKETS[-1][0]:
        return PhaseName.WANING_CRESCENT
    return PhaseName.NEW_MOON


def observer_phase(progress: float, overhead: bool = False) -> PhaseName:
    """Phase as narrated from Earth, or from the overhead map when ``overhead``."""
    name = classify(progress)
    if overhead:
        return _OVERHEAD_SWAP.get(name, name)
    return name


def phase_label(progress: float, lang: str = "en", overhead: bool = False) -> str:
    """Human-readable phase name, e.g. ``"초승달 (Waxing Crescent)"`` for ``ko``."""
    name = observer_phase(progress, overhead=overhead)
    key = f"phase_{name.value}"
    english = t(key, "en")
    if lang == "en":
        return english
    return f"{t(key, lang)} ({english})"


def distance_from_new(progress: float) -> float:
    """How far the Moon is from New Moon, 0 at new and 0.5 at full."""
    p = normalize_progress(progress)
    return min(p, 1 - p)


def is_daytime(time_of_day: float) -> bool:
    """Daylight runs from 06:00 up to (not including) 18:00."""
    return 6 <= time_of_day < 18


def is_moon_visible(progress: float, time_of_day: float) -> bool:
    """Whether the Moon is drawn in the observer sky.

    New Moon is never drawn. A thin waxing crescent only shows after sunset,
    between 18:00 and midnight.
    """
    name = classify(progress)
    if name is PhaseName.NEW_MOON:
        return False
    if name is PhaseName.WAXING_CRESCENT:
        return 18 <= time_of_day < 24
    return True


def terminator_shadow(progress: float) -> TerminatorShadow | None:
    """Occluder that darkens part of the Moon disc, or None when none is drawn."""
    return _SHADOWS.get(classify(progress))


def _unit(v: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    if norm == 0.0:
        return np.zeros(3)
    return v / norm


def moon_light(
    progress: float,
    sun_position: np.ndarray,
    moon_position: np.ndarray,
    camera_position: np.ndarray,
) -> MoonLight:
    """Directional light that shapes the Moon disc.

    The light sits on the Sun side of the Moon. Within a quarter orbit of New
    Moon it is pushed toward the camera-to-Moon direction, harder the thinner
    the crescent, so the sliver stays visible. That push is a rendering
    compensation and only applies below ``CRESCENT_PUSH_THRESHOLD``.

    Args:
        progress: Moon orbit progress.
        sun_position: Sun position in the observer sky.
        moon_position: Moon position in the observer sky.
        camera_position: Observer camera position.

    Returns:
        MoonLight with position relative to the Moon and intensity.
    """
    sun = np.asarray(sun_position, dtype=float)
    moon = np.asarray(moon_position, dtype=float)
    camera = np.asarray(camera_position, dtype=float)

    d = distance_from_new(progress)
    light = _unit(sun - moon) * LIGHT_DISTANCE
    if d < CRESCENT_PUSH_THRESHOLD:
        thinning = (1 - d / CRESCENT_PUSH_THRESHOLD) ** CRESCENT_PUSH_EXPONENT
        light = light + _unit(moon - camera) * (CRESCENT_PUSH_SCALE * thinning * LIGHT_DISTANCE)

    if d < DARK_THRESHOLD:
        intensity = 0.0
    elif d < BRIGHT_THRESHOLD:
        intensity = INTENSITY_BRIGHT
    else:
        intensity = INTENSITY_NOMINAL

    return MoonLight(
        position=(float(light[0]), float(light[1]), float(light[2])),
        intensity=intensity,
    )


def moon_appearance(progress: float, time_of_day: float) -> MoonAppearance:
    """Bundle phase, visibility and shading for one state."""
    return MoonAppearance(
        phase=classify(progress),
        progress=normalize_progress(progress),
        visible=is_moon_visible(progress, time_of_day),
        daytime=is_daytime(time_of_day),
        shadow=terminator_shadow(progress),
    )
