"""Drag inversion — recover an orbit phase from a world-space pointer position."""

import logging
import math
from collections.abc import Callable

from celestialexplorer import config
from celestialexplorer.angles import angle_to_progress
from celestialexplorer.geometry import angle_to_sun, earth_position
from celestialexplorer.models import (
    CelestialState,
    DragTarget,
    SetEarthOrbit,
    SetMoonOrbit,
    StatePatch,
    WorldPoint,
)
from celestialexplorer.parsing import require_finite

logger = logging.getLogger(__name__)


def plane_angle(x: float, z: float) -> float:
    """Angle of (x, z) in the clockwise convention of ``geometry``."""
    return math.atan2(-z, x)


def invert_earth_drag(point: WorldPoint) -> float:
    """Earth orbit progress that puts Earth in the direction of ``point``.

    Only the direction from the Sun matters; the pointer need not sit on the
    orbit ring.
    """
    return angle_to_progress(plane_angle(point.x, point.z))


def invert_moon_drag(
    point: WorldPoint,
    earth_progress: float,
    earth_orbit_radius: float = config.EARTH_ORBIT_RADIUS,
) -> float:
    """Moon orbit progress that puts the Moon in the direction of ``point`` from Earth.

    Earth's position is recomputed from ``earth_progress``, so callers must
    pass the live value rather than one captured when the drag started.

    Args:
        point: Pointer position on the orbital plane.
        earth_progress: Earth's current orbit progress.
        earth_orbit_radius: Earth–Sun distance used by the projection.

    Returns:
        Moon orbit progress in [0, 1), relative to the Earth–Sun line.
    """
    ex, ez = earth_position(earth_progress, earth_orbit_radius)
    rel_angle = plane_angle(point.x - ex, point.z - ez)
    return angle_to_progress(rel_angle - angle_to_sun(ex, ez))


class DragController:
    """Modal drag state: nothing, Earth or Moon is being dragged.

    ``get_state`` is called on every pointer move so the Moon inversion uses
    Earth's live position.
    """

    def __init__(
        self,
        get_state: Callable[[], CelestialState],
        earth_orbit_radius: float = config.EARTH_ORBIT_RADIUS,
    ) -> None:
        self._get_state = get_state
        self.earth_orbit_radius = earth_orbit_radius
        self.target: DragTarget | None = None

    @property
    def active(self) -> bool:
        return self.target is not None

    @property
    def controls_enabled(self) -> bool:
        """Camera pan/zoom is suspended while a body is being dragged."""
        return self.target is None

    def begin(self, target: DragTarget) -> None:
        if self.target is not None and self.target is not target:
            logger.debug("Drag switched from %s to %s", self.target.value, target.value)
        self.target = target

    def update(self, point: WorldPoint) -> StatePatch | None:
        """Patch for the dragged body, or None when no drag is active.

        Raises:
            InputError: When the point has a non-finite coordinate.
        """
        if self.target is None:
            return None
        require_finite(point.x, point.y, point.z)
        if self.target is DragTarget.EARTH:
            return SetEarthOrbit(invert_earth_drag(point))
        state = self._get_state()
        return SetMoonOrbit(
            invert_moon_drag(point, state.earth_orbit_progress, self.earth_orbit_radius)
        )

    def end(self) -> None:
        """Release the pointer. Always clears the mode."""
        self.target = None
