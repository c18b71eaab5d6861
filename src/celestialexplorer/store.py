"""State owner — the in-process API the UI layer talks to.

The store is the only writer of the celestial state. Readers get the frozen
``CelestialState`` value; every change goes through a tick, a validated patch,
a date/time edit or a drag update.
"""

import logging
from dataclasses import replace
from datetime import date

from celestialexplorer import config
from celestialexplorer.angles import wrap_hours, wrap_unit
from celestialexplorer.clock import PhaseClock, epoch_state, resync_to_date
from celestialexplorer.drag import DragController
from celestialexplorer.models import (
    CelestialState,
    DragTarget,
    SetDate,
    SetEarthOrbit,
    SetMoonOrbit,
    SetTime,
    StatePatch,
    WorldPoint,
)
from celestialexplorer.parsing import InputError, parse_date, parse_time, require_finite

logger = logging.getLogger(__name__)


def apply_patch(state: CelestialState, patch: StatePatch) -> CelestialState:
    """Return ``state`` with one field replaced.

    Numeric fields are wrapped into their canonical ranges. ``SetDate``
    re-derives both orbit phases from the new date.

    Raises:
        InputError: On a non-finite number.
        TypeError: On anything that is not a known patch type.
    """
    match patch:
        case SetTime(hours=hours):
            require_finite(hours)
            return replace(state, time=wrap_hours(hours))
        case SetDate(date=new_date):
            return resync_to_date(state, parse_date(new_date))
        case SetEarthOrbit(progress=progress):
            require_finite(progress)
            return replace(state, earth_orbit_progress=wrap_unit(progress))
        case SetMoonOrbit(progress=progress):
            require_finite(progress)
            return replace(state, moon_orbit_progress=wrap_unit(progress))
    raise TypeError(f"Unknown state patch: {patch!r}")


class CelestialStore:
    """Owns the celestial state, the clock and the drag mode."""

    def __init__(
        self,
        state: CelestialState | None = None,
        clock: PhaseClock | None = None,
        earth_orbit_radius: float = config.EARTH_ORBIT_RADIUS,
    ) -> None:
        self._state = state if state is not None else epoch_state()
        self.clock = clock if clock is not None else PhaseClock()
        self.drag = DragController(self.get_state, earth_orbit_radius)

    def get_state(self) -> CelestialState:
        return self._state

    def set_state(self, patch: StatePatch) -> bool:
        """Merge a single-field patch. Returns False if the patch was discarded."""
        try:
            self._state = apply_patch(self._state, patch)
        except InputError as e:
            logger.debug("Discarded patch %r: %s", patch, e)
            return False
        return True

    def on_tick(self) -> CelestialState:
        """Periodic timer callback: advance one fixed step."""
        self._state = self.clock.advance(self._state)
        return self._state

    # --- Date/time editing ---

    def edit_date(self, value: str | date) -> bool:
        """Jump to a date. Malformed input is ignored and returns False."""
        try:
            new_date = parse_date(value)
        except InputError as e:
            logger.debug("Ignored date edit: %s", e)
            return False
        logger.debug("Date edit: %s", new_date)
        return self.set_state(SetDate(new_date))

    def edit_time(self, value: str) -> bool:
        """Set the time of day from ``HH:MM``. Malformed input is ignored."""
        try:
            hours = parse_time(value)
        except InputError as e:
            logger.debug("Ignored time edit: %s", e)
            return False
        logger.debug("Time edit: %s", value)
        return self.set_state(SetTime(hours))

    # --- Drag gestures ---

    @property
    def controls_enabled(self) -> bool:
        return self.drag.controls_enabled

    def begin_drag(self, target: DragTarget) -> None:
        logger.debug("Drag start: %s", target.value)
        self.drag.begin(target)

    def update_drag(self, point: WorldPoint) -> bool:
        """Move the dragged body toward ``point``. Returns True if the state changed."""
        try:
            patch = self.drag.update(point)
        except InputError as e:
            logger.debug("Ignored drag point: %s", e)
            return False
        if patch is None:
            return False
        return self.set_state(patch)

    def end_drag(self) -> None:
        if self.drag.active:
            logger.debug("Drag end")
        self.drag.end()

    def reset(self) -> None:
        """Return to the epoch and drop any drag in progress."""
        self.drag.end()
        self._state = epoch_state()
