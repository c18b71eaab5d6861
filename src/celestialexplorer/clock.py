"""Simulation clock — advances time, date and orbital phases in fixed steps.

The clock is a fixed-step simulation clock: each tick adds the same number of
simulated hours no matter how late the runtime timer fires. The runtime owns
the timer and calls :meth:`PhaseClock.advance` from its periodic callback.
"""

import logging
import math
from dataclasses import replace
from datetime import date, timedelta

from celestialexplorer import config
from celestialexplorer.angles import wrap_unit
from celestialexplorer.models import CelestialState

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24.0
EARTH_PERIOD_DAYS = 365
MOON_PERIOD_DAYS = 28  # Relative to the Earth–Sun line


def epoch_state() -> CelestialState:
    """Return the reference state all progress values are measured from."""
    return CelestialState(
        time=config.EPOCH_TIME,
        date=config.EPOCH_DATE,
        earth_orbit_progress=0.0,
        moon_orbit_progress=0.0,
    )


def orbit_progress_for_days(days: float, period_days: int) -> float:
    """Orbit progress reached ``days`` after the epoch, wrapped into [0, 1).

    Negative day counts wrap forward (``-1`` day of a 28-day orbit is 27/28).
    """
    return wrap_unit(days / period_days)


def advance(
    state: CelestialState, time_increment: float = config.TIME_INCREMENT
) -> CelestialState:
    """Advance the state by ``time_increment`` simulated hours.

    The date moves by one day per midnight crossed, so a single large step
    can roll over several days. A negative increment runs the clock backwards
    with the same wrap rules.

    Args:
        state: Current state.
        time_increment: Simulated hours to add.

    Returns:
        The advanced state.
    """
    total = state.time + time_increment
    days_crossed = math.floor(total / HOURS_PER_DAY)
    # Time and date come from the same division; 24 - ε can round to 24.0
    new_time = total - days_crossed * HOURS_PER_DAY
    if new_time < 0.0:
        new_time += HOURS_PER_DAY
        days_crossed -= 1
    if new_time >= HOURS_PER_DAY:
        new_time = 0.0
        days_crossed += 1
    new_date = state.date
    if days_crossed:
        new_date = state.date + timedelta(days=days_crossed)
        logger.debug("Day rollover: %s -> %s", state.date, new_date)

    earth_step = time_increment / (HOURS_PER_DAY * EARTH_PERIOD_DAYS)
    moon_step = time_increment / (HOURS_PER_DAY * MOON_PERIOD_DAYS)
    return CelestialState(
        time=new_time,
        date=new_date,
        earth_orbit_progress=wrap_unit(state.earth_orbit_progress + earth_step),
        moon_orbit_progress=wrap_unit(state.moon_orbit_progress + moon_step),
    )


def days_since_epoch(target: date) -> int:
    """Whole calendar days between the epoch date and ``target`` (may be negative)."""
    return (target - config.EPOCH_DATE).days


def resync_to_date(state: CelestialState, target: date) -> CelestialState:
    """Jump to ``target`` and re-derive both orbit phases from the date alone.

    Time of day is kept. Any drag-edited phase is discarded, since the date
    fully determines the configuration at a day boundary.
    """
    days = days_since_epoch(target)
    return replace(
        state,
        date=target,
        earth_orbit_progress=orbit_progress_for_days(days, EARTH_PERIOD_DAYS),
        moon_orbit_progress=orbit_progress_for_days(days, MOON_PERIOD_DAYS),
    )


class PhaseClock:
    """Fixed-step clock owned by the state store.

    Holds the step size and the tick period the runtime should schedule it
    with. There is no timer in here.
    """

    def __init__(
        self,
        time_increment: float = config.TIME_INCREMENT,
        tick_interval_ms: int = config.TICK_INTERVAL_MS,
    ) -> None:
        if not math.isfinite(time_increment):
            raise ValueError("time_increment must be finite")
        if tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be > 0")
        self.time_increment = time_increment
        self.tick_interval_ms = tick_interval_ms
        self.ticks = 0

    @property
    def tick_interval_s(self) -> float:
        return self.tick_interval_ms / 1000

    def advance(self, state: CelestialState) -> CelestialState:
        """Advance ``state`` by one tick."""
        self.ticks += 1
        return advance(state, self.time_increment)

    def catch_up(self, state: CelestialState, ticks: int) -> CelestialState:
        """Apply ``ticks`` steps at once, e.g. after the runtime skipped callbacks."""
        for _ in range(max(ticks, 0)):
            state = self.advance(state)
        return state
