"""Wrap-around helpers shared by the clock, geometry and classifier.

Every periodic quantity in the model (time of day, orbit progress, angles) is
wrapped with a true modulo, never clamped. Python's ``%`` already returns a
non-negative result for a positive modulus, but a tiny negative input can
round up to exactly the modulus (``-1e-18 % 1.0 == 1.0``); :func:`wrap`
folds that case back to zero so the half-open interval holds.
"""

import math

TAU = 2 * math.pi


def wrap(value: float, period: float) -> float:
    """Return ``value`` wrapped into ``[0, period)``."""
    wrapped = value % period
    if wrapped >= period:
        return 0.0
    return wrapped


def wrap_unit(value: float) -> float:
    """Wrap a progress fraction into ``[0, 1)``."""
    return wrap(value, 1.0)


def wrap_hours(value: float) -> float:
    """Wrap an hour value into ``[0, 24)``."""
    return wrap(value, 24.0)


def wrap_degrees(value: float) -> float:
    """Wrap an angle in degrees into ``[0, 360)``."""
    return wrap(value, 360.0)


def angle_to_progress(angle: float) -> float:
    """Map an angle in radians to an orbit progress in ``[0, 1)``."""
    return wrap_unit(angle / TAU)


def signed_delta_degrees(angle: float) -> float:
    """Return ``angle`` wrapped to ``[-180, 180)``."""
    wrapped = wrap_degrees(angle)
    if wrapped >= 180.0:
        return wrapped - 360.0
    return wrapped
