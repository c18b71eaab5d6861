"""Runtime settings — module constants, a few overridable from the environment.

Entry points call ``load_dotenv()`` before importing this module, so values in
a local ``.env`` file are picked up the same way as real environment variables.
Orbital periods are fixed model constants and live in ``clock``, not here.
"""

import datetime
import os

# --- Clock ---
# Simulated hours added per tick, and the tick period of the runtime timer.
TIME_INCREMENT: float = float(os.environ.get("CELESTIAL_TIME_INCREMENT", "0.02"))
TICK_INTERVAL_MS: int = int(os.environ.get("CELESTIAL_TICK_INTERVAL_MS", "50"))

# --- Epoch ---
EPOCH_DATE = datetime.date(2025, 1, 1)
EPOCH_TIME = 18.0

# --- Logging / UI ---
LOG_LEVEL: str = os.environ.get("CELESTIAL_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(message)s"
LOG_DATEFMT = "%H:%M:%S"
DEFAULT_LANG: str = os.environ.get("CELESTIAL_LANG", "en")

# --- Universe map scale (world units) ---
EARTH_ORBIT_RADIUS = 350.0
MOON_ORBIT_RADIUS = 110.0
SUN_RADIUS = 60.0
EARTH_RADIUS = 25.0
MOON_RADIUS = 12.0
VIEW_MARKER_RADIUS = 30.0
CAMERA_HEIGHT = 1200.0

# Mobile layout enlarges everything so the bodies stay touchable
MOBILE_EARTH_ORBIT_RADIUS = 450.0
MOBILE_MOON_ORBIT_RADIUS = 150.0
MOBILE_SUN_RADIUS = 80.0
MOBILE_EARTH_RADIUS = 35.0
MOBILE_MOON_RADIUS = 20.0
MOBILE_VIEW_MARKER_RADIUS = 35.0

# --- Mini-map overlay (CSS px) ---
MINIMAP_EARTH_ARM_PX = 96
MINIMAP_MOON_ARM_PX = 50
MOBILE_MINIMAP_EARTH_ARM_PX = 64
MOBILE_MINIMAP_MOON_ARM_PX = 38

# --- Observer sky (scene units) ---
SKY_RADIUS = 600.0
SKY_SUN_HEIGHT = 350.0
SKY_MOON_INSET = 50.0
SKY_MOON_HEIGHT = 280.0
SKY_MOON_LIFT = 50.0
SKY_CAMERA_POSITION = (0.0, 15.0, 25.0)
SKY_CONSTELLATION_RADIUS = 400.0
SKY_CONSTELLATION_HEIGHT = 150.0
SKY_CONSTELLATION_SCALE = 20.0  # Sky units per star unit


def validate_settings() -> None:
    """Raise ValueError when a setting would break the model."""
    if TICK_INTERVAL_MS <= 0:
        raise ValueError("TICK_INTERVAL_MS must be > 0")
    if TIME_INCREMENT <= 0:
        raise ValueError("TIME_INCREMENT must be > 0")
    for name in (
        "EARTH_ORBIT_RADIUS",
        "MOON_ORBIT_RADIUS",
        "SUN_RADIUS",
        "EARTH_RADIUS",
        "MOON_RADIUS",
        "MOBILE_EARTH_ORBIT_RADIUS",
        "MOBILE_MOON_ORBIT_RADIUS",
        "MINIMAP_EARTH_ARM_PX",
        "MINIMAP_MOON_ARM_PX",
        "MOBILE_MINIMAP_EARTH_ARM_PX",
        "MOBILE_MINIMAP_MOON_ARM_PX",
    ):
        if globals()[name] <= 0:
            raise ValueError(f"{name} must be > 0")
    if not 0 <= EPOCH_TIME < 24:
        raise ValueError("EPOCH_TIME must be within [0, 24)")
