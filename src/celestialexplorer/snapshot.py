"""CLI entry point for universe map snapshots.

    uv run celestial-snapshot --date 2025-07-02 --time 21:30
"""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from celestialexplorer import config  # noqa: E402
from celestialexplorer.models import SetMoonOrbit  # noqa: E402
from celestialexplorer.parsing import format_time  # noqa: E402
from celestialexplorer.phases import phase_label  # noqa: E402
from celestialexplorer.renderers.static import save_static_chart  # noqa: E402
from celestialexplorer.store import CelestialStore  # noqa: E402

logger = logging.getLogger("celestialexplorer.snapshot")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Save a PNG of the Sun/Earth/Moon map.")
    parser.add_argument("--date", help="YYYY-MM-DD (default: epoch date)")
    parser.add_argument("--time", help="HH:MM (default: epoch time)")
    parser.add_argument("--moon", type=float, help="Override Moon orbit progress [0, 1)")
    parser.add_argument(
        "--ticks", type=int, default=0, help="Advance the clock this many ticks first"
    )
    parser.add_argument("--output", type=Path, help="Destination PNG path")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT
    )
    args = build_parser().parse_args(argv)
    config.validate_settings()

    store = CelestialStore()
    if args.date and not store.edit_date(args.date):
        logger.error("Invalid date: %s", args.date)
        return 2
    if args.time and not store.edit_time(args.time):
        logger.error("Invalid time: %s", args.time)
        return 2
    if args.moon is not None:
        if not store.set_state(SetMoonOrbit(args.moon)):
            logger.error("Invalid Moon progress: %s", args.moon)
            return 2
    state = store.clock.catch_up(store.get_state(), args.ticks)

    path = save_static_chart(state, args.output)
    logger.info(
        "%s %s  earth=%.1f%%  moon=%.1f%%  %s",
        state.date,
        format_time(state.time),
        state.earth_orbit_progress * 100,
        state.moon_orbit_progress * 100,
        phase_label(state.moon_orbit_progress),
    )
    logger.info("Saved: %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
