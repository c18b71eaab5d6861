"""Tests for the Plotly, mini-map and static PNG renderers."""
import datetime

import pytest

from celestialexplorer.models import CelestialState
from celestialexplorer.renderers import static
from celestialexplorer.renderers.minimap import render_minimap_html
from celestialexplorer.renderers.plotly_2d import (
    PICK_TRACE_NAME,
    render_sky_chart,
    render_universe_map,
)


def make_state(time: float = 18.0, earth: float = 0.0, moon: float = 0.0) -> CelestialState:
    return CelestialState(
        time=time,
        date=datetime.date(2025, 1, 1),
        earth_orbit_progress=earth,
        moon_orbit_progress=moon,
    )


def trace(fig, name):
    return next(t for t in fig.data if t.name == name)


class TestUniverseMap:

    def test_trace_names(self):
        fig = render_universe_map(make_state())
        names = [t.name for t in fig.data]
        assert names == [
            "stars",
            "earth_orbit",
            "moon_orbit",
            "sun",
            "earth",
            "view_marker",
            "moon",
            PICK_TRACE_NAME,
        ]

    def test_pick_grid_optional(self):
        fig = render_universe_map(make_state(), pick_step=None)
        assert PICK_TRACE_NAME not in [t.name for t in fig.data]

    def test_epoch_positions(self):
        fig = render_universe_map(make_state())
        earth = trace(fig, "earth")
        assert earth.x[0] == pytest.approx(350.0)
        assert earth.y[0] == pytest.approx(0.0)
        moon = trace(fig, "moon")
        assert moon.x[0] == pytest.approx(240.0)

    def test_quarter_year_is_drawn_at_the_top(self):
        earth = trace(render_universe_map(make_state(earth=0.25)), "earth")
        assert earth.x[0] == pytest.approx(0.0, abs=1e-9)
        assert earth.y[0] == pytest.approx(350.0)

    def test_mobile_scale(self):
        earth = trace(render_universe_map(make_state(), mobile=True), "earth")
        assert earth.x[0] == pytest.approx(450.0)

    def test_labels(self):
        fig = render_universe_map(make_state(moon=0.1), lang="ko")
        assert trace(fig, "earth").text[0] == "지구"
        assert fig.layout.annotations[0].text == "그믐달 (Waning Crescent)"


class TestSkyChart:

    def test_new_moon_at_dusk(self):
        fig = render_sky_chart(make_state())
        assert len(fig.layout.shapes) == 1
        assert [t.name for t in fig.data] == ["constellation_cassiopeia"]
        assert fig.layout.annotations[0].text == "New Moon"

    def test_evening_crescent(self):
        fig = render_sky_chart(make_state(time=20.0, moon=0.1))
        assert len(fig.layout.shapes) == 3
        assert fig.layout.annotations[0].text == "Waxing Crescent"

    def test_full_moon_at_noon(self):
        fig = render_sky_chart(make_state(time=12.0, moon=0.5))
        assert len(fig.layout.shapes) == 2
        assert [t.name for t in fig.data] == ["sun"]

    def test_constellations_hidden_by_day(self):
        fig = render_sky_chart(make_state(time=12.0, moon=0.5))
        assert not [t for t in fig.data if t.name.startswith("constellation_")]

    def test_constellation_label_and_placement(self):
        fig = render_sky_chart(make_state(time=0.0, earth=0.25), lang="ko")
        cassiopeia = trace(fig, "constellation_cassiopeia")
        assert cassiopeia.text[0] == "카시오페아"
        assert cassiopeia.x[0] == pytest.approx(400.0)
        assert cassiopeia.y[0] == pytest.approx(150.0)
        assert len(cassiopeia.x) == 5

    def test_crescent_hidden_in_daylight(self):
        fig = render_sky_chart(make_state(time=12.0, moon=0.1))
        assert len(fig.layout.shapes) == 1


class TestMinimap:

    def test_rotations(self):
        page = render_minimap_html(make_state(earth=0.25, moon=0.5))
        assert "rotate(-90.0000deg) translateX(96px)" in page
        assert "rotate(-180.0000deg) translateX(50px)" in page

    def test_mobile_arms(self):
        page = render_minimap_html(make_state(earth=0.25, moon=0.5), mobile=True)
        assert "rotate(-90.0000deg) translateX(64px)" in page
        assert "rotate(-180.0000deg) translateX(38px)" in page

    def test_explicit_arms_override_layout(self):
        page = render_minimap_html(make_state(), mobile=True, earth_arm_px=120)
        assert "translateX(120px)" in page
        assert "translateX(38px)" in page

    def test_caption(self):
        page = render_minimap_html(make_state(time=7.5, moon=0.1))
        assert "2025.01.01 07:30" in page
        assert "Waning Crescent" in page

    def test_korean(self):
        page = render_minimap_html(make_state(), lang="ko")
        assert "삭 (New Moon)" in page


class TestStaticChart:

    def test_save(self, tmp_path):
        path = static.save_static_chart(make_state(moon=0.3), tmp_path / "out" / "map.png")
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.setattr(static, "_ROOT", tmp_path)
        path = static.save_static_chart(make_state())
        assert path == tmp_path / "results" / "universe__2025_01_01_18_00.png"
        assert path.exists()
