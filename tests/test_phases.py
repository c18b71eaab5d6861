"""Tests for Moon phase classification and the lighting policy."""
import numpy as np
import pytest

from celestialexplorer.models import PhaseName
from celestialexplorer.phases import (
    classify,
    distance_from_new,
    is_daytime,
    is_moon_visible,
    moon_appearance,
    moon_light,
    normalize_progress,
    observer_phase,
    phase_label,
    terminator_shadow,
)


class TestNormalize:

    @pytest.mark.parametrize(
        "raw, expected",
        [(0.25, 0.25), (1.25, 0.25), (-0.25, 0.75), (-3.9, 0.1), (7.0, 0.0)],
    )
    def test_wraps(self, raw, expected):
        assert normalize_progress(raw) == pytest.approx(expected)

    def test_in_range_values_are_untouched(self):
        for p in (0.03, 0.22, 0.28, 0.47, 0.53, 0.72, 0.78, 0.97):
            assert normalize_progress(p) == p

    def test_tiny_negative_stays_half_open(self):
        p = normalize_progress(-1e-18)
        assert 0.0 <= p < 1.0


class TestClassify:

    @pytest.mark.parametrize(
        "p, expected",
        [
            (0.0, PhaseName.NEW_MOON),
            (0.029, PhaseName.NEW_MOON),
            (0.03, PhaseName.WAXING_CRESCENT),
            (0.1, PhaseName.WAXING_CRESCENT),
            (0.22, PhaseName.FIRST_QUARTER),
            (0.25, PhaseName.FIRST_QUARTER),
            (0.28, PhaseName.WAXING_GIBBOUS),
            (0.47, PhaseName.FULL_MOON),
            (0.5, PhaseName.FULL_MOON),
            (0.53, PhaseName.WANING_GIBBOUS),
            (0.72, PhaseName.LAST_QUARTER),
            (0.78, PhaseName.WANING_CRESCENT),
            (0.97, PhaseName.WANING_CRESCENT),
            (0.9701, PhaseName.NEW_MOON),
            (0.999, PhaseName.NEW_MOON),
        ],
    )
    def test_buckets(self, p, expected):
        assert classify(p) is expected

    def test_negative_and_large_inputs(self):
        assert classify(-0.25) is PhaseName.LAST_QUARTER
        assert classify(1.5) is PhaseName.FULL_MOON
        assert classify(-1.0) is PhaseName.NEW_MOON

    def test_total_over_a_dense_grid(self):
        for i in range(-2000, 2000):
            assert isinstance(classify(i / 997), PhaseName)


class TestLabels:

    def test_observer_labels(self):
        assert phase_label(0.1) == "Waxing Crescent"
        assert phase_label(0.1, "ko") == "초승달 (Waxing Crescent)"
        assert phase_label(0.0, "ko") == "삭 (New Moon)"

    def test_overhead_labels_swap_waxing_and_waning(self):
        assert observer_phase(0.1, overhead=True) is PhaseName.WANING_CRESCENT
        assert observer_phase(0.25, overhead=True) is PhaseName.LAST_QUARTER
        assert observer_phase(0.35, overhead=True) is PhaseName.WANING_GIBBOUS
        assert observer_phase(0.6, overhead=True) is PhaseName.WAXING_GIBBOUS
        assert observer_phase(0.75, overhead=True) is PhaseName.FIRST_QUARTER
        assert observer_phase(0.9, overhead=True) is PhaseName.WAXING_CRESCENT
        assert phase_label(0.1, "ko", overhead=True) == "그믐달 (Waning Crescent)"

    def test_overhead_keeps_new_and_full(self):
        assert observer_phase(0.0, overhead=True) is PhaseName.NEW_MOON
        assert observer_phase(0.5, overhead=True) is PhaseName.FULL_MOON


class TestVisibility:

    def test_daytime_window(self):
        assert is_daytime(6.0)
        assert is_daytime(17.99)
        assert not is_daytime(18.0)
        assert not is_daytime(5.99)

    def test_new_moon_never_visible(self):
        assert not is_moon_visible(0.0, 21.0)
        assert not is_moon_visible(0.98, 12.0)

    def test_waxing_crescent_only_after_sunset(self):
        assert not is_moon_visible(0.1, 12.0)
        assert not is_moon_visible(0.1, 3.0)
        assert is_moon_visible(0.1, 18.0)
        assert is_moon_visible(0.1, 23.9)

    def test_other_phases_always_visible(self):
        assert is_moon_visible(0.5, 12.0)
        assert is_moon_visible(0.9, 3.0)


class TestTerminatorShadow:

    @pytest.mark.parametrize(
        "p, offset, covers",
        [(0.1, -13.0, "left"), (0.25, -9.0, "left"), (0.75, 9.0, "right"), (0.9, 13.0, "right")],
    )
    def test_crescents_and_quarters(self, p, offset, covers):
        shadow = terminator_shadow(p)
        assert shadow is not None
        assert shadow.offset_x == offset
        assert shadow.covers == covers

    @pytest.mark.parametrize("p", [0.0, 0.35, 0.5, 0.6])
    def test_no_shadow(self, p):
        assert terminator_shadow(p) is None


class TestMoonLight:
    SUN = np.array([0.0, 0.0, 100.0])
    MOON = np.array([0.0, 0.0, 0.0])
    CAMERA = np.array([0.0, -10.0, 0.0])

    def test_distance_from_new(self):
        assert distance_from_new(0.1) == pytest.approx(0.1)
        assert distance_from_new(0.9) == pytest.approx(0.1)
        assert distance_from_new(0.5) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "p, intensity",
        [(0.0, 0.0), (0.004, 0.0), (0.996, 0.0), (0.005, 80.0), (0.05, 80.0), (0.1, 30.0), (0.5, 30.0)],
    )
    def test_intensity_thresholds(self, p, intensity):
        assert moon_light(p, self.SUN, self.MOON, self.CAMERA).intensity == intensity

    def test_no_push_away_from_new(self):
        light = moon_light(0.5, self.SUN, self.MOON, self.CAMERA)
        assert light.position == pytest.approx((0.0, 0.0, 100.0))

    def test_no_push_at_threshold(self):
        light = moon_light(0.25, self.SUN, self.MOON, self.CAMERA)
        assert light.position == pytest.approx((0.0, 0.0, 100.0))

    def test_crescent_pushed_along_camera_ray(self):
        light = moon_light(0.1, self.SUN, self.MOON, self.CAMERA)
        push = 1.15 * (1 - 0.1 / 0.25) ** 0.6 * 100
        assert light.position == pytest.approx((0.0, push, 100.0))

    def test_push_grows_as_crescent_thins(self):
        thick = moon_light(0.2, self.SUN, self.MOON, self.CAMERA)
        thin = moon_light(0.02, self.SUN, self.MOON, self.CAMERA)
        assert thin.position[1] > thick.position[1]


class TestAppearance:

    def test_bundles_policy(self):
        look = moon_appearance(1.1, 20.0)
        assert look.phase is PhaseName.WAXING_CRESCENT
        assert look.progress == pytest.approx(0.1)
        assert look.visible
        assert not look.daytime
        assert look.shadow is not None
