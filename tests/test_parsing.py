"""Tests for date/time input parsing and formatting."""
import datetime
import math

import pytest

from celestialexplorer.parsing import (
    InputError,
    format_date,
    format_time,
    parse_date,
    parse_time,
    require_finite,
)


class TestParseTime:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00", 0.0),
            ("07:30", 7.5),
            ("7:05", 7 + 5 / 60),
            (" 23:59 ", 23 + 59 / 60),
            ("07h:05", 7 + 5 / 60),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_time(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["", ":", "12", "24:00", "12:60", "1:2:3", "ab:cd"])
    def test_invalid(self, value):
        with pytest.raises(InputError):
            parse_time(value)

    @pytest.mark.parametrize("value", [None, 730, 7.5, b"07:30"])
    def test_non_string(self, value):
        with pytest.raises(InputError):
            parse_time(value)

    def test_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_time("nope")


class TestParseDate:

    def test_string(self):
        assert parse_date("2025-07-02") == datetime.date(2025, 7, 2)
        assert parse_date(" 1999-12-31 ") == datetime.date(1999, 12, 31)

    def test_passthrough(self):
        assert parse_date(datetime.date(2025, 1, 1)) == datetime.date(2025, 1, 1)
        assert parse_date(datetime.datetime(2025, 3, 4, 5, 6)) == datetime.date(2025, 3, 4)

    @pytest.mark.parametrize("value", ["", "2025-13-01", "2025-02-29", "02/07/2025", None])
    def test_invalid(self, value):
        with pytest.raises(InputError):
            parse_date(value)


class TestRequireFinite:

    def test_finite(self):
        require_finite(0.0, -1e300, 5)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        with pytest.raises(InputError):
            require_finite(1.0, value)


class TestFormatting:

    def test_format_time(self):
        assert format_time(18.0) == "18:00"
        assert format_time(7.5) == "07:30"
        assert format_time(23.999) == "23:59"

    def test_format_date(self):
        assert format_date(datetime.date(2025, 1, 2)) == "2025.01.02"
        assert format_date(datetime.date(2025, 1, 2), sep="-") == "2025-01-02"
