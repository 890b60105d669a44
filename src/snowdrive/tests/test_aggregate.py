from datetime import timedelta, timezone

import pytest

from snowdrive.tests.test_data import DENVER, FIXED_NOW, hourly_series, local
from snowdrive.weather.aggregate import aggregate, round_half_up
from snowdrive.weather.types import HourlySeries


def test_returns_two_windows_per_day_covering_horizon() -> None:
    series = hourly_series({})
    windows = aggregate(series, DENVER, FIXED_NOW, 7)

    assert len(windows) == 14
    day_zero = local(2025, 1, 15)
    assert windows[0].start == day_zero
    assert windows[-1].end.astimezone(timezone.utc) == (day_zero + timedelta(days=7)).astimezone(timezone.utc)
    starts = [w.start for w in windows]
    assert starts == sorted(starts)


def test_empty_window_reports_zero_everywhere() -> None:
    windows = aggregate(hourly_series({}), DENVER, FIXED_NOW, 1)
    for w in windows:
        assert (w.snow_sum, w.rain_sum, w.temp_min, w.temp_max, w.wind_max) == (0, 0, 0, 0, 0)


def test_snow_sum_rounds_to_one_decimal() -> None:
    series = hourly_series({
        local(2025, 1, 15, 1): {"snow": 1.0, "temp": 20.0, "wind": 10.0, "rain": 0.0},
        local(2025, 1, 15, 2): {"snow": 0.5, "temp": 18.4, "wind": 12.6, "rain": 0.04},
        local(2025, 1, 15, 3): {"snow": 0.0, "temp": 25.5, "wind": 7.0, "rain": 0.0},
    })
    am = aggregate(series, DENVER, FIXED_NOW, 1)[0]

    assert am.snow_sum == 1.5
    assert am.rain_sum == 0.0
    assert am.temp_min == 18
    assert am.temp_max == 26   # .5 rounds up
    assert am.wind_max == 13


def test_sample_on_end_boundary_belongs_to_next_window() -> None:
    series = hourly_series({
        local(2025, 1, 15, 12): {"snow": 2.0, "temp": 30.0, "wind": 4.0, "rain": 0.0},
    })
    am, pm = aggregate(series, DENVER, FIXED_NOW, 1)

    assert am.snow_sum == 0
    assert pm.snow_sum == 2.0
    assert pm.samples == 1


def test_missing_samples_are_skipped() -> None:
    series = hourly_series({
        local(2025, 1, 15, 13): {"snow": None, "temp": None, "wind": None, "rain": None},
        local(2025, 1, 15, 14): {"snow": 0.3, "temp": 0.0, "wind": 3.0, "rain": None},
        local(2025, 1, 15, 15): {"snow": 0.2, "temp": -4.0, "wind": None, "rain": 0.1},
    })
    pm = aggregate(series, DENVER, FIXED_NOW, 1)[1]

    assert pm.snow_sum == 0.5
    assert pm.rain_sum == 0.1
    # 0°F is a real reading, not a gap
    assert pm.temp_min == -4
    assert pm.temp_max == 0
    assert pm.wind_max == 3


def test_samples_outside_horizon_are_ignored() -> None:
    series = hourly_series({
        local(2025, 1, 14, 23): {"snow": 5.0, "temp": 1.0, "wind": 1.0, "rain": 0.0},
        local(2025, 1, 16, 0): {"snow": 5.0, "temp": 1.0, "wind": 1.0, "rain": 0.0},
    })
    windows = aggregate(series, DENVER, FIXED_NOW, 1)
    assert sum(w.snow_sum for w in windows) == 0


def test_mismatched_series_lengths_are_rejected() -> None:
    with pytest.raises(ValueError):
        HourlySeries(
            time=[local(2025, 1, 15, 1), local(2025, 1, 15, 2)],
            temperature=[1.0, 2.0],
            snowfall=[0.0],
            rain=[0.0, 0.0],
            wind_speed=[1.0, 1.0],
        )


@pytest.mark.parametrize(
    "value,ndigits,expected",
    [(2.5, 0, 3.0), (-2.5, 0, -2.0), (0.25, 1, 0.3), (1.44, 1, 1.4), (0.1 + 0.2, 1, 0.3)],
)
def test_round_half_up(value: float, ndigits: int, expected: float) -> None:
    assert round_half_up(value, ndigits) == pytest.approx(expected)
