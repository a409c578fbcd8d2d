"""Tests for invalid and out-of-table readings."""

import logging
import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from AQI.calculator import (
    get_1h_ozone_aqi,
    get_8h_ozone_aqi,
    get_co_aqi,
    get_pm10_aqi,
    get_pm2_5_aqi,
    get_total_aqi,
)
from AQI.errors import AQIError, ConcentrationOutOfRangeError, InvalidConcentrationError


@pytest.fixture(autouse=True)
def _clear_policy(monkeypatch):
    monkeypatch.delenv("AQI_RANGE_POLICY", raising=False)


class TestInvalidReadings:
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_readings_raise(self, value):
        with pytest.raises(InvalidConcentrationError):
            get_pm2_5_aqi(value)

    @pytest.mark.parametrize("value", [None, "abc", object()])
    def test_non_numeric_readings_raise(self, value):
        with pytest.raises(InvalidConcentrationError):
            get_co_aqi(value)

    def test_numeric_strings_are_accepted(self):
        assert get_co_aqi("4.4") == 50

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            get_pm2_5_aqi(math.nan)

    def test_nan_in_total_raises(self):
        with pytest.raises(InvalidConcentrationError):
            get_total_aqi(0, 0, 0, 0, 0, math.nan, 0)


class TestBelowTable:
    def test_negative_reading_raises(self):
        with pytest.raises(ConcentrationOutOfRangeError) as excinfo:
            get_pm10_aqi(-5)
        assert excinfo.value.table == "pm10"
        assert excinfo.value.value == -5

    def test_negative_reading_raises_under_any_policy(self):
        for policy in ("extrapolate", "strict"):
            with pytest.raises(ConcentrationOutOfRangeError):
                get_pm2_5_aqi(-1.0, policy=policy)

    def test_small_negative_truncates_to_zero(self):
        assert get_pm10_aqi(-0.5) == 0
        assert get_pm2_5_aqi(-0.05) == 0


class TestAboveTable:
    def test_extrapolates_by_default(self):
        assert get_pm2_5_aqi(600.0) == 566
        assert get_pm10_aqi(700) == 596

    def test_extrapolation_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="AQI.calculator"):
            get_pm2_5_aqi(600.0)
        assert "above the pm2_5 table" in caplog.text

    def test_ozone_above_both_tables(self):
        assert get_8h_ozone_aqi(0.7) > 500
        assert get_1h_ozone_aqi(0.7) == get_8h_ozone_aqi(0.7)

    def test_strict_policy_raises(self):
        with pytest.raises(ConcentrationOutOfRangeError) as excinfo:
            get_pm2_5_aqi(600.0, policy="strict")
        assert excinfo.value.table == "pm2_5"

    def test_strict_policy_from_environment(self, monkeypatch):
        monkeypatch.setenv("AQI_RANGE_POLICY", "strict")
        with pytest.raises(ConcentrationOutOfRangeError):
            get_total_aqi(0, 700, 0, 0, 0, 0, 0)
        # In-table readings are unaffected
        assert get_total_aqi(35.4, 0, 0, 0, 0, 0, 0) == 100

    def test_explicit_policy_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("AQI_RANGE_POLICY", "strict")
        assert get_pm2_5_aqi(600.0, policy="extrapolate") == 566

    def test_unknown_policy_raises(self, monkeypatch):
        monkeypatch.setenv("AQI_RANGE_POLICY", "clamp-ish")
        with pytest.raises(AQIError):
            get_pm2_5_aqi(10)
