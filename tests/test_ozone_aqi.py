"""Tests for the dual-window ozone AQI policy."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from AQI.calculator import calculate_aqi, get_1h_ozone_aqi, get_8h_ozone_aqi, get_ozone_aqi
from AQI.constants.aqi_const import O3_1H_BREAKS, O3_8H_BREAKS


class TestEightHourOzone:
    def test_below_switchover_uses_8h_table(self):
        assert get_8h_ozone_aqi(0.199) == calculate_aqi(0.199, O3_8H_BREAKS)
        assert get_8h_ozone_aqi(0.199) == 299

    def test_switchover_boundary_stays_on_8h_table(self):
        assert get_8h_ozone_aqi(0.200) == 300
        # Truncates to 0.200
        assert get_8h_ozone_aqi(0.2009) == 300

    def test_above_switchover_uses_1h_table(self):
        assert get_8h_ozone_aqi(0.201) == calculate_aqi(0.201, O3_1H_BREAKS)
        assert get_8h_ozone_aqi(0.201) == 196

    def test_truncates_to_three_places(self):
        assert get_8h_ozone_aqi(0.0759) == get_8h_ozone_aqi(0.075)
        assert get_8h_ozone_aqi(0.075) == 115


class TestOneHourOzone:
    def test_always_uses_1h_table(self):
        for value in (0.05, 0.1, 0.15, 0.3):
            assert get_1h_ozone_aqi(value) == calculate_aqi(value, O3_1H_BREAKS)

    def test_computes_below_defined_floor(self):
        """Below 0.125 ppm the 1-hour AQI is undefined but still reported."""
        assert get_1h_ozone_aqi(0.1) == 83
        assert get_1h_ozone_aqi(0.085) == 72

    def test_upper_rows(self):
        assert get_1h_ozone_aqi(0.3) == 248
        assert get_1h_ozone_aqi(0.405) == 301


class TestOzoneAQI:
    def test_returns_worse_window(self):
        assert get_ozone_aqi(0.075, 0.085) == max(get_8h_ozone_aqi(0.075), get_1h_ozone_aqi(0.085))
        assert get_ozone_aqi(0.075, 0.085) == 115

    def test_1h_window_can_dominate(self):
        assert get_ozone_aqi(0.05, 0.3) == 248

    @pytest.mark.parametrize("raw_8h,raw_1h", [(0, 0), (0.054, 0), (0, 0.054)])
    def test_good_range(self, raw_8h, raw_1h):
        assert get_ozone_aqi(raw_8h, raw_1h) <= 50
