"""US EPA Air Quality Index from pollutant concentrations."""

from .calculator import (
    aqi_array,
    aqi_category,
    calculate_aqi,
    get_1h_ozone_aqi,
    get_8h_ozone_aqi,
    get_co_aqi,
    get_dominant_pollutant,
    get_no2_aqi,
    get_ozone_aqi,
    get_pm10_aqi,
    get_pm2_5_aqi,
    get_pm_aqi,
    get_so2_aqi,
    get_total_aqi,
)
from .errors import AQIError, ConcentrationOutOfRangeError, InvalidConcentrationError
from .utils import AQICategory, Breakpoint, Pollutant, setup_logging

__all__ = [
    "aqi_array",
    "aqi_category",
    "calculate_aqi",
    "get_1h_ozone_aqi",
    "get_8h_ozone_aqi",
    "get_co_aqi",
    "get_dominant_pollutant",
    "get_no2_aqi",
    "get_ozone_aqi",
    "get_pm10_aqi",
    "get_pm2_5_aqi",
    "get_pm_aqi",
    "get_so2_aqi",
    "get_total_aqi",
    "AQIError",
    "ConcentrationOutOfRangeError",
    "InvalidConcentrationError",
    "AQICategory",
    "Breakpoint",
    "Pollutant",
    "setup_logging",
]
