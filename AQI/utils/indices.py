"""Indices used for pollutant channels and AQI categories."""
from enum import IntEnum


class Pollutant(IntEnum):
    """Pollutant channels, in the order the total AQI aggregates them."""

    PM2_5 = 0
    PM10 = 1
    O3 = 2
    CO = 3
    SO2 = 4
    NO2 = 5


class AQICategory(IntEnum):
    """AQI categories, numbered by their position in the AQI breakpoint table."""

    GOOD = 0
    MODERATE = 1
    UNHEALTHY_SENSITIVE = 2
    UNHEALTHY = 3
    VERY_UNHEALTHY = 4
    HAZARDOUS = 5

    @property
    def label(self) -> str:
        from AQI.constants.aqi_const import CATEGORY_LABELS

        return CATEGORY_LABELS[self]
