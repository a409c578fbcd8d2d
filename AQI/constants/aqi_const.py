"""Air Quality Index (AQI) constants based on EPA standards.

This module contains the concentration breakpoints and corresponding AQI values
for the six criteria pollutants according to the US EPA Air Quality Index.
Every table has ``BREAK_COUNT`` entries and index ``i`` of a pollutant table
lines up with index ``i`` of ``AQI_BREAKS``.

References:
    - EPA AQI Technical Assistance Document: https://www.airnow.gov/aqi/aqi-basics/
    - EPA AQI Breakpoints: https://www.airnow.gov/sites/default/files/2020-05/aqi-technical-assistance-document-sept2018.pdf
"""

from AQI.utils.breakpoints import Breakpoint
from AQI.utils.indices import AQICategory

BREAK_COUNT = 7

# AQI value range for each breakpoint index
AQI_BREAKS = (
    Breakpoint(0, 50),
    Breakpoint(51, 100),
    Breakpoint(101, 150),
    Breakpoint(151, 200),
    Breakpoint(201, 300),
    Breakpoint(301, 400),
    Breakpoint(401, 500),
)

# PM2.5 (Fine Particulate Matter, µg/m³)
# Breakpoints for 24-hour average PM2.5 concentrations
PM2_5_BREAKS = (
    Breakpoint(0.0, 12.0),
    Breakpoint(12.1, 35.4),
    Breakpoint(35.5, 55.4),
    Breakpoint(55.5, 150.4),
    Breakpoint(150.5, 250.4),
    Breakpoint(250.5, 350.4),
    Breakpoint(350.5, 500.4),
)

# PM10 (Coarse Particulate Matter, µg/m³)
# Breakpoints for 24-hour average PM10 concentrations
PM10_BREAKS = (
    Breakpoint(0, 54),
    Breakpoint(55, 154),
    Breakpoint(155, 254),
    Breakpoint(255, 354),
    Breakpoint(355, 424),
    Breakpoint(425, 504),
    Breakpoint(505, 604),
)

# O3 (Ozone, ppm)
# Breakpoints for 8-hour average ozone concentrations.
# The 8-hour table stops at 0.200 ppm; the last two rows are the 1-hour
# values, filling slots the EPA leaves undefined.
O3_8H_BREAKS = (
    Breakpoint(0.000, 0.054),
    Breakpoint(0.055, 0.070),
    Breakpoint(0.071, 0.085),
    Breakpoint(0.086, 0.105),
    Breakpoint(0.106, 0.200),
    Breakpoint(0.405, 0.504),
    Breakpoint(0.505, 0.604),
)

# O3 (Ozone, ppm)
# Breakpoints for 1-hour average ozone concentrations.
# The first two rows are undefined for 1-hour averages and use the 8-hour
# lower bound with the 1-hour upper bound.
O3_1H_BREAKS = (
    Breakpoint(0.000, 0.054),
    Breakpoint(0.055, 0.124),
    Breakpoint(0.125, 0.164),
    Breakpoint(0.165, 0.204),
    Breakpoint(0.205, 0.404),
    Breakpoint(0.405, 0.504),
    Breakpoint(0.505, 0.604),
)

# CO (Carbon Monoxide, ppm)
# Breakpoints for 8-hour average CO concentrations
CO_BREAKS = (
    Breakpoint(0.0, 4.4),
    Breakpoint(4.5, 9.4),
    Breakpoint(9.5, 12.4),
    Breakpoint(12.5, 15.4),
    Breakpoint(15.5, 30.4),
    Breakpoint(30.5, 40.4),
    Breakpoint(40.5, 50.4),
)

# SO2 (Sulfur Dioxide, ppb)
# Breakpoints for 1-hour average SO2 concentrations
SO2_BREAKS = (
    Breakpoint(0, 35),
    Breakpoint(36, 75),
    Breakpoint(76, 185),
    Breakpoint(186, 304),
    Breakpoint(305, 604),
    Breakpoint(605, 804),
    Breakpoint(805, 1004),
)

# NO2 (Nitrogen Dioxide, ppb)
# Breakpoints for 1-hour average NO2 concentrations
NO2_BREAKS = (
    Breakpoint(0, 53),
    Breakpoint(54, 100),
    Breakpoint(101, 360),
    Breakpoint(361, 649),
    Breakpoint(650, 1249),
    Breakpoint(1250, 1649),
    Breakpoint(1650, 2049),
)

# Table names used in log messages and errors
TABLE_NAMES = {
    AQI_BREAKS: "aqi",
    PM2_5_BREAKS: "pm2_5",
    PM10_BREAKS: "pm10",
    O3_8H_BREAKS: "o3_8h",
    O3_1H_BREAKS: "o3_1h",
    CO_BREAKS: "co",
    SO2_BREAKS: "so2",
    NO2_BREAKS: "no2",
}

# Truncated 8-hour ozone above this (ppm) is looked up in the 1-hour table
O3_8H_MAX_PPM = 0.2

CATEGORY_LABELS = {
    AQICategory.GOOD: "Good",
    AQICategory.MODERATE: "Moderate",
    AQICategory.UNHEALTHY_SENSITIVE: "Unhealthy for Sensitive Groups",
    AQICategory.UNHEALTHY: "Unhealthy",
    AQICategory.VERY_UNHEALTHY: "Very Unhealthy",
    AQICategory.HAZARDOUS: "Hazardous",
}

# AQI breakpoint index -> category; the two top rows are both Hazardous
BREAK_CATEGORIES = (
    AQICategory.GOOD,
    AQICategory.MODERATE,
    AQICategory.UNHEALTHY_SENSITIVE,
    AQICategory.UNHEALTHY,
    AQICategory.VERY_UNHEALTHY,
    AQICategory.HAZARDOUS,
    AQICategory.HAZARDOUS,
)
