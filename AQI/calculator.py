"""Convert pollutant concentrations to US EPA AQI values.

Each reading is truncated to the precision the EPA prescribes for its
pollutant, located in that pollutant's breakpoint table and linearly
interpolated onto the matching AQI segment. The reported AQI is the
highest value across all pollutants.

Units and averaging windows are fixed per pollutant:

- PM2.5: µg/m³, 24-hour
- PM10: µg/m³, 24-hour
- O3: ppm, 8-hour and 1-hour
- CO: ppm, 8-hour
- SO2: ppb, 1-hour
- NO2: ppb, 1-hour
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from AQI.constants.aqi_const import (
    AQI_BREAKS,
    BREAK_CATEGORIES,
    BREAK_COUNT,
    CO_BREAKS,
    NO2_BREAKS,
    O3_1H_BREAKS,
    O3_8H_BREAKS,
    O3_8H_MAX_PPM,
    PM10_BREAKS,
    PM2_5_BREAKS,
    SO2_BREAKS,
    TABLE_NAMES,
)
from AQI.errors import AQIError, ConcentrationOutOfRangeError, InvalidConcentrationError
from AQI.utils.breakpoints import Breakpoint, high_index, low_index
from AQI.utils.indices import AQICategory, Pollutant
from AQI.utils.settings import POLICY_STRICT, get_range_policy
from AQI.utils.truncation import trunc1dp, trunc3dp, trunc_whole

logger = logging.getLogger(__name__)


def _check_reading(raw) -> float:
    """Return ``raw`` as a float, rejecting NaN and infinities."""
    try:
        val = float(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidConcentrationError(raw) from exc
    if not math.isfinite(val):
        raise InvalidConcentrationError(raw)
    return val


def _truncated_reading(raw, truncate, table: Sequence[Breakpoint]) -> float:
    """Validate and truncate a reading for lookup in ``table``."""
    val = _check_reading(raw)
    truncated = truncate(val)
    # Scaling a huge reading to the truncation precision overflows
    if not math.isfinite(truncated):
        raise ConcentrationOutOfRangeError(val, TABLE_NAMES[table])
    return truncated


def _round_half_away(x):
    return np.copysign(np.floor(np.abs(x) + 0.5), x)


def calculate_aqi(
    val: float,
    table: Sequence[Breakpoint],
    policy: Optional[str] = None,
) -> int:
    """Calculate the AQI for a truncated concentration and breakpoint table.

    Args:
        val: Truncated concentration of the pollutant
        table: Breakpoint table aligned with ``AQI_BREAKS``
        policy: Out-of-range policy, defaults to ``AQI_RANGE_POLICY``

    Returns:
        The AQI rounded half away from zero.

    Raises:
        ConcentrationOutOfRangeError: ``val`` is below the first segment,
            above the last one under the strict policy, or so far above it
            that the extrapolated AQI overflows.
    """
    val = _check_reading(val)
    policy = get_range_policy(policy)
    table = tuple(Breakpoint(*segment) for segment in table)
    if len(table) != BREAK_COUNT:
        raise AQIError(f"Breakpoint tables need {BREAK_COUNT} entries, got {len(table)}")
    name = TABLE_NAMES.get(table, "custom")

    low_idx = low_index(val, table)
    high_idx = high_index(val, table)

    if low_idx < 0:
        raise ConcentrationOutOfRangeError(val, name)
    if high_idx >= BREAK_COUNT:
        if policy == POLICY_STRICT:
            raise ConcentrationOutOfRangeError(val, name)
        logger.warning(
            "Concentration %s is above the %s table, extrapolating the top segment",
            val,
            name,
        )
        high_idx = BREAK_COUNT - 1

    conc_lo = table[low_idx].lo
    conc_hi = table[high_idx].hi
    aqi_lo = AQI_BREAKS[low_idx].lo
    aqi_hi = AQI_BREAKS[high_idx].hi

    raw_aqi = (aqi_hi - aqi_lo) / (conc_hi - conc_lo) * (val - conc_lo) + aqi_lo
    if not math.isfinite(raw_aqi):
        raise ConcentrationOutOfRangeError(val, name)
    aqi = int(_round_half_away(raw_aqi))
    logger.debug(
        "%s: %s in [%s, %s] (idx %d-%d) -> AQI %d", name, val, conc_lo, conc_hi, low_idx, high_idx, aqi
    )
    return aqi


def get_pm2_5_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the PM2.5 AQI from a 24-hour concentration in µg/m³."""
    val = _truncated_reading(raw, trunc1dp, PM2_5_BREAKS)
    return calculate_aqi(val, PM2_5_BREAKS, policy)


def get_pm10_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the PM10 AQI from a 24-hour concentration in µg/m³."""
    val = _truncated_reading(raw, trunc_whole, PM10_BREAKS)
    return calculate_aqi(val, PM10_BREAKS, policy)


def get_8h_ozone_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the 8-hour ozone AQI from a concentration in ppm.

    This is the generally required ozone AQI. Above 0.200 ppm the 8-hour
    scale is undefined and the 1-hour table is used instead.
    """
    val = _truncated_reading(raw, trunc3dp, O3_8H_BREAKS)
    if val > O3_8H_MAX_PPM:
        return calculate_aqi(val, O3_1H_BREAKS, policy)
    return calculate_aqi(val, O3_8H_BREAKS, policy)


def get_1h_ozone_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the 1-hour ozone AQI from a concentration in ppm."""
    val = _truncated_reading(raw, trunc3dp, O3_1H_BREAKS)
    # The 1-hour AQI is undefined under 0.125 ppm, computed anyway
    return calculate_aqi(val, O3_1H_BREAKS, policy)


def get_ozone_aqi(raw_8h: float, raw_1h: float, policy: Optional[str] = None) -> int:
    """Get the ozone AQI, the worse of the 8-hour and 1-hour values."""
    aqi_8h = get_8h_ozone_aqi(raw_8h, policy)
    aqi_1h = get_1h_ozone_aqi(raw_1h, policy)
    return max(aqi_8h, aqi_1h)


def get_co_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the CO AQI from an 8-hour concentration in ppm."""
    val = _truncated_reading(raw, trunc1dp, CO_BREAKS)
    return calculate_aqi(val, CO_BREAKS, policy)


def get_so2_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the SO2 AQI from a 1-hour concentration in ppb."""
    val = _truncated_reading(raw, trunc_whole, SO2_BREAKS)
    return calculate_aqi(val, SO2_BREAKS, policy)


def get_no2_aqi(raw: float, policy: Optional[str] = None) -> int:
    """Get the NO2 AQI from a 1-hour concentration in ppb."""
    val = _truncated_reading(raw, trunc_whole, NO2_BREAKS)
    return calculate_aqi(val, NO2_BREAKS, policy)


def get_pm_aqi(raw_pm25: float, raw_pm10: float, policy: Optional[str] = None) -> int:
    """Get the particulate-only AQI, the worse of PM2.5 and PM10."""
    pm25 = _check_reading(raw_pm25)
    pm10 = _check_reading(raw_pm10)
    aqi = max(get_pm2_5_aqi(pm25, policy), get_pm10_aqi(pm10, policy))
    logger.info("Computed AQI: %d from %.2f PM2.5 and %.2f PM10", aqi, pm25, pm10)
    return aqi


def _channel_aqis(
    raw_pm25: float,
    raw_pm10: float,
    raw_o3_1h: float,
    raw_o3_8h: float,
    raw_co: float,
    raw_so2: float,
    raw_no2: float,
    policy: Optional[str],
) -> Dict[Pollutant, int]:
    policy = get_range_policy(policy)
    return {
        Pollutant.PM2_5: get_pm2_5_aqi(raw_pm25, policy),
        Pollutant.PM10: get_pm10_aqi(raw_pm10, policy),
        Pollutant.O3: get_ozone_aqi(raw_o3_8h, raw_o3_1h, policy),
        Pollutant.CO: get_co_aqi(raw_co, policy),
        Pollutant.SO2: get_so2_aqi(raw_so2, policy),
        Pollutant.NO2: get_no2_aqi(raw_no2, policy),
    }


def get_dominant_pollutant(
    raw_pm25: float,
    raw_pm10: float,
    raw_o3_1h: float,
    raw_o3_8h: float,
    raw_co: float,
    raw_so2: float,
    raw_no2: float,
    policy: Optional[str] = None,
) -> Tuple[Pollutant, int]:
    """Return the pollutant with the highest AQI and that AQI.

    Ties go to the earliest pollutant in ``Pollutant`` order.
    """
    aqis = _channel_aqis(
        raw_pm25, raw_pm10, raw_o3_1h, raw_o3_8h, raw_co, raw_so2, raw_no2, policy
    )
    return max(aqis.items(), key=lambda item: item[1])


def get_total_aqi(
    raw_pm25: float,
    raw_pm10: float,
    raw_o3_1h: float,
    raw_o3_8h: float,
    raw_co: float,
    raw_so2: float,
    raw_no2: float,
    policy: Optional[str] = None,
) -> int:
    """Get the overall AQI given all pollutants.

    Pass 0 for sensors that are not present; zero maps to AQI 0 in every
    table.

    Args:
        raw_pm25: PM2.5 concentration in µg/m³
        raw_pm10: PM10 concentration in µg/m³
        raw_o3_1h: O3 concentration in ppm over 1 hour
        raw_o3_8h: O3 concentration in ppm over 8 hours
        raw_co: CO concentration in ppm
        raw_so2: SO2 concentration in ppb
        raw_no2: NO2 concentration in ppb
        policy: Out-of-range policy, defaults to ``AQI_RANGE_POLICY``

    Returns:
        The highest AQI across all pollutants.
    """
    pollutant, aqi = get_dominant_pollutant(
        raw_pm25, raw_pm10, raw_o3_1h, raw_o3_8h, raw_co, raw_so2, raw_no2, policy
    )
    logger.debug("Total AQI %d, dominant pollutant %s", aqi, pollutant.name)
    return aqi


def aqi_category(aqi: float) -> AQICategory:
    """Return the category an AQI value falls in.

    Values above 500 are Hazardous.
    """
    if not math.isfinite(aqi) or aqi < 0:
        raise AQIError(f"Invalid AQI value: {aqi!r}")
    for idx, segment in enumerate(AQI_BREAKS):
        if aqi <= segment.hi:
            return BREAK_CATEGORIES[idx]
    return AQICategory.HAZARDOUS


# Truncation and table per pollutant for array evaluation, ozone as 8-hour
_ARRAY_RULES = {
    Pollutant.PM2_5: (trunc1dp, PM2_5_BREAKS),
    Pollutant.PM10: (trunc_whole, PM10_BREAKS),
    Pollutant.O3: (trunc3dp, O3_8H_BREAKS),
    Pollutant.CO: (trunc1dp, CO_BREAKS),
    Pollutant.SO2: (trunc_whole, SO2_BREAKS),
    Pollutant.NO2: (trunc_whole, NO2_BREAKS),
}

_AQI_LO = np.array([segment.lo for segment in AQI_BREAKS], dtype=float)
_AQI_HI = np.array([segment.hi for segment in AQI_BREAKS], dtype=float)
_INT64_LIMIT = 2.0**63


def _resolve_pollutant(pollutant: Union[Pollutant, str, int]) -> Pollutant:
    try:
        if isinstance(pollutant, str):
            return Pollutant[pollutant.strip().upper()]
        return Pollutant(pollutant)
    except (KeyError, ValueError) as exc:
        raise AQIError(f"Unknown pollutant: {pollutant!r}") from exc


def _interpolate_array(vals: np.ndarray, table: Sequence[Breakpoint], policy: str) -> np.ndarray:
    """Vectorized ``calculate_aqi`` over a 1-D array of truncated readings."""
    name = TABLE_NAMES[table]
    conc_lo = np.array([segment.lo for segment in table], dtype=float)
    conc_hi = np.array([segment.hi for segment in table], dtype=float)

    # Same indices as low_index / high_index on sorted tables
    low_idx = np.searchsorted(conc_lo, vals, side="right") - 1
    high_idx = np.searchsorted(conc_hi, vals, side="left")

    below = low_idx < 0
    if below.any():
        raise ConcentrationOutOfRangeError(float(vals[below][0]), name)
    above = high_idx >= BREAK_COUNT
    if above.any():
        if policy == POLICY_STRICT:
            raise ConcentrationOutOfRangeError(float(vals[above][0]), name)
        logger.warning(
            "%d concentrations are above the %s table, extrapolating the top segment",
            int(above.sum()),
            name,
        )
        high_idx = np.minimum(high_idx, BREAK_COUNT - 1)

    with np.errstate(over="ignore", invalid="ignore"):
        raw_aqi = (_AQI_HI[high_idx] - _AQI_LO[low_idx]) / (
            conc_hi[high_idx] - conc_lo[low_idx]
        ) * (vals - conc_lo[low_idx]) + _AQI_LO[low_idx]
    overflow = ~np.isfinite(raw_aqi) | (np.abs(raw_aqi) >= _INT64_LIMIT)
    if overflow.any():
        raise ConcentrationOutOfRangeError(float(vals[overflow][0]), name)
    return _round_half_away(raw_aqi).astype(np.int64)


def aqi_array(
    values: Union[np.ndarray, Sequence[float], float],
    pollutant: Union[Pollutant, str, int],
    policy: Optional[str] = None,
) -> np.ndarray:
    """Evaluate a pollutant's AQI element-wise over an array of readings.

    Ozone readings are treated as 8-hour averages. The result is an
    integer array with the same shape as ``values``; errors are raised as
    for the scalar functions, and an extrapolated AQI that does not fit in
    int64 raises ``ConcentrationOutOfRangeError``.
    """
    pollutant = _resolve_pollutant(pollutant)
    policy = get_range_policy(policy)
    truncate, table = _ARRAY_RULES[pollutant]

    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidConcentrationError(values) from exc
    shape = arr.shape
    arr = arr.reshape(-1)

    invalid = ~np.isfinite(arr)
    if invalid.any():
        raise InvalidConcentrationError(float(arr[invalid][0]))

    vals = truncate(arr)
    overflow = ~np.isfinite(vals)
    if overflow.any():
        raise ConcentrationOutOfRangeError(float(arr[overflow][0]), TABLE_NAMES[table])

    if pollutant is Pollutant.O3:
        out = np.empty(vals.shape, dtype=np.int64)
        switch = vals > O3_8H_MAX_PPM
        out[switch] = _interpolate_array(vals[switch], O3_1H_BREAKS, policy)
        out[~switch] = _interpolate_array(vals[~switch], O3_8H_BREAKS, policy)
    else:
        out = _interpolate_array(vals, table, policy)
    return out.reshape(shape)
