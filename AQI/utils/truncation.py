"""Decimal truncation applied to readings before breakpoint lookup.

The helpers accept scalars or numpy arrays. Scalars come back as floats.
"""

from __future__ import annotations

import numpy as np


def _truncate(val, places: int):
    factor = 10.0**places
    arr = np.asarray(val, dtype=float)
    mag = np.abs(arr)
    with np.errstate(over="ignore", invalid="ignore"):
        steps = np.trunc(mag * factor)
        # mag * factor may land one step off, e.g. 0.504 * 1000 == 503.99999999999994
        steps = np.where((steps + 1) / factor <= mag, steps + 1, steps)
        steps = np.where(steps / factor > mag, steps - 1, steps)
        out = np.copysign(steps / factor, arr)
    if out.ndim == 0:
        return float(out)
    return out


def trunc_whole(val):
    """Drop all fractional digits."""
    return _truncate(val, 0)


def trunc1dp(val):
    """Truncate to 1 decimal place."""
    return _truncate(val, 1)


def trunc3dp(val):
    """Truncate to 3 decimal places."""
    return _truncate(val, 3)
