"""Test package initialization.

Suppress noisy warnings during test runs.
"""

import warnings as _warnings

_warnings.filterwarnings("ignore")
