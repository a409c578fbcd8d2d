"""Exceptions raised by the AQI calculations."""

from __future__ import annotations


class AQIError(ValueError):
    """Base class for errors raised while computing an AQI."""


class InvalidConcentrationError(AQIError):
    """A reading is not a finite number."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid concentration: {value!r}")


class ConcentrationOutOfRangeError(AQIError):
    """A truncated reading falls outside every segment of its breakpoint table."""

    def __init__(self, value: float, table: str):
        self.value = value
        self.table = table
        super().__init__(f"Concentration {value} is outside the {table} breakpoint table")
