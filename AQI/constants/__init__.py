"""Constant tables for the AQI package."""
