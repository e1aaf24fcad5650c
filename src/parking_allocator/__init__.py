"""Typed parking slot allocation with ticketing and time-based fees."""

__version__ = "0.1.0"
