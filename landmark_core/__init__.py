"""Landmark availability and trip-coordination core."""

__version__ = "1.0.0"
