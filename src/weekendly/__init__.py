"""Weekendly - two-day weekend activity planner."""

__version__ = "0.1.0"
