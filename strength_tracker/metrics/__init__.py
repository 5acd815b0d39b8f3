"""Aggregation of set records into per-exercise time series."""

from .aggregation import calculate_exercise_time_series, regroup_time_series

__all__ = [
    "calculate_exercise_time_series",
    "regroup_time_series"
]
