"""Data models and export storage modules."""

from .data_models import (
    ColumnSchema,
    Dialect,
    LiftingSet,
    ExerciseAggregatePoint,
    ExerciseTimeSeries,
    time_series_to_dict
)
from .source_directory import SourceDirectory

__all__ = [
    # Data models
    "ColumnSchema",
    "Dialect",
    "LiftingSet",
    "ExerciseAggregatePoint",
    "ExerciseTimeSeries",
    "time_series_to_dict",

    # Export files
    "SourceDirectory"
]
