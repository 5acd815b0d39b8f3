"""
Strength Tracker - Lifting progress tracking from workout log exports.

A modular system for reading Strong app CSV exports, normalizing set records,
aggregating them into per-exercise time series and serving them per user.
"""

from .main import (
    setup_strength_tracker,
    process_single_export
)

from .core.csv_reader import read_workout_csv
from .core.normalizer import normalize_records, estimate_one_rep_max
from .core.processing import process_workout_csv
from .metrics.aggregation import calculate_exercise_time_series, regroup_time_series
from .storage.data_models import Dialect, LiftingSet, ExerciseAggregatePoint
from .storage.source_directory import SourceDirectory
from .storage.user_store import UserDataStore
from .utils.config import get_config, reset_config

__version__ = "1.0.0"

# Main interface classes
__all__ = [
    # Main interfaces
    "setup_strength_tracker",
    "process_single_export",
    "process_workout_csv",

    # Core functionality
    "read_workout_csv",
    "normalize_records",
    "estimate_one_rep_max",
    "calculate_exercise_time_series",
    "regroup_time_series",

    # Data management
    "UserDataStore",
    "SourceDirectory",
    "Dialect",
    "LiftingSet",
    "ExerciseAggregatePoint",

    # Configuration
    "get_config",
    "reset_config"
]
