"""Core processing modules for export reading and record normalization."""

from .errors import WorkoutCsvError, CsvStructureError, TimestampParseError
from .csv_reader import read_workout_csv
from .normalizer import normalize_records, estimate_one_rep_max
from .processing import process_workout_csv

__all__ = [
    "WorkoutCsvError",
    "CsvStructureError",
    "TimestampParseError",
    "read_workout_csv",
    "normalize_records",
    "estimate_one_rep_max",
    "process_workout_csv"
]
