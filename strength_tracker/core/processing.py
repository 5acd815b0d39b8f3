#!/usr/bin/env python3
"""Pipeline turning one workout export into an exercise time series."""

from __future__ import annotations

import logging

from .csv_reader import Source, read_workout_csv
from .normalizer import normalize_records
from ..metrics.aggregation import calculate_exercise_time_series
from ..storage.data_models import ExerciseTimeSeries

logger = logging.getLogger(__name__)


def process_workout_csv(source: Source) -> ExerciseTimeSeries:
    """Read, normalize and aggregate one workout export.

    - Detect the dialect (comma first, semicolon fallback)
    - Map rows onto LiftingSet records, zeroing unparsable numbers
    - Fold sets per (exercise, timestamp) and sort each exercise by time

    Raises OSError when the source cannot be read and WorkoutCsvError when the
    export is malformed or carries a bad timestamp. Nothing is returned for a
    file that fails part way.
    """
    rows, dialect = read_workout_csv(source)
    lifting_sets = normalize_records(rows, dialect)
    series = calculate_exercise_time_series(lifting_sets)
    logger.info(
        f"Parsed {len(lifting_sets)} sets ({dialect.name.lower()} separated) "
        f"into {len(series)} exercises"
    )
    return series
