from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ..storage.data_models import ExerciseAggregatePoint, ExerciseTimeSeries, LiftingSet
from ..utils.config import GROUPINGS

_COLUMNS = ["exercise_name", "timestamp", "max_weight", "max_one_rep_max", "total_volume"]


def _fold_points(df: pd.DataFrame, keys: List[str]) -> pd.DataFrame:
    """Fold rows sharing the same keys: max of both maxima, sum of volume.

    Maxima are folded starting from zero, so a bucket never reports a negative
    weight or estimate.
    """
    grouped = df.groupby(keys, sort=True).agg(
        max_weight=("max_weight", "max"),
        max_one_rep_max=("max_one_rep_max", "max"),
        total_volume=("total_volume", "sum"),
    )
    grouped[["max_weight", "max_one_rep_max"]] = grouped[["max_weight", "max_one_rep_max"]].clip(lower=0.0)
    return grouped.reset_index()


def _to_time_series(df: pd.DataFrame) -> ExerciseTimeSeries:
    series: ExerciseTimeSeries = {}
    for exercise, points in df.groupby("exercise_name", sort=True):
        points = points.sort_values("timestamp", kind="mergesort")
        series[exercise] = tuple(
            ExerciseAggregatePoint(
                timestamp=row.timestamp.to_pydatetime(),
                max_weight=float(row.max_weight),
                max_one_rep_max=float(row.max_one_rep_max),
                total_volume=float(row.total_volume),
            )
            for row in points.itertuples(index=False)
        )
    return series


def _to_frame(series: ExerciseTimeSeries) -> pd.DataFrame:
    rows = []
    for exercise, points in series.items():
        for p in points:
            rows.append(
                {
                    "exercise_name": exercise,
                    "timestamp": p.timestamp,
                    "max_weight": p.max_weight,
                    "max_one_rep_max": p.max_one_rep_max,
                    "total_volume": p.total_volume,
                }
            )
    return pd.DataFrame(rows, columns=_COLUMNS)


def calculate_exercise_time_series(lifting_sets: Iterable[LiftingSet]) -> ExerciseTimeSeries:
    """Aggregate the sets of one export into a per-exercise time series.

    Sets are bucketed by (exercise, exact timestamp). Each bucket becomes one
    ExerciseAggregatePoint, and every exercise's points are sorted by
    timestamp ascending. Bucket contents may arrive in any order.
    """
    rows = [
        {
            "exercise_name": s.exercise_name,
            "timestamp": s.timestamp,
            "max_weight": s.weight,
            "max_one_rep_max": s.one_rep_max,
            "total_volume": s.volume,
        }
        for s in lifting_sets
    ]
    if not rows:
        return {}

    df = pd.DataFrame(rows, columns=_COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return _to_time_series(_fold_points(df, ["exercise_name", "timestamp"]))


def regroup_time_series(series: ExerciseTimeSeries, grouping: str = "workout") -> ExerciseTimeSeries:
    """Coarsen a time series into calendar buckets.

    grouping:
    - "workout": unchanged, one point per logged workout timestamp
    - "day": one point per calendar day, stamped at midnight
    - "week": one point per week, stamped at Monday midnight
    """
    if grouping not in GROUPINGS:
        raise ValueError(f"Unknown grouping: {grouping}. Expected one of {', '.join(GROUPINGS)}")
    if grouping == "workout" or not series:
        return series

    df = _to_frame(series)
    if df.empty:
        return {exercise: () for exercise in series}

    df["timestamp"] = pd.to_datetime(df["timestamp"])
    if grouping == "day":
        df["timestamp"] = df["timestamp"].dt.normalize()
    else:
        df["timestamp"] = df["timestamp"].dt.to_period("W-SUN").dt.start_time

    regrouped = _to_time_series(_fold_points(df, ["exercise_name", "timestamp"]))
    # Exercises without any point keep their (empty) entry
    for exercise in series:
        regrouped.setdefault(exercise, ())
    return regrouped
