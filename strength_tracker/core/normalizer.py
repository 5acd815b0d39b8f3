#!/usr/bin/env python3
"""
Normalization of raw export rows into LiftingSet records.

The two Strong export layouts carry the same information at different column
offsets. Rows are mapped through the dialect's ColumnSchema, numbers are
parsed leniently and the estimated one-rep max is derived for every set.

Failure policy:
- A bad timestamp makes the whole file unusable (TimestampParseError)
- A bad weight or reps value is replaced by 0 and logged
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np
import pandas as pd

from .errors import CsvStructureError, TimestampParseError
from ..storage.data_models import Dialect, LiftingSet

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Brzycki: 1RM = weight * 36 / (37 - reps); undefined from 37 reps on
BRZYCKI_REPS_LIMIT = 37

_REPS_PATTERN = r"\+?\d{1,9}"


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-repetition maximum with the Brzycki formula.

    Returns 0.0 when reps >= 37. The formula divides by zero at 37 reps; above
    that it is defined but negative, and those sets are zeroed as well rather
    than reporting a negative estimate.
    """
    if reps >= BRZYCKI_REPS_LIMIT:
        return 0.0
    return weight * (36 / (BRZYCKI_REPS_LIMIT - reps))


def _field(frame: pd.DataFrame, column: int) -> pd.Series:
    return frame[column].fillna("").astype(str)


def _parse_timestamps(values: pd.Series) -> pd.Series:
    parsed = pd.to_datetime(values, format=TIMESTAMP_FORMAT, errors="coerce")
    failed = parsed.isna()
    if failed.any():
        index = int(failed.idxmax())
        logger.error(f"Parsing time failed at row {index}")
        raise TimestampParseError(index, values[index])
    return parsed


def _parse_weights(values: pd.Series) -> pd.Series:
    parsed = pd.to_numeric(values, errors="coerce")
    failed = ~np.isfinite(parsed.to_numpy(dtype=float))
    for index in values.index[failed]:
        logger.warning(f"Parsing weight failed at row {index}")
    return parsed.where(~failed, 0.0).astype(float)


def _parse_reps(values: pd.Series) -> pd.Series:
    failed = ~values.str.fullmatch(_REPS_PATTERN)
    for index in values.index[failed.to_numpy()]:
        logger.warning(f"Parsing reps failed at row {index}")
    # Digits-only strings survive the mask, so the conversion cannot fail
    return values.where(~failed, "0").astype(np.int64)


def _one_rep_max(weights: pd.Series, reps: pd.Series) -> pd.Series:
    undefined = reps >= BRZYCKI_REPS_LIMIT
    for index in reps.index[undefined.to_numpy()]:
        logger.warning(f"One-rep max undefined for {reps[index]} reps at row {index}, using 0")
    # Mask the divisor before dividing so no row ever divides by zero
    divisor = (BRZYCKI_REPS_LIMIT - reps).where(~undefined, 1).astype(float)
    return (weights * (36 / divisor)).where(~undefined, 0.0)


def normalize_records(rows: Sequence[Sequence[str]], dialect: Dialect) -> List[LiftingSet]:
    """Map raw rows of one export onto LiftingSet records.

    Args:
        rows: Tokenized rows, the first one being the header
        dialect: Dialect the rows were read with, selects the column layout

    Returns:
        One LiftingSet per data row, in file order

    Raises:
        TimestampParseError: A row's date is not YYYY-MM-DD HH:MM:SS
    """
    data_rows = list(rows)[1:]
    if not data_rows:
        return []

    schema = dialect.schema
    frame = pd.DataFrame(data_rows)
    if frame.shape[1] < schema.min_width:
        raise CsvStructureError(
            f"{dialect.name} rows need {schema.min_width} fields, got {frame.shape[1]}"
        )

    timestamps = _parse_timestamps(_field(frame, schema.timestamp))
    exercise_names = _field(frame, schema.exercise_name)
    weights = _parse_weights(_field(frame, schema.weight))
    reps = _parse_reps(_field(frame, schema.reps))
    one_rep_maxes = _one_rep_max(weights, reps)

    return [
        LiftingSet(
            timestamp=ts.to_pydatetime(),
            exercise_name=name,
            weight=float(weight),
            reps=int(rep_count),
            one_rep_max=float(orm),
        )
        for ts, name, weight, rep_count, orm in zip(
            timestamps, exercise_names, weights, reps, one_rep_maxes
        )
    ]
