"""
Data models for the strength tracker system.
Defines the export dialects, normalized set records and aggregated points.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Tuple

@dataclass(frozen=True)
class ColumnSchema:
    """Column offsets of the fields we read from one export layout."""
    timestamp: int
    exercise_name: int
    weight: int
    reps: int

    @property
    def min_width(self) -> int:
        """Number of fields a row needs for every offset to exist."""
        return max(self.timestamp, self.exercise_name, self.weight, self.reps) + 1

class Dialect(Enum):
    """Supported Strong export flavours, keyed by delimiter."""

    # Date,Workout Name,Duration,Exercise Name,Set Order,Weight,Reps,Distance,Seconds,Notes,Workout Notes,RPE
    COMMA = (",", ColumnSchema(timestamp=0, exercise_name=3, weight=5, reps=6))
    # Date;Workout Name;Exercise Name;Set Order;Weight;Weight Unit;Reps;RPE;Distance;Distance Unit;Seconds;Notes;Workout Notes;Workout Duration
    SEMICOLON = (";", ColumnSchema(timestamp=0, exercise_name=2, weight=4, reps=6))

    def __init__(self, delimiter: str, schema: ColumnSchema):
        self.delimiter = delimiter
        self.schema = schema

@dataclass(frozen=True)
class LiftingSet:
    """One normalized strength-training set."""
    timestamp: datetime
    exercise_name: str
    weight: float  # unit-less, lb or kg as exported
    reps: int
    one_rep_max: float  # estimated from weight and reps

    @property
    def volume(self) -> float:
        return self.weight * self.reps

@dataclass(frozen=True)
class ExerciseAggregatePoint:
    """All sets of one exercise sharing an exact timestamp, folded together."""
    timestamp: datetime
    max_weight: float = 0.0
    max_one_rep_max: float = 0.0
    total_volume: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API."""
        return {
            'timestamp': format_timestamp(self.timestamp),
            'maxWeight': self.max_weight,
            'maxOneRepMax': self.max_one_rep_max,
            'totalVolume': self.total_volume,
        }

# exercise name -> points sorted by timestamp
ExerciseTimeSeries = Dict[str, Tuple[ExerciseAggregatePoint, ...]]

def format_timestamp(ts: datetime) -> str:
    """Render a naive UTC timestamp as ISO-8601 with a Z suffix."""
    return ts.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"

def time_series_to_dict(series: ExerciseTimeSeries) -> Dict[str, list]:
    """Convert a time series to plain JSON-ready lists, exercises in name order."""
    return {
        exercise: [point.to_dict() for point in points]
        for exercise, points in sorted(series.items())
    }
