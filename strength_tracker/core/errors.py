"""Exceptions raised while reading and normalizing workout exports."""

from typing import Optional


class WorkoutCsvError(ValueError):
    """Base class for workout export failures that make a whole file unusable."""


class CsvStructureError(WorkoutCsvError):
    """The source is not well-formed delimited text under any supported dialect."""


class TimestampParseError(WorkoutCsvError):
    """A data row carries a timestamp that does not match the export format."""

    def __init__(self, row_index: int, value: Optional[str] = None):
        self.row_index = row_index
        self.value = value
        super().__init__(f"Parsing time failed at row {row_index}: {value!r}")
