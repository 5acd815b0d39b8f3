#!/usr/bin/env python3
"""
Workout export reading utilities.

Strong exports come in two flavours that differ only by delimiter and column
layout: the Apple app writes comma separated files, the Android app writes
semicolon separated ones. Nothing in the file says which one it is, so we try
the comma dialect first and fall back to semicolons when the text does not
tokenize cleanly.
"""

from __future__ import annotations

import logging
import os
from typing import IO, List, Tuple, Union

import pandas as pd

from .errors import CsvStructureError
from ..storage.data_models import Dialect

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", IO]
Rows = List[List[str]]

# Order matters: the first dialect that parses without a structural error wins
_DIALECT_ORDER = (Dialect.COMMA, Dialect.SEMICOLON)


def _rewind(source: Source) -> None:
    if hasattr(source, "seek"):
        source.seek(0)


def _parse_rows(source: Source, dialect: Dialect) -> Rows:
    """Tokenize the whole source under one dialect.

    Every field is kept as the exact string found in the file. Raises
    CsvStructureError when the text is malformed for this dialect: tokenizer
    errors, rows with a different field count than the first row, or rows too
    narrow for the dialect's column schema.
    """
    try:
        # The python engine leaves the cells missing from short rows unset
        # while empty fields read as "", so NA filtering must stay off
        df = pd.read_csv(
            source,
            sep=dialect.delimiter,
            header=None,
            dtype=object,
            engine="python",
            na_filter=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise CsvStructureError(f"{dialect.name}: {e}") from e

    ragged = df.isna().any(axis=1)
    if ragged.any():
        line = int(ragged.idxmax()) + 1
        raise CsvStructureError(
            f"{dialect.name}: wrong number of fields on line {line}, expected {df.shape[1]}"
        )

    if df.shape[1] < dialect.schema.min_width:
        raise CsvStructureError(
            f"{dialect.name}: found {df.shape[1]} fields per row, need at least {dialect.schema.min_width}"
        )

    return df.values.tolist()


def read_workout_csv(source: Source) -> Tuple[Rows, Dialect]:
    """Read a workout export and report which dialect it was written in.

    Args:
        source: Path to the export, or an open file object positioned at its start

    Returns:
        Tuple of (rows including the header row, detected Dialect)

    Raises:
        OSError: The source could not be read; never retried
        CsvStructureError: The source is malformed under every dialect
    """
    last_error = None
    for attempt, dialect in enumerate(_DIALECT_ORDER):
        if attempt:
            _rewind(source)
        try:
            rows = _parse_rows(source, dialect)
        except CsvStructureError as e:
            logger.info(f"Export does not parse as {dialect.name.lower()} separated: {e}")
            last_error = e
            continue
        return rows, dialect

    raise CsvStructureError(f"Export is not a supported Strong CSV ({last_error})")
