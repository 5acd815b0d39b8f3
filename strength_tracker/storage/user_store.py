"""
Per-user store of aggregated exercise time series.
One entry per stored export, rebuilt wholesale on load.
"""
import io
import logging
import threading
from typing import Dict, List, Optional

from .data_models import ExerciseTimeSeries, time_series_to_dict
from .source_directory import SourceDirectory
from ..core.processing import process_workout_csv
from ..metrics.aggregation import regroup_time_series

logger = logging.getLogger(__name__)

class UserDataStore:
    """
    Holds one ExerciseTimeSeries per source file.

    The mapping is never mutated in place: writers build a new dict and swap
    the reference under a lock, so readers always see a complete snapshot.
    """

    def __init__(self, sources: SourceDirectory):
        self.sources = sources
        self._lock = threading.Lock()
        self._data: Dict[str, ExerciseTimeSeries] = {}

    def load(self) -> Dict[str, ExerciseTimeSeries]:
        """
        Rebuild the whole store from every file in the source directory.

        A file that cannot be read or parsed is logged and skipped; it never
        aborts the load of the others.

        Returns:
            The new store contents keyed by source identity
        """
        source_ids = self.sources.list_sources()
        logger.info(f"Loading {len(source_ids)} stored exports from {self.sources.root}")

        data: Dict[str, ExerciseTimeSeries] = {}
        failed: List[str] = []
        for source_id in source_ids:
            try:
                with self.sources.open_source(source_id) as handle:
                    data[source_id] = process_workout_csv(handle)
            except (OSError, ValueError) as e:
                logger.error(f"Skipping export {source_id}: {e}")
                failed.append(source_id)

        with self._lock:
            self._data = data

        logger.info(f"Store loaded: {len(data)} users, {len(failed)} skipped")
        return dict(data)

    def ingest_upload(self, user_key: str, content: bytes) -> ExerciseTimeSeries:
        """
        Parse an uploaded export and, only if it parses, store it for the user.

        Args:
            user_key: User name the export belongs to
            content: Raw bytes of the uploaded CSV

        Returns:
            The user's new time series

        Raises:
            ValueError: Invalid user name, or the export failed to parse
            OSError: The export could not be written to storage
        """
        source_id = self.sources.sanitize_source_id(user_key)
        series = process_workout_csv(io.BytesIO(content))
        self.sources.save_source(source_id, content)

        with self._lock:
            data = dict(self._data)
            data[source_id] = series
            self._data = data

        logger.info(f"Replaced data for {source_id}: {len(series)} exercises")
        return series

    def snapshot(self) -> Dict[str, ExerciseTimeSeries]:
        """Current store contents. The returned dict is a private copy."""
        with self._lock:
            data = self._data
        return dict(data)

    def query(self, user_key: str) -> Optional[ExerciseTimeSeries]:
        """Time series of one user, or None when the user has no loaded export."""
        with self._lock:
            data = self._data
        return data.get(user_key)

    def users(self) -> List[str]:
        return sorted(self.snapshot())

    def to_json_dict(self, grouping: str = "workout") -> Dict[str, Dict[str, list]]:
        """JSON-ready view of the whole store: user -> exercise -> points."""
        return {
            user: time_series_to_dict(regroup_time_series(series, grouping))
            for user, series in sorted(self.snapshot().items())
        }
