"""
Main module for the strength tracker system.
Provides the high-level interface wiring export storage and the per-user store.
"""
import logging
from typing import Optional

from .core.processing import process_workout_csv
from .storage.source_directory import SourceDirectory
from .storage.user_store import UserDataStore
from .utils.config import get_config

logger = logging.getLogger(__name__)

def setup_strength_tracker(storage_dir: Optional[str] = None, load: bool = True) -> UserDataStore:
    """
    Create the store over a storage directory, loading every export by default.

    Args:
        storage_dir: Directory of uploaded exports (defaults to the configured one)
        load: Whether to run the initial full load

    Returns:
        Ready UserDataStore instance
    """
    get_config().validate_configuration()
    store = UserDataStore(SourceDirectory(storage_dir))
    if load:
        store.load()
    return store

def process_single_export(file_path: str):
    """
    Process a single export file without touching any storage directory.

    Args:
        file_path: Path to a Strong CSV export

    Returns:
        Exercise name -> aggregate points sorted by timestamp
    """
    logger.info(f"Processing export: {file_path}")
    return process_workout_csv(file_path)
