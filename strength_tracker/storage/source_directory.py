"""
Storage directory holding one uploaded workout export per user.
The file name is the user's key; files are replaced wholesale on upload.
"""
import logging
import re
from pathlib import Path
from typing import BinaryIO, List, Optional

from ..utils.config import get_config

logger = logging.getLogger(__name__)

class SourceDirectory:
    """
    Lists, opens and saves the raw export files of every user.
    """

    def __init__(self, storage_dir: Optional[str] = None):
        self.config = get_config()
        self.root = Path(storage_dir) if storage_dir else Path(self.config.storage.storage_dir)
        self.root.mkdir(exist_ok=True, parents=True)
        logger.info(f"Source storage initialized: {self.root}")

    @staticmethod
    def sanitize_source_id(name: str) -> str:
        """Turn a user supplied name into a safe file name."""
        source_id = re.sub(r'[^a-zA-Z0-9_.-]', '_', name.strip())
        # No hidden files and no path traversal through dots
        source_id = source_id.lstrip('.')
        if not source_id:
            raise ValueError(f"Invalid source name: {name!r}")
        return source_id

    def list_sources(self) -> List[str]:
        """Source identities in name order, hidden files and directories skipped."""
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_file() and not p.name.startswith('.')
        )

    def path_for(self, source_id: str) -> Path:
        """Path of a stored export; the id must be a plain file name in the root."""
        if source_id in ('', '.', '..') or Path(source_id).name != source_id:
            raise ValueError(f"Invalid source id: {source_id!r}")
        return self.root / source_id

    def open_source(self, source_id: str) -> BinaryIO:
        """Open a stored export for binary reading. The caller closes it."""
        return open(self.path_for(source_id), 'rb')

    def save_source(self, source_id: str, content: bytes) -> Path:
        """
        Store an export, replacing any previous file of the same user.

        The bytes are written to a temporary sibling first and moved into
        place, so a concurrent load never opens a half written file.
        """
        target = self.path_for(source_id)
        tmp_path = target.with_name(f".{target.name}.upload")
        tmp_path.write_bytes(content)
        tmp_path.replace(target)
        logger.info(f"Stored export for {target.name} ({len(content)} bytes)")
        return target
