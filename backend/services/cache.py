"""
Disk cache for item data
Stores the raw item JSON and per-item thumbnails on the local filesystem
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from config import Settings
from services.errors import CacheMissError, CacheCorruptError

logger = logging.getLogger(__name__)


def ensure_folder(path: Path) -> Path:
    """Create the directory (and parents) if it doesn't exist"""
    path.mkdir(parents=True, exist_ok=True)
    return path


class ItemCache:
    """Raw item JSON plus thumbnail images, kept under the configured directories"""

    def __init__(self, settings: Settings):
        self.data_path = settings.item_data_path
        self.thumbnail_dir = settings.thumbnail_dir

    def save_item_data(self, raw_body: str) -> Path:
        """Write the raw API response verbatim, replacing any previous copy"""
        ensure_folder(self.data_path.parent)
        self.data_path.write_text(raw_body, encoding="utf-8")
        logger.info("Wrote item JSON file to %s", self.data_path)
        return self.data_path

    def load_item_data(self) -> Dict[str, Any]:
        """
        Read and decode the cached item JSON

        Returns:
            The full response document, e.g. {"data": {...}, ...}

        Raises:
            CacheMissError: nothing cached yet or the file can't be read
            CacheCorruptError: the file is not valid JSON
        """
        try:
            raw = self.data_path.read_text(encoding="utf-8")
        except OSError as e:
            raise CacheMissError(f"No item data at {self.data_path}: {e}") from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise CacheCorruptError(f"Item data at {self.data_path} is not valid JSON") from e

    def has_item_data(self) -> bool:
        return self.data_path.is_file()

    def save_thumbnail(self, image_name: str, image: bytes) -> bool:
        """
        Write a thumbnail unless one with that name already exists

        Returns:
            True if the file was written, False if it already existed
        """
        ensure_folder(self.thumbnail_dir)
        path = self.thumbnail_dir / image_name
        try:
            # 'x' mode fails instead of overwriting
            with open(path, "xb") as f:
                f.write(image)
        except FileExistsError:
            logger.info("\t%s already exists.", image_name)
            return False

        logger.info("\tThumbnail %s was saved.", image_name)
        return True
