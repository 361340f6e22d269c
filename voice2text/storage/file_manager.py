"""File management module for cached audio and exported text."""

import logging
import random
import shutil
import string
from pathlib import Path
from datetime import datetime
from typing import Any, Dict


logger = logging.getLogger(__name__)


def _unique_prefix() -> str:
    """Timestamp with random suffix to keep file names unique."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    random_suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=4))
    return f"{timestamp}_{random_suffix}"


class FileManager:
    """Manages the data directory: audio cache, exports and logs."""

    def __init__(self, data_dir: str = "./data"):
        """Initialize file manager with data directory.

        Args:
            data_dir: Base directory for storing all data
        """
        self.data_dir = Path(data_dir)
        self.cache_dir = self.data_dir / "cache"
        self.exports_dir = self.data_dir / "exports"
        self.logs_dir = self.data_dir / "logs"

        # Create directory structure
        self._ensure_directories()

        logger.info(f"FileManager initialized with data_dir: {self.data_dir}")

    def _ensure_directories(self) -> None:
        """Ensure all required directories exist."""
        for directory in [self.data_dir, self.cache_dir, self.exports_dir, self.logs_dir]:
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {directory}")

    def copy_to_cache(self, source: Path) -> Path:
        """Copy a picked audio file into the cache directory.

        Args:
            source: File chosen by the user

        Returns:
            Path to the cached copy
        """
        target = self.cache_dir / f"{_unique_prefix()}_{source.name}"
        try:
            shutil.copy2(source, target)
        except OSError as e:
            logger.error(f"Error caching audio file {source}: {e}")
            raise

        logger.info(f"Cached audio file: {source} -> {target}")
        return target

    def save_export(self, text: str) -> str:
        """Write an exported text blob and return its path."""
        export_path = self.exports_dir / f"export_{_unique_prefix()}.txt"

        try:
            with open(export_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Error saving export: {e}")
            raise

        logger.info(f"Export saved: {export_path} ({len(text)} chars)")
        return str(export_path)

    def clear_cache(self) -> int:
        """Delete every cached audio file.

        Returns:
            Number of files removed
        """
        removed = 0
        for cached in self.cache_dir.iterdir():
            if cached.is_file():
                cached.unlink()
                removed += 1

        logger.info(f"Cleared {removed} cached audio files")
        return removed

    def get_storage_stats(self) -> Dict[str, Any]:
        """Get storage usage statistics."""
        cache_files = [p for p in self.cache_dir.iterdir() if p.is_file()]
        export_files = [p for p in self.exports_dir.iterdir() if p.is_file()]
        return {
            "data_directory": str(self.data_dir),
            "cached_audio_files": len(cache_files),
            "cache_size_mb": round(sum(p.stat().st_size for p in cache_files) / (1024 * 1024), 2),
            "export_files": len(export_files),
        }
