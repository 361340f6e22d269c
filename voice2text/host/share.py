"""Share integration: hands a combined text blob to the host."""

import logging
from abc import ABC, abstractmethod

from ..storage.file_manager import FileManager

logger = logging.getLogger(__name__)


class ShareTarget(ABC):
    """Destination for exported session text."""

    @abstractmethod
    def share(self, message: str) -> str:
        """Share message and return a description of where it went."""
        pass


class FileShareTarget(ShareTarget):
    """Writes shared text into the data directory's exports folder."""

    def __init__(self, file_manager: FileManager):
        self.file_manager = file_manager

    def share(self, message: str) -> str:
        path = self.file_manager.save_export(message)
        logger.info(f"Shared session text to {path}")
        return path
