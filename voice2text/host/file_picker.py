"""Audio file picker for the terminal."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional

from ..exceptions import InputValidationError
from ..models.state import SelectedFile
from ..storage.file_manager import FileManager

logger = logging.getLogger(__name__)

AUDIO_MIME_PREFIX = "audio/"

# Common recorder formats that some platforms' mime tables lack
for _mime, _ext in [("audio/mp4", ".m4a"), ("audio/aac", ".aac"), ("audio/flac", ".flac"), ("audio/ogg", ".ogg"), ("audio/opus", ".opus")]:
    mimetypes.add_type(_mime, _ext)


def is_audio_file(path: Path) -> bool:
    """True when the file name maps to an audio/* MIME type."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return bool(mime_type) and mime_type.startswith(AUDIO_MIME_PREFIX)


class AudioFilePicker:
    """Turns a typed path into a SelectedFile, accepting audio types only."""

    def __init__(self, file_manager: Optional[FileManager] = None):
        """Initialize the picker.

        Args:
            file_manager: When given, picked files are copied into its cache directory
        """
        self.file_manager = file_manager

    def pick(self, raw_path: str) -> Optional[SelectedFile]:
        """Pick the audio file at raw_path.

        Args:
            raw_path: Path as typed; empty means the user cancelled

        Returns:
            SelectedFile, or None if cancelled

        Raises:
            InputValidationError: If the file is missing or not an audio type
        """
        cleaned = raw_path.strip().strip('"\'')
        if not cleaned:
            logger.debug("File selection cancelled")
            return None

        path = Path(cleaned).expanduser()
        if not path.is_file():
            raise InputValidationError(f"File not found: {path}")
        if not is_audio_file(path):
            raise InputValidationError(f"Not an audio file: {path.name}")

        stored = self.file_manager.copy_to_cache(path) if self.file_manager else path
        logger.info(f"Picked audio file: {path.name}")
        return SelectedFile(name=path.name, path=str(stored))
