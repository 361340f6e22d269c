"""Host integrations: file picker, share target and clipboard."""

from .file_picker import AudioFilePicker, is_audio_file
from .clipboard import Clipboard, TkClipboard
from .share import ShareTarget, FileShareTarget

__all__ = [
    "AudioFilePicker",
    "is_audio_file",
    "Clipboard",
    "TkClipboard",
    "ShareTarget",
    "FileShareTarget",
]
