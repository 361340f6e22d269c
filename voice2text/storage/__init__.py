"""Local storage for cached audio and exports."""

from .file_manager import FileManager

__all__ = ["FileManager"]
