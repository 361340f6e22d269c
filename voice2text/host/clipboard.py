"""Clipboard integration."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Clipboard(ABC):
    """Somewhere text can be copied to."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the clipboard contents with text."""
        pass


class TkClipboard(Clipboard):
    """System clipboard through a hidden Tk root window."""

    def write(self, text: str) -> None:
        import tkinter

        root = tkinter.Tk()
        root.withdraw()
        try:
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        finally:
            root.destroy()
        logger.debug(f"Copied {len(text)} chars to clipboard")
