"""Export and copy of the current session text."""

import logging

from ..host.clipboard import Clipboard
from ..host.share import ShareTarget
from ..models.state import AppState
from ..state.store import AppStore
from .alert_publisher import AlertPublisher

logger = logging.getLogger(__name__)


def build_export_text(state: AppState) -> str:
    """Combine title, transcript and summary into one shareable blob."""
    processing = state.processing
    return (
        f"Session: {state.current_session_title}\n\n"
        f"Transcript:\n{processing.transcript}\n\n"
        f"Summary:\n{processing.summary}"
    )


class ExportService:
    """Hands session text to the share target and the clipboard."""

    def __init__(self, store: AppStore, alerts: AlertPublisher, share_target: ShareTarget, clipboard: Clipboard):
        self.store = store
        self.alerts = alerts
        self.share_target = share_target
        self.clipboard = clipboard

    def export_current_session(self) -> bool:
        """Share the combined transcript and summary.

        Returns:
            True if the text was handed to the share target
        """
        state = self.store.state
        if not state.processing.transcript and not state.processing.summary:
            self.alerts.validation_error("Nothing to export", "Create a transcript or summary first.")
            return False

        try:
            destination = self.share_target.share(build_export_text(state))
        except Exception as e:
            logger.error(f"Share failed: {e}", exc_info=True)
            self.alerts.transport_error("Error", "Could not open share sheet.")
            return False

        self.alerts.info("Exported", f"Session text written to {destination}")
        return True

    def copy_text(self, text: str) -> bool:
        """Copy text to the clipboard.

        Returns:
            True if the clipboard was written
        """
        if not text.strip():
            self.alerts.validation_error("Nothing to copy", "No content available yet.")
            return False

        try:
            self.clipboard.write(text)
        except Exception as e:
            logger.error(f"Clipboard write failed: {e}", exc_info=True)
            self.alerts.transport_error("Error", "Could not copy to clipboard.")
            return False

        self.alerts.info("Copied", "Text copied to clipboard.")
        return True

    def copy_transcript(self) -> bool:
        return self.copy_text(self.store.state.processing.transcript)

    def copy_summary(self) -> bool:
        return self.copy_text(self.store.state.processing.summary)
