"""Session manager for the in-memory list of saved sessions."""

import logging
from typing import List, Optional

from ..models.actions import SessionOpened, SessionSaved
from ..models.session import Session
from ..models.state import UNKNOWN_FILE_NAME
from ..state.store import AppStore
from .alert_publisher import AlertPublisher

logger = logging.getLogger(__name__)


class SessionManager:
    """Saves and reopens transcript/summary pairs.

    Sessions live only as long as the process; nothing is written to disk.
    """

    def __init__(self, store: AppStore, alerts: AlertPublisher):
        """Initialize session manager.

        Args:
            store: Application state store
            alerts: Publisher for user notifications
        """
        self.store = store
        self.alerts = alerts

    def save_current_session(self) -> Optional[Session]:
        """Save the current transcript and summary as a new session.

        Returns:
            The new session, or None when there was nothing to save
        """
        state = self.store.state
        processing = state.processing
        if not processing.transcript and not processing.summary:
            self.alerts.validation_error("Nothing to save", "Transcribe or summarize before saving.")
            return None

        session = Session.create(
            title=state.current_session_title,
            file_name=processing.selected_file_name or UNKNOWN_FILE_NAME,
            transcript=processing.transcript,
            summary=processing.summary,
        )
        self.store.dispatch(SessionSaved(session))
        logger.info(f"Saved session {session.session_id} ({session.title})")
        self.alerts.info("Saved", "Session saved to My Files.")
        return session

    def open_session(self, session: Session) -> None:
        """Copy a saved session into the current state and show its transcript."""
        self.store.dispatch(SessionOpened(session))
        logger.info(f"Opened session {session.session_id}")

    def open_session_at(self, index: int) -> Optional[Session]:
        """Open the session at a 1-based position in the list.

        Returns:
            The opened session, or None if the position is out of range
        """
        sessions = self.list_sessions()
        if index < 1 or index > len(sessions):
            self.alerts.validation_error("No such session", f"Pick a number between 1 and {len(sessions)}.")
            return None

        session = sessions[index - 1]
        self.open_session(session)
        return session

    def list_sessions(self) -> List[Session]:
        """List saved sessions, newest first."""
        return list(self.store.state.sessions)

    def get_session(self, session_id: str) -> Optional[Session]:
        for session in self.store.state.sessions:
            if session.session_id == session_id:
                return session
        return None
