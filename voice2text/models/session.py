"""Session-related data models."""

import random
import string
from dataclasses import dataclass
from datetime import datetime


def generate_session_id() -> str:
    """Build a session ID from the current time plus a random suffix."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    random_suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{timestamp}_{random_suffix}"


@dataclass(frozen=True)
class Session:
    """A saved transcript/summary pair for one source audio file."""
    session_id: str
    title: str
    file_name: str
    transcript: str
    summary: str

    @classmethod
    def create(cls, title: str, file_name: str, transcript: str, summary: str) -> "Session":
        """Create a new session with a fresh ID.

        Raises:
            ValueError: If both transcript and summary are empty
        """
        if not transcript and not summary:
            raise ValueError("A session needs a transcript or a summary")
        return cls(
            session_id=generate_session_id(),
            title=title,
            file_name=file_name,
            transcript=transcript,
            summary=summary,
        )

    @property
    def preview(self) -> str:
        return self.summary or self.transcript or "Empty session"
