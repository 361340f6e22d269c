"""Application state models: screens, form fields and processing state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .session import Session

DEFAULT_SESSION_TITLE = "Lecture / Meeting"
UNKNOWN_FILE_NAME = "Unknown file"


class Screen(Enum):
    """The closed set of screens; exactly one is active at a time."""
    LOGIN = "login"
    DASHBOARD = "dashboard"
    TRANSCRIPT = "transcript"
    SUMMARY = "summary"
    FILES = "files"
    PROFILE = "profile"


@dataclass(frozen=True)
class SelectedFile:
    """An audio file chosen by the user.

    `path` is empty when the name was restored from a saved session and
    there is no audio to send.
    """
    name: str
    path: str

    @property
    def has_audio(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class LoginForm:
    """Login form fields as typed."""
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class ProcessingState:
    """Current audio file plus the results of the two remote calls."""
    selected_file: Optional[SelectedFile] = None
    transcript: str = ""
    summary: str = ""
    is_transcribing: bool = False
    is_summarizing: bool = False

    @property
    def selected_file_name(self) -> Optional[str]:
        return self.selected_file.name if self.selected_file else None


@dataclass(frozen=True)
class AppState:
    """Everything the UI renders from. Replaced, never mutated."""
    screen: Screen = Screen.LOGIN
    login: LoginForm = field(default_factory=LoginForm)
    is_authenticated: bool = False
    processing: ProcessingState = field(default_factory=ProcessingState)
    sessions: Tuple[Session, ...] = ()

    @property
    def current_session_title(self) -> str:
        """Selected file name, else newest session title, else a generic title."""
        if self.processing.selected_file_name:
            return self.processing.selected_file_name
        if self.sessions:
            return self.sessions[0].title
        return DEFAULT_SESSION_TITLE
