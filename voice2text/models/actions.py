"""State transitions, one dataclass per named action.

Every change to AppState goes through AppStore.dispatch with one of these.
"""

from dataclasses import dataclass
from typing import Optional

from .session import Session
from .state import Screen, SelectedFile


@dataclass(frozen=True)
class LoginFormChanged:
    email: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class LoggedIn:
    pass


@dataclass(frozen=True)
class LoggedOut:
    pass


@dataclass(frozen=True)
class Navigated:
    screen: Screen


@dataclass(frozen=True)
class FileSelected:
    file: SelectedFile


@dataclass(frozen=True)
class TranscriptionStarted:
    pass


@dataclass(frozen=True)
class TranscriptionSucceeded:
    text: str


@dataclass(frozen=True)
class TranscriptionFinished:
    """Always dispatched when a transcription call resolves, success or not."""
    pass


@dataclass(frozen=True)
class SummaryStarted:
    pass


@dataclass(frozen=True)
class SummarySucceeded:
    text: str


@dataclass(frozen=True)
class SummaryFinished:
    """Always dispatched when a summarization call resolves, success or not."""
    pass


@dataclass(frozen=True)
class TranscriptEdited:
    text: str


@dataclass(frozen=True)
class SummaryEdited:
    text: str


@dataclass(frozen=True)
class SessionSaved:
    session: Session


@dataclass(frozen=True)
class SessionOpened:
    session: Session
