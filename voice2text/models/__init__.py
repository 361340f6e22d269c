"""Data models for the Voice2Text application."""

from .session import Session
from .state import (
    AppState,
    LoginForm,
    ProcessingState,
    Screen,
    SelectedFile,
    DEFAULT_SESSION_TITLE,
    UNKNOWN_FILE_NAME,
)
from .alerts import Alert, AlertKind
from .api import TranscriptionResponse, ChatCompletionResponse, NO_SUMMARY_FALLBACK

__all__ = [
    "Session",
    "AppState",
    "LoginForm",
    "ProcessingState",
    "Screen",
    "SelectedFile",
    "DEFAULT_SESSION_TITLE",
    "UNKNOWN_FILE_NAME",
    "Alert",
    "AlertKind",
    # API payloads
    "TranscriptionResponse",
    "ChatCompletionResponse",
    "NO_SUMMARY_FALLBACK",
]
