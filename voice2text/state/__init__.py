"""Explicit application state: reducer plus store."""

from .reducer import reduce
from .store import AppStore, STATE_TOPIC

__all__ = [
    "reduce",
    "AppStore",
    "STATE_TOPIC",
]
