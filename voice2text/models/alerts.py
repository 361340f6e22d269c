"""User-facing notification models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AlertKind(Enum):
    """What kind of outcome an alert reports."""
    INFO = "info"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    REMOTE = "remote"
    TRANSPORT = "transport"

    @property
    def is_error(self) -> bool:
        return self is not AlertKind.INFO


@dataclass(frozen=True)
class Alert:
    """A notification shown to the user."""
    kind: AlertKind
    title: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
