"""Exception hierarchy for Voice2Text.

Every failure a user action can hit maps to one of these, so the services
layer can turn it into exactly one alert.
"""

from typing import Optional


class Voice2TextError(Exception):
    """Base exception for all Voice2Text errors."""

    def __init__(self, detail: str = "An unexpected error occurred"):
        self.detail = detail
        super().__init__(detail)


class ConfigurationError(Voice2TextError):
    """Raised when the API credential is missing or still the placeholder."""

    def __init__(self, detail: str = "OpenAI API key is not configured"):
        super().__init__(detail)


class InputValidationError(Voice2TextError):
    """Raised when a required input is empty or unusable."""

    def __init__(self, detail: str):
        super().__init__(detail)


class RemoteServiceError(Voice2TextError):
    """Raised when the remote endpoint answers with a non-success status.

    The raw response body is kept verbatim so it can be shown to the user.
    """

    def __init__(self, status: int, body: str, service: Optional[str] = None):
        self.status = status
        self.body = body
        self.service = service
        prefix = f"{service} API error" if service else "API error"
        super().__init__(f"{prefix}: {status} - {body}")
