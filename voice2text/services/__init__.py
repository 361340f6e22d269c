"""Services layer for Voice2Text application logic."""

from .alert_publisher import AlertPublisher, ALERT_TOPIC
from .openai_client import OpenAIClient
from .navigation_service import NavigationService
from .processing_service import ProcessingService
from .session_manager import SessionManager
from .export_service import ExportService, build_export_text

__all__ = [
    "AlertPublisher",
    "ALERT_TOPIC",
    "OpenAIClient",
    "NavigationService",
    "ProcessingService",
    "SessionManager",
    "ExportService",
    "build_export_text",
]
