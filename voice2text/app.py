"""Wires configuration, state and services into one application object."""

import logging
from typing import Optional

from .config import Voice2TextConfig
from .host.clipboard import Clipboard, TkClipboard
from .host.file_picker import AudioFilePicker
from .host.share import FileShareTarget, ShareTarget
from .services.alert_publisher import AlertPublisher
from .services.export_service import ExportService
from .services.navigation_service import NavigationService
from .services.processing_service import ClientFactory, ProcessingService
from .services.session_manager import SessionManager
from .state.store import AppStore
from .storage.file_manager import FileManager

logger = logging.getLogger(__name__)


class Voice2TextApp:
    """Holds the single store plus every service that acts on it."""

    def __init__(self,
                 config: Voice2TextConfig,
                 share_target: Optional[ShareTarget] = None,
                 clipboard: Optional[Clipboard] = None,
                 client_factory: Optional[ClientFactory] = None):
        """Initialize the application.

        Args:
            config: Application configuration
            share_target: Where exports go (defaults to the exports folder)
            clipboard: Clipboard adapter (defaults to the Tk clipboard)
            client_factory: Builds the OpenAI client from an API key
        """
        self.config = config
        self.store = AppStore()
        self.alerts = AlertPublisher()
        self.file_manager = FileManager(config.get_data_directory())

        self.navigation = NavigationService(self.store, self.alerts)
        self.processing = ProcessingService(
            config,
            self.store,
            self.alerts,
            file_picker=AudioFilePicker(self.file_manager),
            client_factory=client_factory,
        )
        self.sessions = SessionManager(self.store, self.alerts)
        self.export = ExportService(
            self.store,
            self.alerts,
            share_target=share_target or FileShareTarget(self.file_manager),
            clipboard=clipboard or TkClipboard(),
        )

        logger.info(f"Voice2TextApp initialized, API key configured: {config.has_api_key()}")

    def cleanup(self) -> None:
        """Drop cached audio; sessions are not kept past the process."""
        self.file_manager.clear_cache()
