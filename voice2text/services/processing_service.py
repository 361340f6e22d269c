"""Processing pipeline: audio file -> transcript -> summary."""

import logging
from typing import Callable, Optional

from ..config import Voice2TextConfig
from ..exceptions import ConfigurationError, InputValidationError, RemoteServiceError
from ..host.file_picker import AudioFilePicker
from ..models.actions import (
    FileSelected,
    SummaryFinished,
    SummaryStarted,
    SummarySucceeded,
    TranscriptEdited,
    SummaryEdited,
    TranscriptionFinished,
    TranscriptionStarted,
    TranscriptionSucceeded,
)
from ..models.state import SelectedFile
from ..state.store import AppStore
from .alert_publisher import AlertPublisher
from .openai_client import OpenAIClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], OpenAIClient]


class ProcessingService:
    """Runs the two user-triggered remote calls against the app state.

    Each call is one-shot: no retries and no cancellation. Each has its own
    single-flight guard, checked before anything else touches the state, so
    a second trigger while one is in flight is refused rather than queued.
    The in-flight flag is reset on every exit path.
    """

    def __init__(self,
                 config: Voice2TextConfig,
                 store: AppStore,
                 alerts: AlertPublisher,
                 file_picker: Optional[AudioFilePicker] = None,
                 client_factory: Optional[ClientFactory] = None):
        """Initialize processing service.

        Args:
            config: Application configuration
            store: Application state store
            alerts: Publisher for user notifications
            file_picker: Picker used by choose_file
            client_factory: Builds an OpenAIClient from an API key
        """
        self.config = config
        self.store = store
        self.alerts = alerts
        self.file_picker = file_picker or AudioFilePicker()
        self.client_factory = client_factory or self._create_openai_client

    def _create_openai_client(self, api_key: str) -> OpenAIClient:
        return OpenAIClient(
            api_key=api_key,
            base_url=self.config.get('openai.base_url'),
            transcription_model=self.config.get('openai.transcription_model'),
            summary_model=self.config.get('openai.summary_model'),
            temperature=self.config.get('openai.summary_temperature'),
        )

    def _get_client(self) -> Optional[OpenAIClient]:
        """Build a client, or raise a configuration alert and return None."""
        try:
            api_key = self.config.get_openai_api_key()
        except ConfigurationError as e:
            logger.warning(f"Blocked remote call: {e.detail}")
            self.alerts.configuration_error("Missing API key", e.detail)
            return None
        return self.client_factory(api_key)

    def choose_file(self, raw_path: str) -> Optional[SelectedFile]:
        """Select an audio file; clears the current transcript and summary.

        Args:
            raw_path: Path as typed by the user; empty cancels

        Returns:
            The selected file, or None if cancelled or rejected
        """
        try:
            selected = self.file_picker.pick(raw_path)
        except InputValidationError as e:
            self.alerts.validation_error("Invalid file", e.detail)
            return None
        except OSError as e:
            logger.error(f"Could not read picked file: {e}", exc_info=True)
            self.alerts.transport_error("Error", "Could not open the selected file.")
            return None

        if selected is None:
            return None

        self.select_file(selected)
        return selected

    def select_file(self, selected: SelectedFile) -> None:
        self.store.dispatch(FileSelected(selected))
        self.alerts.info("File selected", selected.name)

    def edit_transcript(self, text: str) -> None:
        self.store.dispatch(TranscriptEdited(text))

    def edit_summary(self, text: str) -> None:
        self.store.dispatch(SummaryEdited(text))

    async def start_processing(self) -> bool:
        """Transcribe the selected file.

        Returns:
            True if a transcript was stored
        """
        selected = self.store.state.processing.selected_file
        if selected is None or not selected.has_audio:
            self.alerts.validation_error("No file", "Choose an audio file first.")
            return False

        transcribed = await self.transcribe(selected)

        if transcribed and self.config.get('processing.auto_summarize', False):
            logger.info("Auto-summarize enabled, chaining summary")
            await self.generate_summary()

        return transcribed

    async def transcribe(self, selected: SelectedFile) -> bool:
        """Send one file to the transcription endpoint.

        Args:
            selected: File to transcribe

        Returns:
            True on success
        """
        if self.store.state.processing.is_transcribing:
            logger.warning("Transcription already in flight, ignoring trigger")
            self.alerts.info("Busy", "A transcription is already in progress.")
            return False

        client = self._get_client()
        if client is None:
            return False

        self.store.dispatch(TranscriptionStarted())
        try:
            text = await client.transcribe(selected.path, selected.name)
            self.store.dispatch(TranscriptionSucceeded(text))
            return True
        except RemoteServiceError as e:
            logger.error(f"Transcription error: {e.status} - {e.body}")
            self.alerts.remote_error("Transcription failed", e.body)
            return False
        except Exception as e:
            logger.error(f"Transcription failed: {e}", exc_info=True)
            self.alerts.transport_error("Error", "Could not transcribe audio.")
            return False
        finally:
            self.store.dispatch(TranscriptionFinished())

    async def generate_summary(self) -> bool:
        """Summarize the current transcript.

        Returns:
            True if a summary was stored
        """
        transcript = self.store.state.processing.transcript
        if not transcript.strip():
            self.alerts.validation_error("No transcript", "Transcribe audio before summarizing.")
            return False

        return await self.summarize(transcript)

    async def summarize(self, transcript: str) -> bool:
        """Send one transcript to the chat-completion endpoint.

        Args:
            transcript: Non-empty transcript text

        Returns:
            True on success
        """
        if self.store.state.processing.is_summarizing:
            logger.warning("Summary already in flight, ignoring trigger")
            self.alerts.info("Busy", "A summary is already being generated.")
            return False

        client = self._get_client()
        if client is None:
            return False

        self.store.dispatch(SummaryStarted())
        try:
            summary = await client.summarize(transcript)
            self.store.dispatch(SummarySucceeded(summary))
            return True
        except RemoteServiceError as e:
            logger.error(f"Summary error: {e.status} - {e.body}")
            self.alerts.remote_error("Summary failed", e.body)
            return False
        except Exception as e:
            logger.error(f"Summary failed: {e}", exc_info=True)
            self.alerts.transport_error("Error", "Could not summarize transcript.")
            return False
        finally:
            self.store.dispatch(SummaryFinished())
