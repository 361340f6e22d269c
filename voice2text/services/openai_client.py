"""OpenAI client for audio transcription and transcript summarization."""

import asyncio
import logging
import aiohttp
from pathlib import Path
from typing import Any, Dict

from ..exceptions import RemoteServiceError
from ..models.api import TranscriptionResponse, ChatCompletionResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
TRANSCRIPTION_MODEL = "gpt-4o-mini-transcribe"
SUMMARY_MODEL = "gpt-4.1-mini"
SUMMARY_TEMPERATURE = 0.3
AUDIO_CONTENT_TYPE = "audio/m4a"
SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful assistant that reads transcripts from lectures or meetings "
    "and returns a short bullet-point summary of the KEY POINTS only."
)


class OpenAIClient:
    """One-shot calls to the transcription and chat-completion endpoints."""

    def __init__(self,
                 api_key: str,
                 base_url: str = DEFAULT_BASE_URL,
                 transcription_model: str = TRANSCRIPTION_MODEL,
                 summary_model: str = SUMMARY_MODEL,
                 temperature: float = SUMMARY_TEMPERATURE):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            base_url: API root, without a trailing slash
            transcription_model: Model used for /audio/transcriptions
            summary_model: Model used for /chat/completions
            temperature: Sampling temperature for summaries
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.transcription_model = transcription_model
        self.summary_model = summary_model
        self.temperature = temperature

        logger.info(f"OpenAIClient initialized: transcription={transcription_model}, summary={summary_model}")

    @property
    def transcription_url(self) -> str:
        return f"{self.base_url}/audio/transcriptions"

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def transcribe(self, file_path: str, file_name: str) -> str:
        """Upload an audio file and return its transcript.

        Args:
            file_path: Local path of the audio file
            file_name: Display name sent as the multipart filename

        Returns:
            The `text` field of the response, or "" when absent

        Raises:
            RemoteServiceError: If the endpoint answers with a non-success status
            aiohttp.ClientError: On network failure
            pydantic.ValidationError: If the body is not the expected shape
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}"
        }

        loop = asyncio.get_running_loop()
        audio = await loop.run_in_executor(None, Path(file_path).read_bytes)

        form = aiohttp.FormData()
        form.add_field(
            "file",
            audio,
            filename=file_name,
            content_type=AUDIO_CONTENT_TYPE,
        )
        form.add_field("model", self.transcription_model)

        logger.info(f"Sending {file_name} for transcription")
        async with aiohttp.ClientSession() as session:
            async with session.post(self.transcription_url, headers=headers, data=form) as response:
                if not response.ok:
                    error_text = await response.text()
                    raise RemoteServiceError(response.status, error_text, service="Transcription")

                result = await response.json(content_type=None)

        transcript = TranscriptionResponse.model_validate(result).transcript
        logger.info(f"Transcription received: {len(transcript)} chars")
        return transcript

    async def summarize(self, transcript: str) -> str:
        """Send a transcript to the chat-completion endpoint and return the summary.

        Args:
            transcript: Transcript text, sent as the user message

        Returns:
            Content of the first choice, or the fallback text when absent

        Raises:
            RemoteServiceError: If the endpoint answers with a non-success status
            aiohttp.ClientError: On network failure
            pydantic.ValidationError: If the body is not the expected shape
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        data = self.build_summary_request(transcript)

        logger.info(f"Requesting summary for {len(transcript)} chars of transcript")
        async with aiohttp.ClientSession() as session:
            async with session.post(self.chat_completions_url, headers=headers, json=data) as response:
                if not response.ok:
                    error_text = await response.text()
                    raise RemoteServiceError(response.status, error_text, service="Summary")

                result = await response.json(content_type=None)

        return ChatCompletionResponse.model_validate(result).summary

    def build_summary_request(self, transcript: str) -> Dict[str, Any]:
        """Build the chat-completion request body."""
        return {
            "model": self.summary_model,
            "messages": [
                {
                    "role": "system",
                    "content": SUMMARY_SYSTEM_PROMPT
                },
                {
                    "role": "user",
                    "content": transcript
                }
            ],
            "temperature": self.temperature
        }
