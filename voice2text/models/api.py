"""Response models for the OpenAI transcription and chat-completion endpoints.

Only the fields we read are declared; everything else in the payload is
ignored. Missing fields fall back instead of failing validation.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, field_validator

NO_SUMMARY_FALLBACK = "No summary generated."


class TranscriptionResponse(BaseModel):
    """Body of a successful /audio/transcriptions call."""
    text: Optional[str] = None

    @property
    def transcript(self) -> str:
        return self.text if self.text is not None else ""


class ChatMessage(BaseModel):
    content: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class ChatChoice(BaseModel):
    message: Optional[ChatMessage] = None

    @field_validator("message", mode="before")
    @classmethod
    def _drop_non_object(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, ChatMessage)) else None


class ChatCompletionResponse(BaseModel):
    """Body of a successful /chat/completions call."""
    choices: List[Optional[ChatChoice]] = []

    @field_validator("choices", mode="before")
    @classmethod
    def _keep_object_choices(cls, value: Any) -> Any:
        # null or malformed entries become None so `summary` falls back
        if not isinstance(value, list):
            return []
        return [choice if isinstance(choice, (dict, ChatChoice)) else None for choice in value]

    @property
    def summary(self) -> str:
        """Content of the first choice, or the fallback when the path is absent."""
        if not self.choices or self.choices[0] is None:
            return NO_SUMMARY_FALLBACK
        message = self.choices[0].message
        if message is None or message.content is None:
            return NO_SUMMARY_FALLBACK
        return message.content
