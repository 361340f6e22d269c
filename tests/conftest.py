"""Pytest configuration and fixtures for Voice2Text tests."""

import asyncio
import pytest
import tempfile
import logging
import wave
import yaml
from pathlib import Path
from typing import List, Optional

from pubsub import pub

from voice2text.config import Voice2TextConfig, API_KEY_ENV_VAR
from voice2text.models.alerts import Alert, AlertKind
from voice2text.models.state import AppState, LoginForm, Screen
from voice2text.services.alert_publisher import AlertPublisher, ALERT_TOPIC
from voice2text.state.store import AppStore


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class AlertCollector:
    """Records every alert published while subscribed."""

    def __init__(self):
        self.alerts: List[Alert] = []

    def on_alert(self, alert: Alert) -> None:
        self.alerts.append(alert)

    @property
    def titles(self) -> List[str]:
        return [alert.title for alert in self.alerts]

    @property
    def last(self) -> Optional[Alert]:
        return self.alerts[-1] if self.alerts else None

    def of_kind(self, kind: AlertKind) -> List[Alert]:
        return [alert for alert in self.alerts if alert.kind is kind]


class FakeOpenAIClient:
    """Stands in for OpenAIClient; records calls and replays scripted outcomes.

    `transcript`/`summary` may be a string to return or an exception to raise.
    When `gate` is set, calls wait on it before answering.
    """

    def __init__(self, transcript="hello world", summary="- point one", gate: Optional[asyncio.Event] = None):
        self.transcript = transcript
        self.summary = summary
        self.gate = gate
        self.transcribe_calls: List[tuple] = []
        self.summarize_calls: List[str] = []

    async def transcribe(self, file_path: str, file_name: str) -> str:
        self.transcribe_calls.append((file_path, file_name))
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.transcript, BaseException):
            raise self.transcript
        return self.transcript

    async def summarize(self, transcript: str) -> str:
        self.summarize_calls.append(transcript)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.summary, BaseException):
            raise self.summary
        return self.summary


@pytest.fixture(autouse=True)
def clear_api_key_env(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def write_config(temp_data_dir):
    """Write a YAML config into the temp dir and load it."""
    def _write(settings: dict) -> Voice2TextConfig:
        config_path = Path(temp_data_dir) / "voice2text.yaml"
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(settings, f)
        return Voice2TextConfig(str(config_path))
    return _write


@pytest.fixture
def config(write_config):
    """Configuration with a usable API key and data under the temp dir."""
    return write_config({
        "openai": {"api_key": "sk-test"},
        "storage": {"data_directory": "data"},
        "logging": {"file_path": "data/logs/test.log"},
    })


@pytest.fixture
def unconfigured(write_config):
    """Configuration whose key is still the placeholder."""
    return write_config({
        "openai": {"api_key": "YOUR_OPENAI_API_KEY_HERE"},
        "storage": {"data_directory": "data"},
    })


@pytest.fixture
def store():
    """Store on the login screen."""
    return AppStore()


@pytest.fixture
def logged_in_store():
    """Store already past the login screen."""
    return AppStore(AppState(
        screen=Screen.DASHBOARD,
        login=LoginForm(email="student@example.edu", password="secret"),
        is_authenticated=True,
    ))


@pytest.fixture
def alerts():
    return AlertPublisher()


@pytest.fixture
def alert_log():
    """Collect alerts published on the default alert topic."""
    collector = AlertCollector()
    pub.subscribe(collector.on_alert, ALERT_TOPIC)
    yield collector
    pub.unsubscribe(collector.on_alert, ALERT_TOPIC)


@pytest.fixture
def fake_client():
    return FakeOpenAIClient()


@pytest.fixture
def sample_audio_file(temp_data_dir):
    """Create a short silent WAV file for testing."""
    file_path = Path(temp_data_dir) / "lecture.wav"

    with wave.open(str(file_path), 'wb') as wf:
        wf.setnchannels(1)  # Mono
        wf.setsampwidth(2)  # 16-bit
        wf.setframerate(16000)  # 16kHz
        wf.writeframes(b'\x00\x00' * 16000)

    return str(file_path)


@pytest.fixture
def sample_m4a_file(temp_data_dir):
    """A file with an .m4a name; the bytes only need to round-trip."""
    file_path = Path(temp_data_dir) / "meeting.m4a"
    file_path.write_bytes(b'\x00\x00\x00\x18ftypM4A ' + b'\x00' * 64)
    return str(file_path)


@pytest.fixture
def make_client():
    """Factory for scripted fake clients."""
    return FakeOpenAIClient
