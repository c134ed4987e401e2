"""Shared fixtures: an app wired with fake services."""

import pytest
from fastapi.testclient import TestClient

from twilogram.config import Settings
from twilogram.exceptions import TranscriptionError
from twilogram.handlers.transcription import Transcriber
from twilogram.main import create_app


class FakeTranscriber(Transcriber):
    """Returns a canned transcript, or raises the canned error."""

    def __init__(self, transcript: str = "", error: Exception | None = None):
        self.transcript = transcript
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def transcribe(self, recording_url: str) -> str:
        self.calls.append(recording_url)
        if self.error is not None:
            raise self.error
        return self.transcript

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        deepgram_api_key="test-key",
        twilio_account_sid=None,
        twilio_auth_token=None,
    )


@pytest.fixture
def transcriber():
    return FakeTranscriber(transcript="hello world")


@pytest.fixture
def app(settings, transcriber):
    return create_app(settings=settings, transcriber=transcriber)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def failing_transcriber():
    return FakeTranscriber(error=TranscriptionError("https://api.twilio.com/rec/RE1", Exception("boom")))
