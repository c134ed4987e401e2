"""Speech-to-text for recorded calls.

REQUIREMENTS:
- DEEPGRAM_API_KEY environment variable
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from ..exceptions import TranscriptionError

logger = logging.getLogger(__name__)


class Transcriber(ABC):
    """Abstract base class for transcription backends."""

    @abstractmethod
    async def transcribe(self, recording_url: str) -> str:
        """Transcribe the audio hosted at `recording_url`.

        Returns the transcript, which may be an empty string when no speech
        was detected.

        Raises:
            ValueError: If `recording_url` is empty.
            TranscriptionError: If the provider call fails.
        """

    async def aclose(self) -> None:
        """Release any held network resources."""


# ---------------------------------------------------------------------------
# Deepgram pre-recorded audio
# ---------------------------------------------------------------------------

class DeepgramTranscriber(Transcriber):
    """Transcribes hosted recordings with Deepgram's `/listen` endpoint.

    Deepgram fetches the audio itself, so the recording never passes through
    this process. One attempt per recording; no retries.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "nova-2",
        base_url: str = "https://api.deepgram.com/v1",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient()

    async def transcribe(self, recording_url: str) -> str:
        if not recording_url:
            raise ValueError("recording_url must be non-empty")

        headers = {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": "application/json",
        }
        params = {
            "model": self._model,
            "punctuate": "true",
            "smart_format": "true",
        }

        try:
            resp = await self._client.post(
                f"{self._base_url}/listen",
                headers=headers,
                params=params,
                json={"url": recording_url},
            )
        except httpx.HTTPError as exc:
            logger.exception("Deepgram request failed: %s", exc)
            raise TranscriptionError(recording_url, exc) from exc

        if resp.status_code != 200:
            logger.error("Deepgram failed: %s - %s", resp.status_code, resp.text)
            raise TranscriptionError(
                recording_url, Exception(f"HTTP {resp.status_code}")
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise TranscriptionError(recording_url, exc) from exc

        return _extract_transcript(recording_url, body)

    async def aclose(self) -> None:
        await self._client.aclose()


def _extract_transcript(recording_url: str, body: Any) -> str:
    if not isinstance(body, dict):
        raise TranscriptionError(recording_url, Exception("Unexpected response body"))

    error = body.get("err_code") or body.get("error")
    if error:
        raise TranscriptionError(
            recording_url, Exception(body.get("err_msg") or str(error))
        )

    try:
        transcript = body["results"]["channels"][0]["alternatives"][0]["transcript"]
    except (KeyError, IndexError, TypeError) as exc:
        raise TranscriptionError(recording_url, exc) from exc

    return (transcript or "").strip()
