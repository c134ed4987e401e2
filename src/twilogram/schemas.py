"""Pydantic schemas for webhook payloads."""

from pydantic import BaseModel


class VoiceWebhook(BaseModel):
    """Minimal representation of a Twilio inbound-call webhook."""

    CallSid: str | None = None
    From: str | None = None
    To: str | None = None


class RecordingWebhook(BaseModel):
    """Fields Twilio posts to the <Record> action URL."""

    CallSid: str | None = None
    RecordingUrl: str | None = None
    RecordingSid: str | None = None
    RecordingDuration: str | None = None
