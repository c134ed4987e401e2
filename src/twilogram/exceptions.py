"""Custom exceptions for the TwiloGram service."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""


class TranscriptionError(Exception):
    """Raised when a recording could not be transcribed."""

    def __init__(self, recording_url: str, cause: Exception | None = None):
        self.recording_url = recording_url
        self.cause = cause
        super().__init__(f"Failed to transcribe recording '{recording_url}'")
