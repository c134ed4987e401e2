"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Typed settings for environment-driven configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    twilio_account_sid: str | None = None
    twilio_auth_token: str | None = None
    deepgram_api_key: str | None = None

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Call flow
    voice: str = "Polly.Joanna-Neural"
    max_recording_seconds: int = 60
    finish_on_key: str = "#"

    # Speech-to-text
    deepgram_model: str = "nova-2"
    deepgram_base_url: str = "https://api.deepgram.com/v1"

    def require_transcription_key(self) -> str:
        if not self.deepgram_api_key:
            raise ConfigurationError(
                "DEEPGRAM_API_KEY is not set. Please check your .env file."
            )
        return self.deepgram_api_key


@lru_cache
def get_settings() -> Settings:
    return Settings()
