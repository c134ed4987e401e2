"""FastAPI dependencies resolving services owned by the application."""

from fastapi import Request

from .config import Settings
from .handlers.reply import ReplyStrategy
from .handlers.transcription import Transcriber


def get_settings(request: Request) -> Settings:
    """Returns the settings the application was built with."""
    return request.app.state.settings


def get_transcriber(request: Request) -> Transcriber:
    """Returns the configured transcription service."""
    return request.app.state.transcriber


def get_reply_strategy(request: Request) -> ReplyStrategy:
    """Returns the configured reply strategy."""
    return request.app.state.reply_strategy

