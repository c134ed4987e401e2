"""ASGI app entrypoint for the TwiloGram service.

This module exposes the FastAPI `app` object, the `create_app` factory
used by tests, and the `twilogram` console script.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from twilio.rest import Client

from .api import webhooks as webhooks_router
from .config import Settings, get_settings
from .exceptions import ConfigurationError
from .handlers.reply import ReplyStrategy, TemplateReplyStrategy
from .handlers.transcription import DeepgramTranscriber, Transcriber
from .integrations.twilio_client import build_twilio_client
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _log_banner(settings: Settings) -> None:
    logger.info("TwiloGram server is listening on port %s", settings.port)
    logger.info("Use a tool like ngrok to expose this port to the internet.")
    logger.info("Your Twilio webhook URL for voice calls should be: https://<your-ngrok-url>/voice")


def create_app(
    settings: Optional[Settings] = None,
    transcriber: Optional[Transcriber] = None,
    reply_strategy: Optional[ReplyStrategy] = None,
    twilio_client: Optional[Client] = None,
) -> FastAPI:
    """Build the application and the long-lived services it owns.

    Services not passed in are built from `settings`. Without a Deepgram key
    and no injected transcriber, startup fails with ConfigurationError.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.transcriber is None:
            settings.require_transcription_key()
        _log_banner(settings)
        yield
        if app.state.transcriber is not None:
            await app.state.transcriber.aclose()

    app = FastAPI(title="TwiloGram", lifespan=lifespan)

    if transcriber is None and settings.deepgram_api_key:
        transcriber = DeepgramTranscriber(
            api_key=settings.deepgram_api_key,
            model=settings.deepgram_model,
            base_url=settings.deepgram_base_url,
        )

    app.state.settings = settings
    app.state.transcriber = transcriber
    app.state.reply_strategy = reply_strategy or TemplateReplyStrategy()
    app.state.twilio_client = twilio_client or build_twilio_client(settings)

    app.include_router(webhooks_router.router, tags=["voice"])

    # Liveness only, never touches configuration
    @app.get("/health", response_class=PlainTextResponse, status_code=200)
    async def health() -> str:
        return "OK"

    return app


app = create_app()


def run() -> None:
    """Console entry point: validate configuration and serve."""
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        settings.require_transcription_key()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
