"""Webhook endpoints called by Twilio during a call.

`/voice` answers the call and starts a recording; `/handle-recording`
receives the finished recording, transcribes it and speaks a reply.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from ..config import Settings
from ..dependencies import get_reply_strategy, get_settings, get_transcriber
from ..exceptions import TranscriptionError
from ..handlers import voice as voice_handler
from ..handlers.reply import ReplyStrategy
from ..handlers.transcription import Transcriber
from ..schemas import RecordingWebhook, VoiceWebhook

logger = logging.getLogger(__name__)

TWIML_MEDIA_TYPE = "text/xml"

router = APIRouter()


def _twiml(content: str) -> Response:
    return Response(content=content, media_type=TWIML_MEDIA_TYPE)


@router.post("/voice")
async def inbound_voice(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Response:
    """Greet the caller and ask Twilio to record their message."""
    form = await request.form()
    payload = VoiceWebhook(**{k: v for k, v in form.items() if isinstance(v, str)})
    logger.info("Incoming call from: %s (CallSid=%s)", payload.From, payload.CallSid)

    twiml_xml = voice_handler.build_greeting_response(
        voice=settings.voice,
        action=voice_handler.RECORDING_ACTION,
        max_length=settings.max_recording_seconds,
        finish_on_key=settings.finish_on_key,
    )
    return _twiml(twiml_xml)


@router.post("/handle-recording")
async def handle_recording(
    request: Request,
    settings: Settings = Depends(get_settings),
    transcriber: Transcriber = Depends(get_transcriber),
    reply_strategy: ReplyStrategy = Depends(get_reply_strategy),
) -> Response:
    """Transcribe the finished recording and read a reply back.

    A missing `RecordingUrl` is the only case answered with an HTTP error.
    Every other failure still returns valid TwiML so the caller hears an
    apology instead of a dropped line.
    """
    form = await request.form()
    payload = RecordingWebhook(**{k: v for k, v in form.items() if isinstance(v, str)})
    recording_url = (payload.RecordingUrl or "").strip()
    logger.info("Received recording for processing. URL: %s", recording_url or None)

    if not recording_url:
        logger.error("No RecordingUrl was provided in the request.")
        return Response(
            content="Bad Request: No RecordingUrl",
            media_type="text/plain",
            status_code=400,
        )

    try:
        transcript = await transcriber.transcribe(recording_url)
        logger.info('Transcript (CallSid=%s): "%s"', payload.CallSid, transcript)

        if not transcript.strip():
            return _twiml(voice_handler.build_reply_response(voice_handler.NO_SPEECH, settings.voice))

        agent_reply = await reply_strategy.generate(transcript)
        logger.info("Reply: %s", agent_reply)
        return _twiml(voice_handler.build_reply_response(agent_reply, settings.voice))

    except TranscriptionError as exc:
        logger.error("Transcription failed for %s: %s", exc.recording_url, exc.cause)
    except Exception:
        logger.exception("An error occurred in /handle-recording")

    return _twiml(voice_handler.build_apology_response(settings.voice))
