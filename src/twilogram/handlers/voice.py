"""Voice markup (TwiML) builders for each step of the call.

Every function here returns a complete TwiML document as a string so the
webhook layer only has to wrap it in a `text/xml` response.
"""

from twilio.twiml.voice_response import VoiceResponse

GREETING = (
    "Hello, and thank you for calling the TwiloGram assistant. "
    "Please leave your message after the tone. "
    "Press the pound key when you are finished."
)
APOLOGY = (
    "I am sorry, but there was an error processing your request. "
    "Please call back later."
)
NO_SPEECH = "I am sorry, I did not catch that. Could you please call again?"

RECORDING_ACTION = "/handle-recording"


def build_greeting_response(
    voice: str,
    action: str = RECORDING_ACTION,
    max_length: int = 60,
    finish_on_key: str = "#",
) -> str:
    """Greet the caller and record their message.

    Twilio POSTs the recording details to `action` once the caller stops
    speaking, presses `finish_on_key`, or hits `max_length` seconds. The
    trailing <Hangup/> is only reached when <Record> never fires its action.
    """
    response = VoiceResponse()
    response.say(GREETING, voice=voice)
    response.record(
        action=action,
        method="POST",
        max_length=max_length,
        finish_on_key=finish_on_key,
        transcribe=False,
    )
    response.hangup()
    return str(response)


def build_reply_response(text: str, voice: str) -> str:
    """Speak `text` and end the call."""
    response = VoiceResponse()
    response.say(text, voice=voice)
    response.hangup()
    return str(response)


def build_apology_response(voice: str) -> str:
    return build_reply_response(APOLOGY, voice)
