import asyncio

from twilogram.handlers.reply import TemplateReplyStrategy
from twilogram.handlers.voice import NO_SPEECH


def test_template_embeds_transcript():
    reply = asyncio.run(TemplateReplyStrategy().generate("hello world"))

    assert reply == (
        'Thank you for your message. We have recorded: "hello world". '
        "Our team will review it shortly. Goodbye."
    )


def test_blank_transcript_gets_no_speech_message():
    assert asyncio.run(TemplateReplyStrategy().generate("   ")) == NO_SPEECH
