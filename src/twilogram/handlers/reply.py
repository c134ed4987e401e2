"""Reply generation from a caller's transcript.

`TemplateReplyStrategy` is a placeholder: swap in a language-model backed
`ReplyStrategy` to produce contextual answers without touching the webhooks.
"""

from abc import ABC, abstractmethod

from .voice import NO_SPEECH


class ReplyStrategy(ABC):
    @abstractmethod
    async def generate(self, transcript: str) -> str:
        """Return the text to speak back for `transcript`."""


class TemplateReplyStrategy(ReplyStrategy):
    """Confirm what was heard and promise a follow-up."""

    template = (
        'Thank you for your message. We have recorded: "{transcript}". '
        "Our team will review it shortly. Goodbye."
    )

    async def generate(self, transcript: str) -> str:
        transcript = transcript.strip()
        if not transcript:
            return NO_SPEECH
        return self.template.format(transcript=transcript)
