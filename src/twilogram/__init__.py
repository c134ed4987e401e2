"""TwiloGram: a record-and-transcribe voice answering bridge."""

__version__ = "0.1.0"
