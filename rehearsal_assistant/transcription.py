"""Speech-to-text for the actor's takes via OpenAI Whisper."""

import logging

import openai

from rehearsal_assistant.constants import TRANSCRIPTION_MODEL, DEFAULT_LOCALE
from rehearsal_assistant.errors import NoAudioProvided, TranscriptionError

logger = logging.getLogger(__name__)


class Transcriber:
    """Transcribe recorded audio in one language.

    The OpenAI client is created on first use so that building a Transcriber
    never needs an API key.
    """

    def __init__(self, client: openai.OpenAI | None = None, model: str = TRANSCRIPTION_MODEL):
        self._client = client
        self.model = model

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI()
        return self._client

    def transcribe(self, audio: bytes, locale: str = DEFAULT_LOCALE, filename: str = "take.webm") -> str:
        """Return the text spoken in audio. filename only tells the API the format."""
        if not audio:
            raise NoAudioProvided()
        try:
            result = self.client.audio.transcriptions.create(
                file=(filename, audio),
                model=self.model,
                language=locale,
            )
        except openai.OpenAIError as e:
            raise TranscriptionError(f"Error transcribing audio: {e}") from e
        logger.debug("Transcribed %d bytes (%s): %r", len(audio), locale, result.text)
        return result.text
