"""Voice synthesis via edge-tts with retry logic."""

import asyncio
import logging
import time

import edge_tts

from rehearsal_assistant.constants import TTS_RETRY_COUNT, TTS_RETRY_BASE_DELAY, TTS_RATE
from rehearsal_assistant.errors import EmptyInputText, SynthesisError

logger = logging.getLogger(__name__)


async def _stream_audio(text: str, voice: str, rate: str) -> bytes:
    communicate = edge_tts.Communicate(text, voice, rate=rate)
    audio = bytearray()
    async for chunk in communicate.stream():
        if chunk["type"] == "audio":
            audio.extend(chunk["data"])
    return bytes(audio)


def synthesize(text: str, voice: str, rate: str = TTS_RATE) -> bytes:
    """Synthesize one line to MP3 bytes, retrying on failure.

    Sync wrapper around edge_tts.Communicate().stream(). Network errors and
    empty audio both count as a failed attempt; once TTS_RETRY_COUNT attempts
    fail, SynthesisError is raised with the last error as its cause.
    """
    if not text or not text.strip():
        raise EmptyInputText()

    last_error = None
    for attempt in range(TTS_RETRY_COUNT):
        try:
            audio = asyncio.run(_stream_audio(text, voice, rate))
            if audio:
                return audio
            last_error = SynthesisError(f"TTS produced no audio for: {text[:50]}...")
        except Exception as e:
            last_error = e
        logger.warning("TTS attempt %d/%d failed for voice %s: %s", attempt + 1, TTS_RETRY_COUNT, voice, last_error)

        # Exponential backoff
        if attempt < TTS_RETRY_COUNT - 1:
            delay = TTS_RETRY_BASE_DELAY * (2 ** attempt)
            time.sleep(delay)

    if isinstance(last_error, SynthesisError):
        raise last_error
    raise SynthesisError(f"Could not generate audio with voice {voice}: {last_error}") from last_error


class VoiceSynthesizer:
    def __init__(self, rate: str = TTS_RATE):
        self.rate = rate

    def synthesize(self, text: str, voice: str) -> bytes:
        return synthesize(text, voice, rate=self.rate)
