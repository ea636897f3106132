"""Tests for transcription (Layer 1e)."""

from unittest.mock import MagicMock

import openai
import pytest

from rehearsal_assistant.constants import TRANSCRIPTION_MODEL
from rehearsal_assistant.errors import NoAudioProvided, TranscriptionError
from rehearsal_assistant.transcription import Transcriber


def _client(text="Hola, como estas"):
    client = MagicMock()
    client.audio.transcriptions.create.return_value = MagicMock(text=text)
    return client


def test_transcribe_calls_whisper():
    """Audio, model and language go to the API."""
    client = _client()
    text = Transcriber(client=client).transcribe(b"audio-bytes", locale="es", filename="take.m4a")
    assert text == "Hola, como estas"
    client.audio.transcriptions.create.assert_called_once_with(
        file=("take.m4a", b"audio-bytes"),
        model=TRANSCRIPTION_MODEL,
        language="es",
    )


@pytest.mark.parametrize("audio", [None, b""])
def test_transcribe_requires_audio(audio):
    """Missing audio raises NoAudioProvided without calling the API."""
    client = _client()
    with pytest.raises(NoAudioProvided):
        Transcriber(client=client).transcribe(audio)
    client.audio.transcriptions.create.assert_not_called()


def test_transcribe_api_error():
    """OpenAI errors become TranscriptionError."""
    client = _client()
    client.audio.transcriptions.create.side_effect = openai.OpenAIError("rate limited")
    with pytest.raises(TranscriptionError, match="rate limited") as exc_info:
        Transcriber(client=client).transcribe(b"audio")
    assert exc_info.value.code == "transcription_error"


def test_client_created_lazily(monkeypatch):
    """Constructing a Transcriber needs no API key."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    transcriber = Transcriber()
    assert transcriber._client is None
