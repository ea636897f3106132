"""Shared fixtures for rehearsal assistant tests."""

from unittest.mock import MagicMock

import pytest

from rehearsal_assistant.parser import build_script


SAMPLE_TEXT = "ACTO 1\nMARÍA: Hola, ¿cómo estás?\n(Silencio)\nJUAN: Muy bien, gracias."


@pytest.fixture
def sample_text():
    """The four-line example scene."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_script():
    """Script built from the example scene."""
    return build_script("obra.pdf", SAMPLE_TEXT)


@pytest.fixture
def longer_script():
    """Two acts, three speakers, a repeated speaker, and noise lines."""
    text = (
        "LA VISITA\n"
        "ACTO 1\n"
        "ESCENA 1\n"
        "Un salón. Entra BERNARDA.\n"
        "BERNARDA ALBA: ¡Silencio!\n"
        "ADELA: Madre, yo no he dicho nada.\n"
        "\n"
        "   \n"
        "BERNARDA ALBA: Tú tampoco, Adela.\n"
        "Nota: revisar esta escena\n"
        "ACTO 2\n"
        "PONCIA: Ya vienen.\n"
    )
    return build_script("la_visita.txt", text)


@pytest.fixture
def fake_collaborators():
    """Mock extractor, synthesizer, transcriber and critic."""
    extractor = MagicMock()
    extractor.extract.return_value = SAMPLE_TEXT
    synthesizer = MagicMock()
    synthesizer.synthesize.return_value = b"ID3fake-mp3"
    transcriber = MagicMock()
    transcriber.transcribe.return_value = "Hola, como estas"
    critic = MagicMock()
    critic.critique.return_value = "Muy bien, cuida la entonación."
    return {
        "extractor": extractor,
        "synthesizer": synthesizer,
        "transcriber": transcriber,
        "critic": critic,
    }
