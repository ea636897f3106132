"""Tests for constants and models (Layer 0)."""

from rehearsal_assistant.models import Dialogue, Header, NextLine, Selector, StageDirection
from rehearsal_assistant import constants


def test_line_variants_serialize():
    """Each variant serializes with its type tag."""
    assert Header("ACTO 1").to_dict() == {"type": "header", "text": "ACTO 1"}
    assert StageDirection("(Silencio)").to_dict() == {"type": "stage_direction", "text": "(Silencio)"}
    assert Dialogue("JUAN", "Hola.").to_dict() == {
        "type": "dialogue", "character": "JUAN", "dialogue": "Hola.",
    }


def test_line_variants_are_value_objects():
    """Equal fields mean equal lines; type is not a field."""
    assert Dialogue("JUAN", "Hola.") == Dialogue("JUAN", "Hola.")
    assert Header("ACTO 1") != StageDirection("ACTO 1")
    assert Dialogue.type == "dialogue"


def test_script_summary_and_dict(sample_script):
    """summary() is the upload payload; to_dict() adds the lines."""
    assert sample_script.summary() == {
        "title": "obra.pdf",
        "characters": ["MARÍA", "JUAN"],
        "totalLines": 2,
    }
    full = sample_script.to_dict()
    assert full["totalLines"] == 2
    assert [line["type"] for line in full["lines"]] == ["header", "dialogue", "stage_direction", "dialogue"]


def test_script_dialogue_filter(sample_script):
    """dialogue() returns only Dialogue lines in order."""
    assert [d.character for d in sample_script.dialogue()] == ["MARÍA", "JUAN"]


def test_selector_defaults():
    """Selector fields default to None."""
    sel = Selector()
    assert sel.act is None
    assert sel.scene is None


def test_next_line_done_shape():
    """An empty NextLine is done and serializes to {done: true}."""
    result = NextLine()
    assert result.done
    assert result.to_dict() == {"done": True}


def test_next_line_line_shape():
    """A NextLine with a line carries lineNumber."""
    result = NextLine(line=Dialogue("JUAN", "Hola."), line_number=3)
    assert not result.done
    assert result.to_dict() == {
        "line": {"type": "dialogue", "character": "JUAN", "dialogue": "Hola."},
        "lineNumber": 3,
    }


def test_constants_exist():
    """All module-level constants are defined."""
    expected = [
        "DEFAULT_LOCALE",
        "DEFAULT_VOICE",
        "TTS_RETRY_COUNT",
        "TTS_RETRY_BASE_DELAY",
        "TTS_RATE",
        "TRANSCRIPTION_MODEL",
        "CRITIQUE_MODEL",
        "CRITIQUE_TEMPERATURE",
        "CRITIQUE_MAX_TOKENS",
        "PAUSE_BETWEEN_LINES_MS",
        "GAP_PER_WORD_MS",
        "MIN_GAP_MS",
        "CUE_TARGET_DBFS",
        "OUTPUT_DIR",
        "VERSION",
    ]
    for name in expected:
        assert hasattr(constants, name), f"Missing constant: {name}"
