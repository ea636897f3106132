"""Tests for the rehearsal session (Layer 2a)."""

import pytest

from rehearsal_assistant.constants import DEFAULT_VOICE
from rehearsal_assistant.errors import NoScriptLoaded
from rehearsal_assistant.models import Dialogue, Selector
from rehearsal_assistant.parser import build_script
from rehearsal_assistant.session import setup_rehearsal


def test_setup_requires_script():
    """No script means NoScriptLoaded."""
    with pytest.raises(NoScriptLoaded):
        setup_rehearsal(None)


def test_setup_snapshots_dialogue(sample_script):
    """Session holds exactly the dialogue lines, in order, with cursor at 0."""
    session = setup_rehearsal(sample_script, Selector(act="1", scene="1"), {"JUAN": "es-MX-JorgeNeural"})
    assert session.cursor == 0
    assert session.ordered_lines == (
        Dialogue("MARÍA", "Hola, ¿cómo estás?"),
        Dialogue("JUAN", "Muy bien, gracias."),
    )
    assert session.remaining == 2
    assert not session.is_exhausted


def test_selector_does_not_filter(longer_script):
    """Act/scene selection accepts every dialogue line."""
    everything = setup_rehearsal(longer_script)
    act_two = setup_rehearsal(longer_script, Selector(act="2", scene="9"))
    assert act_two.ordered_lines == everything.ordered_lines
    assert len(act_two.ordered_lines) == longer_script.dialogue_count
    assert act_two.selector == Selector(act="2", scene="9")


def test_next_line_walks_in_order(sample_script):
    """Each line once, numbered from 1, then done."""
    session = setup_rehearsal(sample_script)
    first = session.next_line()
    assert first.line == Dialogue("MARÍA", "Hola, ¿cómo estás?")
    assert first.line_number == 1
    second = session.next_line()
    assert second.line == Dialogue("JUAN", "Muy bien, gracias.")
    assert second.line_number == 2
    assert session.next_line().done
    assert session.is_exhausted


def test_next_line_idempotent_when_exhausted(longer_script):
    """After the last line, repeated calls stay done and the cursor stays put."""
    session = setup_rehearsal(longer_script)
    numbers = []
    while not (result := session.next_line()).done:
        numbers.append(result.line_number)
    assert numbers == [1, 2, 3, 4]
    for _ in range(3):
        assert session.next_line().to_dict() == {"done": True}
        assert session.cursor == 4


def test_empty_script_session_starts_exhausted():
    """No dialogue means the new session is already exhausted."""
    script = build_script("t", "ACTO 1\n(Oscuro)")
    session = setup_rehearsal(script)
    assert session.is_exhausted
    assert session.next_line().done
    assert session.cursor == 0


def test_snapshot_is_independent_of_assignment_dict(sample_script):
    """Later changes to the caller's dict don't leak into the session."""
    voices = {"JUAN": "es-MX-JorgeNeural"}
    session = setup_rehearsal(sample_script, voice_assignment=voices)
    voices["JUAN"] = "changed"
    voices["MARÍA"] = "changed"
    assert session.resolve_voice("JUAN") == "es-MX-JorgeNeural"
    assert session.resolve_voice("MARÍA") == DEFAULT_VOICE


def test_resolve_voice_default(sample_script):
    """Unmapped characters get the default voice; lookup doesn't mutate."""
    session = setup_rehearsal(sample_script, voice_assignment={"JUAN": "es-AR-TomasNeural"})
    assert session.resolve_voice("JUAN") == "es-AR-TomasNeural"
    assert session.resolve_voice("MARÍA") == DEFAULT_VOICE
    assert session.voice_assignment == {"JUAN": "es-AR-TomasNeural"}
    assert session.cursor == 0


def test_resolve_voice_custom_default(sample_script):
    """The default voice is configurable per session."""
    session = setup_rehearsal(sample_script, default_voice="en-US-GuyNeural")
    assert session.resolve_voice("NADIE") == "en-US-GuyNeural"


def test_session_to_dict(sample_script):
    """to_dict reports selector, voices, lines and cursor."""
    session = setup_rehearsal(sample_script, Selector(act="1"), {"JUAN": "v"})
    session.next_line()
    data = session.to_dict()
    assert data["act"] == "1"
    assert data["scene"] is None
    assert data["characters"] == {"JUAN": "v"}
    assert len(data["lines"]) == 2
    assert data["currentLine"] == 1
