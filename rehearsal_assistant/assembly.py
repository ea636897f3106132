"""Assemble cue audio into a practice track with gaps for the actor's lines."""

from pydub import AudioSegment

from rehearsal_assistant.constants import (
    PAUSE_BETWEEN_LINES_MS,
    GAP_PER_WORD_MS,
    MIN_GAP_MS,
    CUE_TARGET_DBFS,
)
from rehearsal_assistant.models import Dialogue


def gap_for_line(line: Dialogue) -> int:
    """Silence (ms) left for the actor to say their own line."""
    return max(MIN_GAP_MS, len(line.utterance.split()) * GAP_PER_WORD_MS)


def normalize_level(audio: AudioSegment, target_dbfs: float = CUE_TARGET_DBFS) -> AudioSegment:
    """Shift audio so its dBFS matches target_dbfs. Silence is left unchanged."""
    if audio.dBFS == float("-inf"):
        return audio
    return audio + (target_dbfs - audio.dBFS)


def build_practice_track(
    lines: list[Dialogue],
    cues: dict[int, AudioSegment],
    role: str,
    pause_ms: int = PAUSE_BETWEEN_LINES_MS,
) -> AudioSegment:
    """Join the rehearsal into one track.

    lines are the session lines in order; cues maps a 1-based line number to
    the synthesized audio for that line. The role's own lines, and any line
    without a cue, become silent gaps sized by word count.
    """
    result = AudioSegment.silent(duration=0)
    for number, line in enumerate(lines, start=1):
        if number > 1:
            result += AudioSegment.silent(duration=pause_ms)
        cue = cues.get(number)
        if line.character == role or cue is None:
            result += AudioSegment.silent(duration=gap_for_line(line))
        else:
            result += normalize_level(cue)
    return result
