"""Rehearsal session: an ordered walk over a script's dialogue lines."""

import logging
from dataclasses import dataclass

from rehearsal_assistant.constants import DEFAULT_VOICE
from rehearsal_assistant.errors import NoScriptLoaded
from rehearsal_assistant.models import Dialogue, NextLine, Script, Selector

logger = logging.getLogger(__name__)


@dataclass
class RehearsalSession:
    """Snapshot of a script's dialogue plus a cursor to the next line to serve.

    0 <= cursor <= len(ordered_lines). The session is Active while lines
    remain and Exhausted once the cursor reaches the end; only next_line()
    moves the cursor.
    """
    selector: Selector
    voice_assignment: dict[str, str]
    ordered_lines: tuple[Dialogue, ...]
    cursor: int = 0
    default_voice: str = DEFAULT_VOICE

    @property
    def remaining(self) -> int:
        return len(self.ordered_lines) - self.cursor

    @property
    def is_exhausted(self) -> bool:
        return self.cursor >= len(self.ordered_lines)

    def next_line(self) -> NextLine:
        """Serve the line under the cursor and advance.

        line_number is the 1-based position of the served line. Once exhausted,
        every call returns a done result and leaves the cursor alone.
        """
        if self.is_exhausted:
            return NextLine()
        line = self.ordered_lines[self.cursor]
        self.cursor += 1
        return NextLine(line=line, line_number=self.cursor)

    def resolve_voice(self, character: str) -> str:
        return self.voice_assignment.get(character, self.default_voice)

    def to_dict(self) -> dict:
        return {
            "act": self.selector.act,
            "scene": self.selector.scene,
            "characters": dict(self.voice_assignment),
            "lines": [line.to_dict() for line in self.ordered_lines],
            "currentLine": self.cursor,
        }


def _in_selection(line: Dialogue, selector: Selector) -> bool:
    # Lines carry no act/scene position, so every dialogue line is accepted
    # whatever the selector says.
    return True


def setup_rehearsal(
    script: Script | None,
    selector: Selector | None = None,
    voice_assignment: dict[str, str] | None = None,
    default_voice: str = DEFAULT_VOICE,
) -> RehearsalSession:
    """Create a fresh session over the script's dialogue lines.

    Raises NoScriptLoaded when there is no script. Voice defaults are applied
    when a voice is looked up, not here.
    """
    if script is None:
        raise NoScriptLoaded()
    if selector is None:
        selector = Selector()

    ordered = tuple(line for line in script.dialogue() if _in_selection(line, selector))
    logger.debug(
        "Rehearsal set up for %r (act=%s, scene=%s): %d lines",
        script.title, selector.act, selector.scene, len(ordered),
    )
    return RehearsalSession(
        selector=selector,
        voice_assignment=dict(voice_assignment or {}),
        ordered_lines=ordered,
        default_voice=default_voice,
    )
