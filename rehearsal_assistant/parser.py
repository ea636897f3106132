"""Build a Script from the raw text extracted out of a script document."""

import logging

from rehearsal_assistant.classifier import LineClassifier
from rehearsal_assistant.models import Dialogue, Script

logger = logging.getLogger(__name__)


def split_lines(raw_text: str) -> list[str]:
    """Split on newlines and drop lines that are blank once trimmed."""
    return [line for line in raw_text.split("\n") if line.strip()]


def build_script(
    title: str,
    raw_text: str,
    classifier: LineClassifier | None = None,
) -> Script:
    """Parse raw script text into a Script.

    Each non-blank line is classified in document order. The character roster
    keeps the first appearance of each speaker (exact match, no further
    normalization), and dialogue_count counts the Dialogue lines.
    """
    if classifier is None:
        classifier = LineClassifier()

    lines = []
    characters = {}  # dict keeps insertion order
    dialogue_count = 0

    for raw_line in split_lines(raw_text):
        parsed = classifier.classify(raw_line)
        lines.append(parsed)
        if isinstance(parsed, Dialogue):
            characters.setdefault(parsed.character, None)
            dialogue_count += 1

    logger.debug(
        "Parsed %r: %d characters of text, %d lines, %d dialogue, %d speakers",
        title, len(raw_text), len(lines), dialogue_count, len(characters),
    )

    return Script(
        title=title,
        characters=tuple(characters),
        lines=tuple(lines),
        dialogue_count=dialogue_count,
    )
