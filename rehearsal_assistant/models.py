"""Data models for script parsing and rehearsal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Header:
    text: str          # "ACTO 1", "ESCENA 2", ...

    type = "header"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class StageDirection:
    text: str

    type = "stage_direction"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class Dialogue:
    character: str     # trimmed speaker name, the roster key
    utterance: str     # never empty

    type = "dialogue"

    def to_dict(self) -> dict:
        return {"type": self.type, "character": self.character, "dialogue": self.utterance}


ParsedLine = Header | StageDirection | Dialogue


@dataclass(frozen=True)
class Script:
    """A parsed script document.

    characters keeps first-appearance order; lines keeps document order.
    """
    title: str
    characters: tuple[str, ...]
    lines: tuple[ParsedLine, ...]
    dialogue_count: int

    def dialogue(self) -> list[Dialogue]:
        """All dialogue lines, in document order."""
        return [line for line in self.lines if isinstance(line, Dialogue)]

    def summary(self) -> dict:
        return {
            "title": self.title,
            "characters": list(self.characters),
            "totalLines": self.dialogue_count,
        }

    def to_dict(self) -> dict:
        return {
            **self.summary(),
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True)
class Selector:
    act: str | None = None
    scene: str | None = None


@dataclass(frozen=True)
class NextLine:
    """Result of advancing a session: either a line or the end of the sequence."""
    line: Dialogue | None = None
    line_number: int = 0

    @property
    def done(self) -> bool:
        return self.line is None

    def to_dict(self) -> dict:
        if self.done:
            return {"done": True}
        return {"line": self.line.to_dict(), "lineNumber": self.line_number}
