"""Classify raw script lines into headers, stage directions, and dialogue."""

import re
from dataclasses import dataclass
from typing import Callable

from rehearsal_assistant.locales import LocaleProfile, get_locale
from rehearsal_assistant.models import Dialogue, Header, ParsedLine, StageDirection


@dataclass(frozen=True)
class Rule:
    """One classification rule. match() returns a ParsedLine or None."""
    name: str
    match: Callable[[str], ParsedLine | None]


def _dialogue_rule(locale: LocaleProfile) -> Rule:
    # Speaker: locale uppercase letters and whitespace, at least one letter,
    # then the colon with nothing in between.
    pattern = re.compile(
        rf"^\s*([{locale.uppercase}][{locale.uppercase}\s]*):(.*)$"
    )

    def match(line: str) -> Dialogue | None:
        m = pattern.match(line)
        if not m:
            return None
        utterance = m.group(2).strip()
        if not utterance:
            return None
        return Dialogue(character=m.group(1).strip(), utterance=utterance)

    return Rule("dialogue", match)


def _header_rule(locale: LocaleProfile) -> Rule:
    keywords = "|".join(re.escape(k) for k in locale.header_keywords)
    pattern = re.compile(rf"^\s*(?:{keywords})\s+\d+", re.IGNORECASE)

    def match(line: str) -> Header | None:
        if pattern.match(line):
            return Header(text=line.strip())
        return None

    return Rule("header", match)


def _stage_direction_rule(locale: LocaleProfile) -> Rule:
    def match(line: str) -> StageDirection:
        return StageDirection(text=line.strip())

    return Rule("stage_direction", match)


class LineClassifier:
    """Ordered first-match-wins classifier.

    Dialogue is tried before headers, and the stage-direction fallback always
    matches, so every non-blank line lands in exactly one variant.
    """

    def __init__(self, locale: LocaleProfile | None = None):
        self.locale = locale or get_locale()
        self.rules = [
            _dialogue_rule(self.locale),
            _header_rule(self.locale),
            _stage_direction_rule(self.locale),
        ]

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def classify(self, raw_line: str) -> ParsedLine:
        for rule in self.rules:
            result = rule.match(raw_line)
            if result is not None:
                return result
        # Unreachable: the last rule accepts everything
        raise AssertionError(f"No rule matched line: {raw_line!r}")


_default_classifier = None


def classify(raw_line: str) -> ParsedLine:
    """Classify one non-blank line with the default locale."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = LineClassifier()
    return _default_classifier.classify(raw_line)
