"""Performance feedback: compare what the actor said with the scripted line."""

import logging

import openai

from rehearsal_assistant.constants import (
    CRITIQUE_MODEL,
    CRITIQUE_TEMPERATURE,
    CRITIQUE_MAX_TOKENS,
    DEFAULT_LOCALE,
)
from rehearsal_assistant.errors import CritiqueError, EmptyInputText

logger = logging.getLogger(__name__)

# System prompt and user template per locale. The feedback is read aloud to
# the actor, so it must be short and conversational.
PROMPTS = {
    "es": {
        "system": (
            "Eres un director de teatro con mucha experiencia. Compara lo que "
            "dijo el actor con el texto del guion y dale indicaciones concretas "
            "sobre la fidelidad al texto, la entonación y la interpretación del "
            "personaje. Tu respuesta se leerá en voz alta: habla de forma "
            "natural, breve y motivadora."
        ),
        "user": (
            'Texto del guion: "{expected}"\n'
            'Lo que dijo el actor: "{actual}"\n'
            "Personaje: {character}\n\n"
            "Dame una valoración breve y útil."
        ),
    },
    "en": {
        "system": (
            "You are an experienced theatre director. Compare what the actor "
            "said with the scripted line and give concrete notes on accuracy "
            "to the text, intonation, and how to play the character. Your "
            "answer will be read aloud: keep it natural, brief, and encouraging."
        ),
        "user": (
            'Scripted line: "{expected}"\n'
            'What the actor said: "{actual}"\n'
            "Character: {character}\n\n"
            "Give short, useful feedback."
        ),
    },
}


def build_messages(expected: str, actual: str, character: str, locale: str = DEFAULT_LOCALE) -> list[dict]:
    """Build the chat messages for one critique request."""
    prompt = PROMPTS.get(locale, PROMPTS[DEFAULT_LOCALE])
    return [
        {"role": "system", "content": prompt["system"]},
        {"role": "user", "content": prompt["user"].format(
            expected=expected, actual=actual, character=character,
        )},
    ]


class Critic:
    def __init__(
        self,
        client: openai.OpenAI | None = None,
        model: str = CRITIQUE_MODEL,
        locale: str = DEFAULT_LOCALE,
    ):
        self._client = client
        self.model = model
        self.locale = locale

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI()
        return self._client

    def critique(self, expected: str, actual: str, character: str) -> str:
        """Return prose feedback on how actual compares with expected.

        expected must be non-empty; actual may be blank (the actor said
        nothing, which is itself worth a note).
        """
        if not expected or not expected.strip():
            raise EmptyInputText("The expected line is required")
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(expected, actual or "", character, self.locale),
                temperature=CRITIQUE_TEMPERATURE,
                max_tokens=CRITIQUE_MAX_TOKENS,
            )
        except openai.OpenAIError as e:
            raise CritiqueError(f"Error analyzing performance: {e}") from e
        feedback = completion.choices[0].message.content or ""
        logger.debug("Feedback for %s: %r", character, feedback)
        return feedback.strip()
