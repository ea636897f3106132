"""RehearsalManager: owns the active script and session and talks to collaborators."""

import logging

from rehearsal_assistant.classifier import LineClassifier
from rehearsal_assistant.errors import EmptyInputText, NoDocumentProvided, NoScriptLoaded
from rehearsal_assistant.locales import LocaleProfile, get_locale
from rehearsal_assistant.models import NextLine, Script, Selector
from rehearsal_assistant.parser import build_script
from rehearsal_assistant.session import RehearsalSession, setup_rehearsal

logger = logging.getLogger(__name__)


class RehearsalManager:
    """Holds at most one Script and one RehearsalSession.

    upload_script() and setup_rehearsal() replace the current instance only
    once the new one is fully built, so a failure leaves the previous state in
    place. Collaborators are injected; any left as None are created with their
    default implementation on first use.

    Usage:
        manager = RehearsalManager(locale=get_locale("es"))
        manager.upload_script(pdf_bytes, "obra.pdf")
        manager.setup_rehearsal(voice_assignment={"JUAN": "es-MX-JorgeNeural"})
        while not (result := manager.next_line()).done:
            ...
    """

    def __init__(
        self,
        extractor=None,
        synthesizer=None,
        transcriber=None,
        critic=None,
        locale: LocaleProfile | None = None,
    ):
        self.locale = locale or get_locale()
        self.classifier = LineClassifier(self.locale)
        self._extractor = extractor
        self._synthesizer = synthesizer
        self._transcriber = transcriber
        self._critic = critic
        self.script: Script | None = None
        self.session: RehearsalSession | None = None

    # ── Collaborators ─────────────────────────────────────────────────────────

    @property
    def extractor(self):
        if self._extractor is None:
            from rehearsal_assistant.extractor import TextExtractor
            self._extractor = TextExtractor()
        return self._extractor

    @property
    def synthesizer(self):
        if self._synthesizer is None:
            from rehearsal_assistant.tts import VoiceSynthesizer
            self._synthesizer = VoiceSynthesizer()
        return self._synthesizer

    @property
    def transcriber(self):
        if self._transcriber is None:
            from rehearsal_assistant.transcription import Transcriber
            self._transcriber = Transcriber()
        return self._transcriber

    @property
    def critic(self):
        if self._critic is None:
            from rehearsal_assistant.critique import Critic
            self._critic = Critic(locale=self.locale.code)
        return self._critic

    # ── Script ────────────────────────────────────────────────────────────────

    def upload_script(self, document: bytes | None, title: str) -> Script:
        """Extract, parse, and install a new script. Returns it."""
        if not document:
            raise NoDocumentProvided()
        text = self.extractor.extract(document)
        script = build_script(title, text, classifier=self.classifier)
        self.script = script
        logger.info(
            "Loaded script %r: %d characters, %d dialogue lines",
            title, len(script.characters), script.dialogue_count,
        )
        return script

    def load_text(self, raw_text: str, title: str) -> Script:
        """Install a script from text that has already been extracted."""
        self.script = build_script(title, raw_text, classifier=self.classifier)
        return self.script

    def script_info(self) -> Script:
        if self.script is None:
            raise NoScriptLoaded()
        return self.script

    # ── Session ───────────────────────────────────────────────────────────────

    def setup_rehearsal(
        self,
        selector: Selector | None = None,
        voice_assignment: dict[str, str] | None = None,
    ) -> RehearsalSession:
        self.session = setup_rehearsal(
            self.script,
            selector=selector,
            voice_assignment=voice_assignment,
            default_voice=self.locale.default_voice,
        )
        return self.session

    def next_line(self) -> NextLine:
        """Advance the active session. With no session there is nothing to serve."""
        if self.session is None:
            return NextLine()
        return self.session.next_line()

    def resolve_voice(self, character: str) -> str:
        if self.session is None:
            return self.locale.default_voice
        return self.session.resolve_voice(character)

    # ── Audio and feedback ────────────────────────────────────────────────────

    def generate_audio(self, text: str, character: str) -> bytes:
        """Synthesize text in the voice assigned to character."""
        if not text or not text.strip():
            raise EmptyInputText()
        voice = self.resolve_voice(character)
        logger.debug("Synthesizing %s with %s", character, voice)
        return self.synthesizer.synthesize(text, voice)

    def transcribe(self, audio: bytes | None, filename: str = "take.webm") -> str:
        return self.transcriber.transcribe(audio, locale=self.locale.code, filename=filename)

    def analyze_performance(self, user_text: str, expected_text: str, character: str) -> str:
        return self.critic.critique(expected_text, user_text, character)
