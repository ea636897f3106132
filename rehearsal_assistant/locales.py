"""Locale profiles: speaker alphabet, header keywords, language and voices."""

from dataclasses import dataclass

from rehearsal_assistant.constants import DEFAULT_LOCALE, DEFAULT_VOICE


@dataclass(frozen=True)
class LocaleProfile:
    code: str                       # ISO 639-1, also sent to transcription
    uppercase: str                  # regex character-class body of uppercase letters
    header_keywords: tuple[str, ...]
    default_voice: str
    voice_pool: tuple[str, ...]


SPANISH = LocaleProfile(
    code="es",
    uppercase="A-ZÁÉÍÓÚÑÜ",
    # Spanish scripts often keep English act/scene markers from translation drafts
    header_keywords=("ACTO", "ESCENA", "ACT", "SCENE"),
    default_voice=DEFAULT_VOICE,
    voice_pool=(
        "es-ES-AlvaroNeural",
        "es-ES-ElviraNeural",
        "es-MX-DaliaNeural",
        "es-MX-JorgeNeural",
        "es-AR-ElenaNeural",
        "es-AR-TomasNeural",
        "es-CO-SalomeNeural",
        "es-CO-GonzaloNeural",
        "es-CL-CatalinaNeural",
        "es-CL-LorenzoNeural",
    ),
)

ENGLISH = LocaleProfile(
    code="en",
    uppercase="A-Z",
    header_keywords=("ACT", "SCENE"),
    default_voice="en-US-GuyNeural",
    voice_pool=(
        "en-US-GuyNeural",
        "en-US-AriaNeural",
        "en-US-DavisNeural",
        "en-US-JennyNeural",
        "en-GB-SoniaNeural",
        "en-GB-RyanNeural",
        "en-AU-NatashaNeural",
        "en-AU-WilliamNeural",
    ),
)

LOCALES = {profile.code: profile for profile in (SPANISH, ENGLISH)}


def get_locale(code: str | None = None) -> LocaleProfile:
    """Look up a locale profile by code. None means the default locale."""
    code = (code or DEFAULT_LOCALE).lower()
    if code not in LOCALES:
        raise ValueError(f"Unknown locale: {code} (available: {', '.join(sorted(LOCALES))})")
    return LOCALES[code]
