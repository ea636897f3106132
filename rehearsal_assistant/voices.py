"""Character-to-voice casting: sidecar cast files and hash-based suggestions."""

import hashlib
import json
import logging
import os

logger = logging.getLogger(__name__)


def load_cast(document_path: str) -> dict[str, str]:
    """Load the .cast.json sidecar next to a script document, if any.

    Accepts either a flat {"CHARACTER": "voice"} mapping or
    {"cast": {"CHARACTER": {"voice": "..."}}}. Returns an empty dict when the
    file is missing or malformed.
    """
    base = os.path.splitext(document_path)[0]
    cast_path = base + ".cast.json"
    if not os.path.exists(cast_path):
        return {}
    try:
        with open(cast_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Malformed cast file: %s, ignoring it", cast_path)
        return {}

    entries = data.get("cast", data) if isinstance(data, dict) else data
    if not isinstance(entries, dict):
        logger.warning("Cast file is not a CHARACTER-to-voice object: %s, ignoring it", cast_path)
        return {}
    assignment = {}
    for name, info in entries.items():
        voice = info.get("voice") if isinstance(info, dict) else info
        if isinstance(voice, str) and voice:
            assignment[name] = voice
    return assignment


def parse_voice_args(pairs: list[str]) -> dict[str, str]:
    """Parse CHARACTER=VOICE pairs. Raises ValueError on a malformed pair."""
    assignment = {}
    for pair in pairs:
        name, sep, voice = pair.partition("=")
        if not sep or not name.strip() or not voice.strip():
            raise ValueError(f"Expected CHARACTER=VOICE, got: {pair}")
        assignment[name.strip()] = voice.strip()
    return assignment


def _hash_voice(character: str, pool: list[str]) -> str:
    """Deterministic voice pick via sha256 hash."""
    h = hashlib.sha256(character.encode()).hexdigest()
    idx = int(h, 16) % len(pool)
    return pool[idx]


def suggest_voices(
    characters: list[str],
    assignment: dict[str, str] | None,
    pool: list[str],
) -> dict[str, str]:
    """Fill in voices for characters that have none.

    Explicit assignments are kept. Each unassigned character gets a hashed
    pick from the voices nobody uses yet; once those run out, from the whole
    pool.
    """
    result = dict(assignment or {})
    used = set(result.values())
    for character in characters:
        if character in result:
            continue
        available = [v for v in pool if v not in used] or list(pool)
        voice = _hash_voice(character, available)
        result[character] = voice
        used.add(voice)
    return result
