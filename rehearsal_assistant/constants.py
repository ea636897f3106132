"""All magic numbers and configuration constants."""

DEFAULT_LOCALE = "es"                       # locale profile used when none is given
DEFAULT_VOICE = "es-ES-AlvaroNeural"        # voice for characters with no assignment
TTS_RETRY_COUNT = 3                         # max retries per synthesized line
TTS_RETRY_BASE_DELAY = 1.0                  # seconds — base delay for exponential backoff
TTS_RATE = "+0%"                            # speech rate relative to the voice default
TRANSCRIPTION_MODEL = "whisper-1"
CRITIQUE_MODEL = "gpt-4"
CRITIQUE_TEMPERATURE = 0.7
CRITIQUE_MAX_TOKENS = 200
PAUSE_BETWEEN_LINES_MS = 400                # ms silence between lines in the practice track
GAP_PER_WORD_MS = 450                       # ms of room left per word of the actor's own line
MIN_GAP_MS = 1500                           # shortest gap left for the actor's line
CUE_TARGET_DBFS = -20.0                     # loudness target for cue clips
OUTPUT_DIR = "output"
VERSION = "0.1.0"
