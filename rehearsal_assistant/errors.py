"""Error taxonomy. Every error carries a stable code and a readable message."""


class RehearsalError(Exception):
    code = "rehearsal_error"
    message = "Rehearsal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": str(self)}


class NoDocumentProvided(RehearsalError):
    code = "no_document_provided"
    message = "No script document was provided"


class ExtractionError(RehearsalError):
    code = "extraction_error"
    message = "Could not extract text from the script document"


class NoScriptLoaded(RehearsalError):
    code = "no_script_loaded"
    message = "No script is loaded"


class EmptyInputText(RehearsalError):
    code = "empty_input_text"
    message = "Text is required"


class NoAudioProvided(RehearsalError):
    code = "no_audio_provided"
    message = "No audio was provided"


class SynthesisError(RehearsalError):
    code = "synthesis_error"
    message = "Could not generate audio"


class TranscriptionError(RehearsalError):
    code = "transcription_error"
    message = "Could not transcribe audio"


class CritiqueError(RehearsalError):
    code = "critique_error"
    message = "Could not analyze the performance"
