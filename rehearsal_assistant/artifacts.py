"""Output directory layout and JSON artifacts for rehearsal runs."""

import json
import os
import re

from rehearsal_assistant.constants import OUTPUT_DIR
from rehearsal_assistant.models import Dialogue


def slug_from_path(document_path: str) -> str:
    """Convert a script filename to an output directory slug.

    "La Casa de Bernarda.pdf" → "la_casa_de_bernarda"
    "/path/to/Hamlet Act 1.txt" → "hamlet_act_1"
    """
    basename = os.path.splitext(os.path.basename(document_path))[0]
    # Replace non-alphanumeric with underscore, collapse multiples, strip edges
    slug = re.sub(r"[^a-zA-Z0-9]+", "_", basename).strip("_").lower()
    return slug or "script"


def init_output_dir(document_path: str, output_base: str = OUTPUT_DIR) -> str:
    """Create output/<slug>/cues/ and return the project directory path."""
    project_dir = os.path.join(output_base, slug_from_path(document_path))
    os.makedirs(os.path.join(project_dir, "cues"), exist_ok=True)
    return project_dir


def cue_filename(line_number: int, line: Dialogue) -> str:
    """File name for a line's cue audio, e.g. "003_bernarda_alba.mp3"."""
    character_slug = re.sub(r"\s+", "_", line.character.strip()).lower()
    return f"{line_number:03d}_{character_slug}.mp3"


def find_take(takes_dir: str, line_number: int) -> str | None:
    """Find the actor's recording for a line: takes_dir/NNN.<any extension>."""
    if not takes_dir or not os.path.isdir(takes_dir):
        return None
    prefix = f"{line_number:03d}."
    for name in sorted(os.listdir(takes_dir)):
        if name.startswith(prefix):
            return os.path.join(takes_dir, name)
    return None


def write_artifact(project_dir: str, filename: str, data: dict) -> str:
    """Write JSON artifact to project_dir/filename.

    Returns path to the written file.
    """
    path = os.path.join(project_dir, filename)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path

