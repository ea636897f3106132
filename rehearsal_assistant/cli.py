"""CLI interface: parse scripts, list voices, run rehearsals, critique takes."""

import argparse
import json
import logging
import os
import shutil
import sys

from dotenv import load_dotenv
from pydub import AudioSegment

from rehearsal_assistant.artifacts import (
    cue_filename,
    find_take,
    init_output_dir,
    slug_from_path,
    write_artifact,
)
from rehearsal_assistant.assembly import build_practice_track
from rehearsal_assistant.constants import OUTPUT_DIR, VERSION
from rehearsal_assistant.errors import RehearsalError
from rehearsal_assistant.locales import LOCALES, get_locale
from rehearsal_assistant.models import Selector
from rehearsal_assistant.rehearsal import RehearsalManager
from rehearsal_assistant.voices import load_cast, parse_voice_args, suggest_voices


def _check_ffmpeg():
    """Verify ffmpeg is installed."""
    if not shutil.which("ffmpeg"):
        print("Error: ffmpeg is required for --track but not found.", file=sys.stderr)
        raise SystemExit(1)


def _read_file(path: str) -> bytes:
    if not os.path.exists(path):
        print(f"Error: File not found: {path}", file=sys.stderr)
        raise SystemExit(1)
    with open(path, "rb") as f:
        return f.read()


def _load_script(manager: RehearsalManager, document_path: str):
    document = _read_file(document_path)
    return manager.upload_script(document, os.path.basename(document_path))


def cmd_parse(args):
    """Parse a script document and show what was found."""
    manager = RehearsalManager(locale=get_locale(args.locale))
    script = _load_script(manager, args.document)

    if args.json:
        print(json.dumps(script.to_dict(), indent=2, ensure_ascii=False))
        return

    headers = sum(1 for line in script.lines if line.type == "header")
    directions = sum(1 for line in script.lines if line.type == "stage_direction")
    print(f"Script: {script.title}")
    print(f"Parsed {len(script.lines)} lines ({script.dialogue_count} dialogue, "
          f"{directions} stage directions, {headers} headers)")
    print(f"Characters ({len(script.characters)}):")
    for name in script.characters:
        count = sum(1 for line in script.dialogue() if line.character == name)
        print(f"  {name:<20} {count} lines")


def cmd_voices(args):
    """List available voices for a locale."""
    locale = get_locale(args.locale)
    filter_str = args.filter.lower() if args.filter else None
    voices = list(locale.voice_pool)
    if filter_str:
        voices = [v for v in voices if filter_str in v.lower()]
    if not voices:
        print("No matching voices found.")
        return
    print(f"Available voices ({locale.code}):")
    for v in voices:
        marker = " (default)" if v == locale.default_voice else ""
        print(f"  {v}{marker}")


def _build_assignment(args, script, locale) -> dict[str, str]:
    """Cast file, then --voice overrides, then optional hash suggestions."""
    assignment = load_cast(args.document)
    try:
        assignment.update(parse_voice_args(args.voice or []))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    if args.auto_cast:
        others = [c for c in script.characters if c != args.role]
        assignment = suggest_voices(others, assignment, list(locale.voice_pool))
    return assignment


def _rehearse_own_line(manager, result, takes_dir, total) -> dict:
    line, number = result.line, result.line_number
    entry = {"lineNumber": number, "character": line.character, "expected": line.utterance}
    take = find_take(takes_dir, number)
    if take is None:
        print(f"  [you] {number}/{total} {line.character}: {line.utterance}")
        return entry

    print(f"  [take] {number}/{total}: {os.path.basename(take)}")
    with open(take, "rb") as f:
        audio = f.read()
    said = manager.transcribe(audio, filename=os.path.basename(take))
    feedback = manager.analyze_performance(said, line.utterance, line.character)
    print(f"    Expected: {line.utterance}")
    print(f"    You said: {said}")
    print(f"    Feedback: {feedback}")
    entry.update({"take": take, "transcription": said, "feedback": feedback})
    return entry


def _rehearse_cue(manager, result, project_dir, total) -> dict:
    line, number = result.line, result.line_number
    filename = cue_filename(number, line)
    path = os.path.join(project_dir, "cues", filename)
    voice = manager.resolve_voice(line.character)

    # Skip if already exists (resumability)
    if os.path.exists(path) and os.path.getsize(path) > 0:
        print(f"  [skip] Cue {number}/{total}: {filename}")
    else:
        print(f"  Generating cue {number}/{total}: {filename} ({voice})")
        audio = manager.generate_audio(line.utterance, line.character)
        with open(path, "wb") as f:
            f.write(audio)

    return {
        "lineNumber": number,
        "character": line.character,
        "text": line.utterance,
        "voice": voice,
        "cue": path,
    }


def cmd_rehearse(args):
    """Walk the dialogue: cues for other characters, feedback on your takes."""
    locale = get_locale(args.locale)
    manager = RehearsalManager(locale=locale)
    script = _load_script(manager, args.document)

    if args.role not in script.characters:
        print(f"Error: Character '{args.role}' not found in script.", file=sys.stderr)
        print(f"Characters: {', '.join(script.characters)}", file=sys.stderr)
        raise SystemExit(1)
    if args.track:
        _check_ffmpeg()

    assignment = _build_assignment(args, script, locale)
    session = manager.setup_rehearsal(Selector(act=args.act, scene=args.scene), assignment)
    project_dir = init_output_dir(args.document, output_base=OUTPUT_DIR)
    total = session.remaining
    print(f"Rehearsing {script.title} as {args.role}: {total} lines")

    entries = []
    while True:
        result = manager.next_line()
        if result.done:
            break
        if result.line.character == args.role:
            entries.append(_rehearse_own_line(manager, result, args.takes, total))
        else:
            entries.append(_rehearse_cue(manager, result, project_dir, total))

    write_artifact(project_dir, "report.json", {
        "script": script.title,
        "role": args.role,
        "act": args.act,
        "scene": args.scene,
        "voices": {c: session.resolve_voice(c) for c in script.characters if c != args.role},
        "lines": entries,
    })

    if args.track:
        cues = {
            e["lineNumber"]: AudioSegment.from_file(e["cue"])
            for e in entries if "cue" in e
        }
        track = build_practice_track(list(session.ordered_lines), cues, args.role)
        slug = slug_from_path(args.document)
        track_path = os.path.join(project_dir, f"{slug}_practice.mp3")
        track.export(track_path, format="mp3")
        print(f"Practice track: {track_path}")

    print(f"Done: {project_dir}")


def cmd_critique(args):
    """Transcribe one take and critique it against the expected line."""
    manager = RehearsalManager(locale=get_locale(args.locale))
    audio = _read_file(args.take)
    said = manager.transcribe(audio, filename=os.path.basename(args.take))
    feedback = manager.analyze_performance(said, args.expected, args.character)
    print(f"You said: {said}")
    print(f"Feedback: {feedback}")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rehearsal-assistant",
        description="Rehearsal Assistant — run lines against synthetic scene partners",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    locale_help = f"Script locale ({', '.join(sorted(LOCALES))})"

    # parse
    parse_parser = subparsers.add_parser("parse", help="Parse a script document")
    parse_parser.add_argument("document", help="Path to the script (PDF or text)")
    parse_parser.add_argument("--locale", help=locale_help)
    parse_parser.add_argument("--json", action="store_true", help="Print the full parsed script as JSON")
    parse_parser.set_defaults(func=cmd_parse)

    # voices
    voices_parser = subparsers.add_parser("voices", help="List available voices")
    voices_parser.add_argument("--locale", help=locale_help)
    voices_parser.add_argument("--filter", help="Filter voices by substring")
    voices_parser.set_defaults(func=cmd_voices)

    # rehearse
    rehearse_parser = subparsers.add_parser("rehearse", help="Run a rehearsal")
    rehearse_parser.add_argument("document", help="Path to the script (PDF or text)")
    rehearse_parser.add_argument("--role", required=True, help="The character you play")
    rehearse_parser.add_argument("--voice", action="append", metavar="CHARACTER=VOICE",
                                 help="Voice for a character (repeatable)")
    rehearse_parser.add_argument("--auto-cast", action="store_true",
                                 help="Pick voices for characters with no assignment")
    rehearse_parser.add_argument("--act", help="Act to rehearse")
    rehearse_parser.add_argument("--scene", help="Scene to rehearse")
    rehearse_parser.add_argument("--takes", help="Directory of your recordings, named NNN.<ext> by line number")
    rehearse_parser.add_argument("--track", action="store_true", help="Export a practice track")
    rehearse_parser.add_argument("--locale", help=locale_help)
    rehearse_parser.set_defaults(func=cmd_rehearse)

    # critique
    critique_parser = subparsers.add_parser("critique", help="Get feedback on one take")
    critique_parser.add_argument("--expected", required=True, help="The scripted line")
    critique_parser.add_argument("--take", required=True, help="Path to your recording")
    critique_parser.add_argument("--character", required=True, help="Character speaking the line")
    critique_parser.add_argument("--locale", help=locale_help)
    critique_parser.set_defaults(func=cmd_critique)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    load_dotenv()
    try:
        args.func(args)
    except (RehearsalError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
