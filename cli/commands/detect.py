"""
Detect command - classify MIDI files by specification.
"""

import json
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from midispec.analysis.file_info import MidiFileError, load_midi_file
from midispec.detection.detector import detect, find_signatures, iter_events
from cli.display.formatters import spec_markup
from cli.display.tables import display_matches

console = Console()
app = typer.Typer()


@app.command()
def detect_cmd(
    files: List[Path] = typer.Argument(..., help="MIDI files to classify (.mid)"),
    matches: bool = typer.Option(False, "--matches", "-m", help="List every matched signature"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Detect the MIDI specification (GM, GM2, GS, XG) of each file.

    Examples:

        midispec detect song.mid
        midispec detect *.mid --matches
        midispec detect song.mid --json
    """
    results = {}
    failed = False

    for file in files:
        try:
            midi_file = load_midi_file(file)
        except (FileNotFoundError, MidiFileError, ValueError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            failed = True
            continue

        events = list(iter_events(midi_file))
        spec = detect(events)
        results[str(file)] = spec.value

        if json_output:
            continue

        console.print(f"[cyan]{escape(str(file))}[/cyan]: {spec_markup(spec)}", soft_wrap=True)
        if matches:
            display_matches(find_signatures(events))

    if json_output:
        console.print_json(json.dumps(results))

    if failed:
        raise typer.Exit(1)
