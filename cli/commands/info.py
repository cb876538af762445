"""
Info command - display MIDI file summary.
"""

import json
from dataclasses import asdict
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from midispec.analysis.file_info import MidiFileAnalyzer, MidiFileError
from midispec.models.file_info import MidiFileInfo
from cli.display.tables import display_file_info

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to analyze (.mid)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Display MIDI file information.

    Shows format, track and event counts, tempo and SysEx event counts,
    and the detected specification.

    Examples:

        midispec info song.mid
        midispec info song.mid --json
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    try:
        analysis = MidiFileAnalyzer().analyze_file(file)
    except (FileNotFoundError, MidiFileError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        _output_json(analysis)
    else:
        display_file_info(analysis)


def _output_json(analysis: MidiFileInfo) -> None:
    """Output analysis as JSON."""
    data = asdict(analysis)
    data["specification"] = analysis.specification.value
    console.print_json(json.dumps(data))
