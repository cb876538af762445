"""
Scan command - classify every MIDI file in a directory.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from midispec.analysis.scanner import find_midi_files, scan_files, summarize
from cli.display.tables import display_scan_results

console = Console()
app = typer.Typer()


@app.command()
def scan(
    directory: Path = typer.Argument(..., help="Directory containing MIDI files"),
    jobs: int = typer.Option(
        1, "--jobs", "-J", min=1, envvar="MIDISPEC_JOBS", help="Number of worker threads"
    ),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Scan subdirectories"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Detect the specification of every MIDI file in a directory.

    Files that fail to load are reported and do not stop the scan.

    Examples:

        midispec scan demo-midis/
        midispec scan library/ --recursive --jobs 8
    """
    try:
        files = find_midi_files(directory, recursive=recursive)
    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not files:
        console.print(f"[red]Error: No MIDI files found in {escape(str(directory))}[/red]")
        raise typer.Exit(1)

    results = scan_files(files, jobs=jobs)
    summary = summarize(results)

    if json_output:
        data = {
            "files": [
                {
                    "path": str(r.path),
                    "specification": r.specification.value if r.ok else None,
                    "error": r.error,
                }
                for r in results
            ],
            "summary": summary,
        }
        console.print_json(json.dumps(data))
    else:
        console.print(f"Found {len(files)} MIDI files in: {escape(str(directory))}")
        console.print()
        display_scan_results(results, summary)

    if not any(r.ok for r in results):
        raise typer.Exit(1)
