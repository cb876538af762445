"""
Rich table displays for detection results.
"""

from typing import Dict, List, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from midispec.analysis.scanner import ScanResult
from midispec.models.file_info import MidiFileInfo
from midispec.models.specification import SignaturePattern
from cli.display.formatters import count_bar, spec_markup

console = Console()


def display_file_info(info: MidiFileInfo) -> None:
    """Display a MIDI file summary panel."""
    empty = "[yellow]Yes[/yellow]" if info.is_empty else "No"

    content = f"""[bold]File:[/bold] {escape(info.file_name)}
[bold]Path:[/bold] {escape(info.file_path)}
[bold]Format:[/bold] {info.format}
[bold]Tracks:[/bold] {info.track_count}
[bold]Events:[/bold] {info.event_count}
[bold]Tempo Events:[/bold] {info.tempo_event_count}
[bold]SysEx Events:[/bold] {info.sysex_event_count}
[bold]Ticks/Beat:[/bold] {info.ticks_per_beat}
[bold]Empty:[/bold] {empty}
[bold]Specification:[/bold] {spec_markup(info.specification)}"""

    console.print(
        Panel(
            content,
            title="[bold blue]MIDI File Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_matches(matches: Sequence[Tuple[int, SignaturePattern]]) -> None:
    """Display the signatures found in a file."""
    if not matches:
        console.print("  [dim]No known signatures[/dim]")
        return

    for index, pattern in matches:
        console.print(
            f"  [dim]event {index:5d}[/dim]  {pattern.name:<36} "
            f"{spec_markup(pattern.specification)} [dim](priority {pattern.priority})[/dim]"
        )


def display_scan_results(results: List[ScanResult], summary: Dict[str, int]) -> None:
    """Display directory scan results and summary."""
    table = Table(title="Scan Results", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("File", style="cyan")
    table.add_column("Result")

    for i, result in enumerate(results, 1):
        if result.ok:
            outcome = spec_markup(result.specification)
        else:
            outcome = f"[red]ERROR: {escape(result.error)}[/red]"
        table.add_row(str(i), escape(result.path.name), outcome)

    console.print(table)

    total = len(results)
    summary_table = Table(title="Summary", box=box.SIMPLE, show_header=True, header_style="bold")
    summary_table.add_column("Result", style="cyan")
    summary_table.add_column("Files", justify="right")
    summary_table.add_column("Share")

    for label, count in sorted(summary.items(), key=lambda item: -item[1]):
        summary_table.add_row(label, str(count), count_bar(count, total))

    console.print(summary_table)


def display_signatures(signatures: Sequence[SignaturePattern]) -> None:
    """Display the signature table."""
    table = Table(title="Known Signatures", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Bytes", style="dim")
    table.add_column("Specification")
    table.add_column("Priority", justify="right")

    for pattern in signatures:
        table.add_row(pattern.name, pattern.hex, spec_markup(pattern.specification), str(pattern.priority))

    console.print(table)
