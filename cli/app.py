"""
midispec - MIDI specification detector.

A CLI tool for classifying Standard MIDI Files as GM, GM2, GS or XG.
"""

import typer
from rich.console import Console

from midispec import __version__
from midispec.utils.log import configure_logging
from cli.commands.detect import detect_cmd
from cli.commands.info import info
from cli.commands.scan import scan
from cli.commands.signatures import signatures

console = Console()

# Main app
app = typer.Typer(
    name="midispec",
    help="Detect the specification (GM, GM2, GS, XG) of MIDI files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="detect")(detect_cmd)
app.command(name="info")(info)
app.command(name="scan")(scan)
app.command(name="signatures")(signatures)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]midispec[/bold] version {__version__}")
    console.print("[dim]MIDI specification detector (GM, GM2, GS, XG)[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", envvar="MIDISPEC_VERBOSE", help="Enable debug logging"
    ),
) -> None:
    """
    midispec - Detect which MIDI specification a file was authored for.

    Files are classified by the reset/enable SysEx messages they carry:

    - [cyan]GM[/cyan]  General MIDI System On
    - [cyan]GM2[/cyan] General MIDI 2 System On
    - [cyan]GS[/cyan]  Roland GS Reset
    - [cyan]XG[/cyan]  Yamaha XG System On

    [bold]Commands:[/bold]

        midispec detect song.mid        # Classify files
        midispec info song.mid          # File summary
        midispec scan demo-midis/       # Classify a whole directory
        midispec signatures             # List known signatures

    Use --help with any command for more details.
    """
    configure_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
