"""
Signatures command - list the known SysEx signatures.
"""

from typing import Optional

import typer
from rich.console import Console

from midispec.detection.signatures import SIGNATURES, signatures_for
from midispec.models.specification import Specification
from cli.display.tables import display_signatures

console = Console()
app = typer.Typer()


@app.command()
def signatures(
    spec: Optional[str] = typer.Option(
        None, "--spec", "-s", help="Only show one specification (GM, GM2, GS, XG)"
    ),
) -> None:
    """
    List the SysEx signatures used for detection.

    '??' marks the device ID byte, which matches any value.
    """
    if spec is None:
        display_signatures(SIGNATURES)
        return

    try:
        specification = Specification.from_label(spec)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_signatures(signatures_for(specification))
