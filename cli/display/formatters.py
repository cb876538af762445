"""
Display formatting utilities for CLI output.

Provides colors and short labels for specifications.
"""

from midispec.models.specification import Specification

SPEC_STYLES = {
    Specification.GM: "green",
    Specification.GM2: "bright_green",
    Specification.GS: "red",
    Specification.XG: "magenta",
    Specification.UNKNOWN: "dim",
}


def spec_style(spec: Specification) -> str:
    """Get Rich style for a specification."""
    return SPEC_STYLES.get(spec, "white")


def spec_markup(spec: Specification) -> str:
    """Format a specification label with Rich markup."""
    style = spec_style(spec)
    return f"[{style}]{spec.value}[/{style}]"


def count_bar(count: int, total: int, width: int = 20, filled_char: str = "█", empty_char: str = "░") -> str:
    """
    Create a text-based bar for a share of a total.

    Returns:
        Formatted string like "[█████░░░░░]  50%"
    """
    if total <= 0:
        total = 1

    fill_count = int((count / total) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)
    percent = int((count / total) * 100)

    return f"[{bar}] {percent:3d}%"
