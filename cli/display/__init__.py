"""Display utilities for CLI output."""

from cli.display.tables import (
    display_file_info,
    display_matches,
    display_scan_results,
    display_signatures,
)
from cli.display.formatters import count_bar, spec_markup, spec_style

__all__ = [
    "display_file_info",
    "display_matches",
    "display_scan_results",
    "display_signatures",
    "count_bar",
    "spec_markup",
    "spec_style",
]
