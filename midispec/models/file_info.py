"""
MIDI file summary model.
"""

from dataclasses import dataclass

from midispec.models.specification import Specification


# SMF header format number to display label
FORMAT_NAMES = {
    0: "Format 0 (Single Track)",
    1: "Format 1 (Multi Track)",
    2: "Format 2 (Multi Sequence)",
}


def format_name(smf_format: int) -> str:
    """Convert SMF format number to readable label."""
    return FORMAT_NAMES.get(smf_format, "Unknown Format")


@dataclass
class MidiFileInfo:
    """Summary of a single Standard MIDI File."""

    file_name: str
    file_path: str
    format: str
    track_count: int
    event_count: int  # All events across all tracks
    tempo_event_count: int  # set_tempo meta events
    sysex_event_count: int
    ticks_per_beat: int
    specification: Specification
    is_empty: bool = False
