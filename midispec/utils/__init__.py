"""Utility functions for midispec."""

from midispec.utils.checksum import calculate_roland_checksum
from midispec.utils.sysex import frame_sysex

__all__ = [
    "calculate_roland_checksum",
    "frame_sysex",
]
