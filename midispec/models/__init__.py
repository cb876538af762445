"""Data models for MIDI specification detection."""

from midispec.models.specification import Specification, SignaturePattern
from midispec.models.file_info import MidiFileInfo, format_name

__all__ = [
    "Specification",
    "SignaturePattern",
    "MidiFileInfo",
    "format_name",
]
