"""
midispec - MIDI specification detector.

This library provides tools to:
- Classify Standard MIDI Files as GM, GM2, Roland GS or Yamaha XG
- Summarize MIDI files (format, tracks, events, detected specification)
- Scan directories of MIDI files

Example usage:
    import mido
    from midispec import detect, detect_midi_file, analyze_midi_file

    # Classify a parsed file
    spec = detect_midi_file(mido.MidiFile("song.mid"))

    # Or get a full summary
    info = analyze_midi_file("song.mid")
    print(info.specification)
"""

__version__ = "0.1.0"
__author__ = "midispec Contributors"

from midispec.detection.detector import detect, detect_midi_file
from midispec.detection.signatures import SIGNATURES, match
from midispec.analysis.file_info import MidiFileAnalyzer, MidiFileError, analyze_midi_file
from midispec.analysis.scanner import ScanResult, scan_directory
from midispec.models.specification import Specification, SignaturePattern
from midispec.models.file_info import MidiFileInfo

__all__ = [
    "detect",
    "detect_midi_file",
    "SIGNATURES",
    "match",
    "MidiFileAnalyzer",
    "MidiFileError",
    "analyze_midi_file",
    "ScanResult",
    "scan_directory",
    "Specification",
    "SignaturePattern",
    "MidiFileInfo",
]
