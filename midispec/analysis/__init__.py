"""
MIDI file analysis module.

File summaries and directory scanning on top of the detector.
"""

from midispec.analysis.file_info import (
    MidiFileAnalyzer,
    MidiFileError,
    analyze_midi_file,
    load_midi_file,
)
from midispec.analysis.scanner import (
    ScanResult,
    find_midi_files,
    scan_directory,
    scan_file,
    scan_files,
    summarize,
)

__all__ = [
    "MidiFileAnalyzer",
    "MidiFileError",
    "analyze_midi_file",
    "load_midi_file",
    "ScanResult",
    "find_midi_files",
    "scan_directory",
    "scan_file",
    "scan_files",
    "summarize",
]
