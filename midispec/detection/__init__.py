"""
Specification detection.

Signature table plus the detector that scans SysEx events against it.
"""

from midispec.detection.signatures import SIGNATURES, match, signatures_for
from midispec.detection.detector import (
    detect,
    detect_midi_file,
    find_signatures,
    iter_events,
    sysex_payload,
)

__all__ = [
    "SIGNATURES",
    "match",
    "signatures_for",
    "detect",
    "detect_midi_file",
    "find_signatures",
    "iter_events",
    "sysex_payload",
]
