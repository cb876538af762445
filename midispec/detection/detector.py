"""
MIDI specification detector.

Classifies a MIDI file as GM, GM2, GS or XG by scanning its SysEx events
for known reset/enable signatures.

Rules:
    - A higher priority signature replaces the current best match
    - On equal priority the first signature seen is kept, so a file
      carrying both GS and XG resets is classified by whichever comes
      first in track order, then event order
    - No recognized signature means Unknown/Standard MIDI

The detector is a pure function of its input: no I/O, no shared mutable
state. It is safe to call concurrently from worker threads.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import mido

from midispec.detection.signatures import SIGNATURES, match
from midispec.models.specification import SignaturePattern, Specification


def sysex_payload(event) -> Optional[bytes]:
    """
    Get the framed SysEx payload of an event.

    Args:
        event: mido message, or raw SysEx bytes

    Returns:
        Payload including F0/F7, or None for non-SysEx events
    """
    if isinstance(event, (bytes, bytearray)):
        return bytes(event)

    if getattr(event, "type", None) == "sysex":
        return bytes(event.bytes())

    return None


def iter_events(midi_file: mido.MidiFile) -> Iterator[mido.Message]:
    """
    Yield all events of a MIDI file, track by track.

    Events are not merged by time; track order is significant for the
    equal-priority rule.
    """
    for track in midi_file.tracks:
        yield from track


def find_signatures(
    events: Iterable, table: Sequence[SignaturePattern] = SIGNATURES
) -> List[Tuple[int, SignaturePattern]]:
    """
    Find every event carrying a known signature.

    Args:
        events: Events in track/event order
        table: Signature table

    Returns:
        List of (event index, pattern) tuples
    """
    found = []
    for index, event in enumerate(events):
        payload = sysex_payload(event)
        if payload is None:
            continue

        pattern = match(payload, table)
        if pattern is not None:
            found.append((index, pattern))

    return found


def detect(events: Iterable, table: Sequence[SignaturePattern] = SIGNATURES) -> Specification:
    """
    Detect the MIDI specification of an event sequence.

    Args:
        events: All events of one file in track/event order
        table: Signature table

    Returns:
        Detected Specification (UNKNOWN if no signature found)

    Example:
        spec = detect([mido.Message("sysex", data=[0x43, 0x10, 0x4C, 0, 0, 0x7E, 0])])
        assert spec == Specification.XG
    """
    best: Optional[SignaturePattern] = None

    for _, pattern in find_signatures(events, table):
        if best is None or pattern.priority > best.priority:
            best = pattern

    if best is None:
        return Specification.UNKNOWN

    return best.specification


def detect_midi_file(midi_file: mido.MidiFile) -> Specification:
    """Detect the specification of a parsed MIDI file."""
    return detect(iter_events(midi_file))
