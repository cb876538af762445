"""
Signature table.

Known SysEx reset/enable messages and the specification each one proves.
Patterns are stored with F0/F7 framing; the device ID byte is a wildcard
because it varies per receiving device (7F = broadcast for universal
messages, 10 = device 17 for Roland, 1n = parameter change on device n
for Yamaha).

Priority encodes specificity: GM2, GS and XG all imply GM compatibility,
so any of them outranks the generic GM System On. GS and XG share a
priority since a file is authored for one or the other.
"""

from typing import List, Optional, Sequence, Tuple

from midispec.models.specification import SignaturePattern, Specification
from midispec.utils.checksum import calculate_roland_checksum
from midispec.utils.sysex import (
    SYSEX_END,
    SYSEX_START,
    ROLAND_ID,
    UNIVERSAL_NON_REALTIME,
    YAMAHA_ID,
    frame_sysex,
)

# Wildcard marker for variable bytes
ANY = None

# Roland model ID for GS and command ID for Data Set 1
GS_MODEL_ID = 0x42
DT1_COMMAND = 0x12

# Yamaha model ID for XG
XG_MODEL_ID = 0x4C

# Universal Non-Realtime sub-ID #1 for General MIDI messages
GENERAL_MIDI_SUB_ID = 0x09

PRIORITY_GM = 1
PRIORITY_GM2 = 3
PRIORITY_VENDOR = 4


def _universal(sub_id_2: int) -> Tuple[Optional[int], ...]:
    """Build a Universal Non-Realtime General MIDI message."""
    return (
        SYSEX_START,
        UNIVERSAL_NON_REALTIME,
        ANY,
        GENERAL_MIDI_SUB_ID,
        sub_id_2,
        SYSEX_END,
    )


def _roland_dt1(address: Sequence[int], data: Sequence[int]) -> Tuple[Optional[int], ...]:
    """Build a Roland GS Data Set 1 message with its checksum."""
    body = list(address) + list(data)
    return (
        (SYSEX_START, ROLAND_ID, ANY, GS_MODEL_ID, DT1_COMMAND)
        + tuple(body)
        + (calculate_roland_checksum(body), SYSEX_END)
    )


def _yamaha_xg(address: Sequence[int], data: Sequence[int]) -> Tuple[Optional[int], ...]:
    """Build a Yamaha XG parameter change message."""
    return (SYSEX_START, YAMAHA_ID, ANY, XG_MODEL_ID) + tuple(address) + tuple(data) + (SYSEX_END,)


SIGNATURES: Tuple[SignaturePattern, ...] = (
    SignaturePattern(
        name="GM System On",
        bytes=_universal(0x01),
        specification=Specification.GM,
        priority=PRIORITY_GM,
    ),
    SignaturePattern(
        name="GM2 System On",
        bytes=_universal(0x03),
        specification=Specification.GM2,
        priority=PRIORITY_GM2,
    ),
    SignaturePattern(
        name="GS Reset",
        bytes=_roland_dt1((0x40, 0x00, 0x7F), (0x00,)),
        specification=Specification.GS,
        priority=PRIORITY_VENDOR,
    ),
    # SC-88 system mode set, sent instead of GS Reset by many SC-88 files
    SignaturePattern(
        name="GS System Mode Set (Single Module)",
        bytes=_roland_dt1((0x00, 0x00, 0x7F), (0x00,)),
        specification=Specification.GS,
        priority=PRIORITY_VENDOR,
    ),
    SignaturePattern(
        name="GS System Mode Set (Double Module)",
        bytes=_roland_dt1((0x00, 0x00, 0x7F), (0x01,)),
        specification=Specification.GS,
        priority=PRIORITY_VENDOR,
    ),
    SignaturePattern(
        name="XG System On",
        bytes=_yamaha_xg((0x00, 0x00, 0x7E), (0x00,)),
        specification=Specification.XG,
        priority=PRIORITY_VENDOR,
    ),
)


def match(
    data: Sequence[int], table: Sequence[SignaturePattern] = SIGNATURES
) -> Optional[SignaturePattern]:
    """
    Find the signature matching a SysEx payload.

    Args:
        data: SysEx payload, with or without F0/F7 framing
        table: Signature table to search

    Returns:
        Highest priority matching pattern (earliest table entry on equal
        priority), or None
    """
    framed = frame_sysex(data)

    best = None
    for pattern in table:
        if pattern.matches(framed) and (best is None or pattern.priority > best.priority):
            best = pattern

    return best


def signatures_for(
    specification: Specification, table: Sequence[SignaturePattern] = SIGNATURES
) -> List[SignaturePattern]:
    """Get all patterns proving a specification."""
    return [p for p in table if p.specification == specification]
