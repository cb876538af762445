"""
SysEx framing helpers.

MIDI parsers disagree on whether the F0 start and F7 end bytes belong
to a SysEx payload. mido strips both from ``Message("sysex").data`` while
``Message.bytes()`` restores them. Signatures are stored framed, so all
payloads are brought to the framed form before matching.
"""

from typing import Sequence

SYSEX_START = 0xF0
SYSEX_END = 0xF7

# Manufacturer IDs
UNIVERSAL_NON_REALTIME = 0x7E
ROLAND_ID = 0x41
YAMAHA_ID = 0x43


def frame_sysex(data: Sequence[int]) -> bytes:
    """
    Return payload in framed form (F0 ... F7).

    Payloads already starting with F0 are returned unchanged, so a
    truncated framed message stays truncated and will not match.
    """
    payload = bytes(data)

    if payload[:1] == bytes([SYSEX_START]):
        return payload

    if payload[-1:] == bytes([SYSEX_END]):
        return bytes([SYSEX_START]) + payload

    return bytes([SYSEX_START]) + payload + bytes([SYSEX_END])
