"""
Specification model.

MIDI files are commonly authored for one of several dialects that refine
the base MIDI standard. A file announces its dialect by sending a
reset/enable System Exclusive message, usually at the very start of the
first track:

    GM   F0 7E <dev> 09 01 F7                   (GM System On)
    GM2  F0 7E <dev> 09 03 F7                   (GM2 System On)
    GS   F0 41 <dev> 42 12 40 00 7F 00 41 F7    (GS Reset)
    XG   F0 43 <dev> 4C 00 00 7E 00 F7          (XG System On)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class Specification(str, Enum):
    """
    MIDI specification dialects.

    Values are the display labels consumed by reports, so a member can be
    compared directly with its label string.
    """

    GM = "General MIDI (GM)"
    GM2 = "General MIDI 2 (GM2)"
    GS = "Roland GS"
    XG = "Yamaha XG"
    UNKNOWN = "Unknown/Standard MIDI"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Specification":
        """
        Get specification from its display label or member name.

        Args:
            label: "Roland GS", "GS", "gs", ...

        Returns:
            Matching Specification
        """
        for spec in cls:
            if label == spec.value or label.upper() == spec.name:
                return spec
        raise ValueError(f"Unknown specification: {label}")


@dataclass(frozen=True)
class SignaturePattern:
    """
    A SysEx byte pattern proving a specification.

    Attributes:
        name: Human readable message name (e.g. "GS Reset")
        bytes: Expected bytes including F0/F7 framing; None marks a
            wildcard position (the device ID byte)
        specification: Specification proven by the pattern
        priority: Rank used when a file matches several specifications
            (higher wins)
    """

    name: str
    bytes: Tuple[Optional[int], ...]
    specification: Specification
    priority: int

    def __len__(self) -> int:
        return len(self.bytes)

    @property
    def hex(self) -> str:
        """Pattern as hex string, wildcards shown as '??'."""
        return " ".join("??" if b is None else f"{b:02X}" for b in self.bytes)

    def matches(self, data: Sequence[int]) -> bool:
        """
        Check a framed SysEx payload against this pattern.

        Length must be exact; every non-wildcard position must be equal.
        """
        if len(data) != len(self.bytes):
            return False

        for expected, actual in zip(self.bytes, data):
            if expected is not None and expected != actual:
                return False

        return True
