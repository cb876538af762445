"""
MIDI file analyzer.

Loads a Standard MIDI File with mido and builds a MidiFileInfo summary:
format, track and event counts, tempo and SysEx event counts, and the
detected specification.
"""

import logging
from pathlib import Path
from typing import Union

import mido

from midispec.detection.detector import detect_midi_file, sysex_payload
from midispec.models.file_info import MidiFileInfo, format_name

logger = logging.getLogger(__name__)


class MidiFileError(Exception):
    """Raised when a MIDI file cannot be read."""

    pass


def load_midi_file(filepath: Union[str, Path]) -> mido.MidiFile:
    """
    Read a MIDI file from disk.

    Args:
        filepath: Path to .mid file

    Returns:
        Parsed mido.MidiFile

    Raises:
        ValueError: If the path is empty
        FileNotFoundError: If the file does not exist
        MidiFileError: If the file cannot be parsed
    """
    if not filepath or not str(filepath).strip():
        raise ValueError("File path cannot be empty")

    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"MIDI file not found: {path}")

    logger.debug("Reading %s", path)

    try:
        return mido.MidiFile(str(path))
    except Exception as e:
        # mido errors share no common base class
        raise MidiFileError(f"Failed to read MIDI file: {e}") from e


class MidiFileAnalyzer:
    """
    Analyzer for Standard MIDI Files.

    Example:
        analyzer = MidiFileAnalyzer()
        info = analyzer.analyze_file("song.mid")
        print(f"{info.file_name}: {info.specification}")
    """

    def analyze_file(self, filepath: Union[str, Path]) -> MidiFileInfo:
        """
        Analyze a MIDI file on disk.

        Args:
            filepath: Path to .mid file

        Returns:
            MidiFileInfo summary
        """
        midi_file = load_midi_file(filepath)
        return self.analyze_midi(midi_file, filepath)

    def analyze_midi(self, midi_file: mido.MidiFile, filepath: Union[str, Path] = "") -> MidiFileInfo:
        """
        Analyze an already parsed MIDI file.

        Args:
            midi_file: Parsed mido.MidiFile
            filepath: Source path, used for the name fields

        Returns:
            MidiFileInfo summary
        """
        path = Path(filepath) if filepath else None

        event_count = 0
        tempo_event_count = 0
        sysex_event_count = 0

        for track in midi_file.tracks:
            event_count += len(track)
            for msg in track:
                if msg.type == "set_tempo":
                    tempo_event_count += 1
                elif sysex_payload(msg) is not None:
                    sysex_event_count += 1

        specification = detect_midi_file(midi_file)
        logger.debug("%s: %s", path.name if path else "<memory>", specification)

        return MidiFileInfo(
            file_name=path.name if path else "",
            file_path=str(path) if path else "",
            format=format_name(midi_file.type),
            track_count=len(midi_file.tracks),
            event_count=event_count,
            tempo_event_count=tempo_event_count,
            sysex_event_count=sysex_event_count,
            ticks_per_beat=midi_file.ticks_per_beat,
            specification=specification,
            is_empty=event_count == 0,
        )


def analyze_midi_file(filepath: Union[str, Path]) -> MidiFileInfo:
    """
    Convenience function to analyze a MIDI file.

    Args:
        filepath: Path to .mid file

    Returns:
        MidiFileInfo summary
    """
    return MidiFileAnalyzer().analyze_file(filepath)
