"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from midi_messages import build_midi, gm_on, gs_reset, note_off, note_on, tempo, xg_on


@pytest.fixture
def write_midi(tmp_path):
    """Return a factory writing a MIDI file into tmp_path."""

    def _write(name, tracks, smf_type: int = 1, directory: Path = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        build_midi(tracks, smf_type=smf_type).save(str(path))
        return path

    return _write


@pytest.fixture
def gs_file(write_midi):
    """Format 1 GS file: reset in the conductor track, notes in track 2."""
    return write_midi(
        "gs_song.mid",
        [
            [tempo(120), gs_reset()],
            [note_on(60), note_off(60)],
        ],
    )


@pytest.fixture
def xg_file(write_midi):
    """Format 0 XG file."""
    return write_midi("xg_song.mid", [[xg_on(), tempo(100), note_on(64), note_off(64)]], smf_type=0)


@pytest.fixture
def plain_file(write_midi):
    """File without any SysEx."""
    return write_midi("plain.mid", [[tempo(90)], [note_on(), note_off()]])


@pytest.fixture
def gm_file(write_midi):
    return write_midi("gm_song.mid", [[gm_on(), note_on(), note_off()]], smf_type=0)


@pytest.fixture
def corrupt_file(tmp_path):
    """File that is not a MIDI file."""
    path = tmp_path / "corrupt.mid"
    path.write_bytes(b"definitely not a MIDI file")
    return path


@pytest.fixture
def bad_key_file(tmp_path):
    """Well-formed SMF whose key_signature meta has 8 sharps (undecodable)."""
    header = b"MThd" + bytes([0, 0, 0, 6, 0, 0, 0, 1, 0x01, 0xE0])
    events = bytes([0x00, 0xFF, 0x59, 0x02, 0x08, 0x00, 0x00, 0xFF, 0x2F, 0x00])
    track = b"MTrk" + len(events).to_bytes(4, "big") + events

    path = tmp_path / "bad_key.mid"
    path.write_bytes(header + track)
    return path
