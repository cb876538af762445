"""
Directory scanner.

Classifies every MIDI file in a directory, optionally in parallel. A file
that fails to load is reported in its ScanResult and does not stop the
scan.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from midispec.analysis.file_info import MidiFileError, load_midi_file
from midispec.detection.detector import detect_midi_file
from midispec.models.specification import Specification

logger = logging.getLogger(__name__)

MIDI_SUFFIXES = (".mid", ".midi")


@dataclass
class ScanResult:
    """Detection result for a single file."""

    path: Path
    specification: Optional[Specification] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def find_midi_files(directory: Union[str, Path], recursive: bool = False) -> List[Path]:
    """
    Find MIDI files in a directory.

    Args:
        directory: Directory to search
        recursive: Also search subdirectories

    Returns:
        Sorted list of .mid/.midi files (any letter case)
    """
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    candidates = root.rglob("*") if recursive else root.iterdir()
    files = {p for p in candidates if p.is_file() and p.suffix.lower() in MIDI_SUFFIXES}

    return sorted(files)


def scan_file(filepath: Union[str, Path]) -> ScanResult:
    """Load and classify one file, capturing load errors."""
    path = Path(filepath)

    try:
        midi_file = load_midi_file(path)
    except (MidiFileError, FileNotFoundError, ValueError) as e:
        logger.warning("Skipping %s: %s", path.name, e)
        return ScanResult(path=path, error=str(e))

    return ScanResult(path=path, specification=detect_midi_file(midi_file))


def scan_files(paths: Iterable[Union[str, Path]], jobs: int = 1) -> List[ScanResult]:
    """
    Classify a list of files.

    Args:
        paths: Files to scan
        jobs: Number of worker threads

    Returns:
        Results in the same order as paths
    """
    paths = list(paths)

    if jobs <= 1 or len(paths) <= 1:
        return [scan_file(p) for p in paths]

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(scan_file, paths))


def scan_directory(
    directory: Union[str, Path], jobs: int = 1, recursive: bool = False
) -> List[ScanResult]:
    """
    Classify every MIDI file in a directory.

    Args:
        directory: Directory to scan
        jobs: Number of worker threads
        recursive: Also scan subdirectories

    Returns:
        Results sorted by path
    """
    files = find_midi_files(directory, recursive=recursive)
    logger.debug("Found %d MIDI files in %s", len(files), directory)
    return scan_files(files, jobs=jobs)


def summarize(results: Iterable[ScanResult]) -> Dict[str, int]:
    """
    Count results per specification label.

    Failed files are counted under "Errors".
    """
    counts: Counter = Counter()
    for result in results:
        if result.ok:
            counts[result.specification.value] += 1
        else:
            counts["Errors"] += 1

    return dict(counts)
