"""Command line interface for midispec."""
