"""Tests for the command line interface."""

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from midispec import __version__

runner = CliRunner()


class TestDetectCommand:
    def test_detect_single(self, gs_file):
        result = runner.invoke(app, ["detect", str(gs_file)])
        assert result.exit_code == 0
        assert "Roland GS" in result.stdout

    def test_detect_multiple(self, gs_file, xg_file, plain_file):
        result = runner.invoke(app, ["detect", str(gs_file), str(xg_file), str(plain_file)])
        assert result.exit_code == 0
        assert "Roland GS" in result.stdout
        assert "Yamaha XG" in result.stdout
        assert "Unknown/Standard MIDI" in result.stdout

    def test_detect_matches(self, gm_file):
        result = runner.invoke(app, ["detect", str(gm_file), "--matches"])
        assert result.exit_code == 0
        assert "GM System On" in result.stdout

    def test_detect_json(self, gs_file, xg_file):
        result = runner.invoke(app, ["detect", str(gs_file), str(xg_file), "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data == {str(gs_file): "Roland GS", str(xg_file): "Yamaha XG"}

    def test_detect_missing_file(self, tmp_path):
        result = runner.invoke(app, ["detect", str(tmp_path / "missing.mid")])
        assert result.exit_code == 1

    def test_detect_corrupt_file(self, corrupt_file):
        result = runner.invoke(app, ["detect", str(corrupt_file)])
        assert result.exit_code == 1
        assert "Failed to read MIDI file" in result.stdout


    def test_detect_undecodable_file(self, bad_key_file, gs_file):
        result = runner.invoke(app, ["detect", str(bad_key_file), str(gs_file)])
        assert result.exit_code == 1
        assert "Failed to read MIDI file" in result.stdout
        assert "Roland GS" in result.stdout


class TestInfoCommand:
    def test_info(self, xg_file):
        result = runner.invoke(app, ["info", str(xg_file)])
        assert result.exit_code == 0
        assert "Format 0 (Single Track)" in result.stdout
        assert "Yamaha XG" in result.stdout

    def test_info_json(self, gs_file):
        result = runner.invoke(app, ["info", str(gs_file), "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["file_name"] == "gs_song.mid"
        assert data["track_count"] == 2
        assert data["specification"] == "Roland GS"
        assert data["is_empty"] is False

    def test_info_directory(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "File not found" in result.stdout

    def test_info_undecodable_file(self, bad_key_file):
        result = runner.invoke(app, ["info", str(bad_key_file)])
        assert result.exit_code == 1
        assert "Failed to read MIDI file" in result.stdout

    def test_info_missing_file(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.mid")])
        assert result.exit_code == 1
        assert "File not found" in result.stdout


class TestScanCommand:
    @pytest.fixture
    def scan_dir(self, tmp_path, gs_file, xg_file):
        directory = tmp_path / "songs"
        directory.mkdir()
        for source in (gs_file, xg_file):
            (directory / source.name).write_bytes(source.read_bytes())
        return directory

    def test_scan(self, scan_dir):
        result = runner.invoke(app, ["scan", str(scan_dir)])
        assert result.exit_code == 0
        assert "gs_song.mid" in result.stdout
        assert "xg_song.mid" in result.stdout
        assert "Summary" in result.stdout

    def test_scan_json_parallel(self, scan_dir):
        result = runner.invoke(app, ["scan", str(scan_dir), "--jobs", "2", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        specs = [f["specification"] for f in data["files"]]
        assert specs == ["Roland GS", "Yamaha XG"]
        assert data["summary"] == {"Roland GS": 1, "Yamaha XG": 1}

    def test_scan_jobs_from_environment(self, scan_dir):
        result = runner.invoke(app, ["scan", str(scan_dir), "--json"], env={"MIDISPEC_JOBS": "2"})
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["files"]) == 2

    def test_scan_empty_directory(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path)])
        assert result.exit_code == 1
        assert "No MIDI files found" in result.stdout

    def test_scan_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "missing")])
        assert result.exit_code == 1


class TestSignaturesCommand:
    def test_list_all(self):
        result = runner.invoke(app, ["signatures"])
        assert result.exit_code == 0
        assert "GS Reset" in result.stdout
        assert "XG System On" in result.stdout

    def test_filter(self):
        result = runner.invoke(app, ["signatures", "--spec", "xg"])
        assert result.exit_code == 0
        assert "XG System On" in result.stdout
        assert "GS Reset" not in result.stdout

    def test_invalid_spec(self):
        result = runner.invoke(app, ["signatures", "--spec", "MT-32"])
        assert result.exit_code == 1


class TestVersion:
    def test_version_command(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
