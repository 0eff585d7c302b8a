"""Tests for JSON utility functions."""

from __future__ import annotations

import json

import pytest

from breathwork.core.utils.json import read_json, write_json


@pytest.fixture
def pattern_file(tmp_path):
    """Path for a saved breathing pattern."""
    return tmp_path / "patterns" / "box.json"


def test_write_then_read_pattern(pattern_file):
    """A saved pattern reads back unchanged, parent dirs included."""
    data = {"inhale_seconds": 4, "hold_seconds": 4, "exhale_seconds": 4, "rest_seconds": 4}

    write_json(pattern_file, data)

    assert pattern_file.parent.is_dir()
    assert read_json(pattern_file) == data


def test_string_paths(pattern_file):
    """Both helpers accept str paths."""
    write_json(str(pattern_file), {"total_cycles": 5})

    assert read_json(str(pattern_file)) == {"total_cycles": 5}


def test_output_is_indented_with_trailing_newline(pattern_file):
    """Files are pretty-printed for hand editing."""
    write_json(pattern_file, {"session": {"tick_interval_seconds": 1.0}})

    text = pattern_file.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n  "session"' in text


def test_read_missing_file(tmp_path):
    """Missing files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "does_not_exist.json")


def test_read_invalid_json(tmp_path):
    """Malformed content raises JSONDecodeError."""
    path = tmp_path / "broken.json"
    path.write_text("{ invalid json }", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        read_json(path)
