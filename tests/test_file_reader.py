"""Tests for source file reading."""
import tempfile
from pathlib import Path

import pytest

from site_lint.file_reader import read_source


def test_read_source_utf8():
    """Test reading valid UTF-8 file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        test_file = Path(tmpdir) / "index.html"
        test_file.write_text("<p>Café</p>", encoding="utf-8")

        assert read_source(test_file, "index.html") == "<p>Café</p>"


def test_read_source_strips_bom():
    """Test a UTF-8 byte order mark is dropped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        test_file = Path(tmpdir) / "index.html"
        test_file.write_bytes(b"\xef\xbb\xbf<!DOCTYPE html>")

        assert read_source(test_file, "index.html") == "<!DOCTYPE html>"


def test_read_source_latin1_fallback():
    """Test fallback to latin-1 for invalid UTF-8."""
    with tempfile.TemporaryDirectory() as tmpdir:
        test_file = Path(tmpdir) / "latin.css"
        test_file.write_bytes("/* Café */".encode("latin-1"))

        content = read_source(test_file, "latin.css")

        assert "Caf" in content


def test_read_source_missing_file_raises():
    """Test missing files are not swallowed."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(FileNotFoundError):
            read_source(Path(tmpdir) / "gone.js", "gone.js")
