"""
Test text I/O helpers.

Run with: pytest core/test_io.py -v
"""
import os
import stat

import pytest

from core import io as core_io
from core.io import read_lines, split_lines, write_lines


@pytest.mark.parametrize("text, expected", [
    ("", []),
    ("Chad", ["Chad"]),
    ("Chad\n", ["Chad"]),
    ("Chad\nPeru\n", ["Chad", "Peru"]),
    ("Chad\r\nPeru\r\n", ["Chad", "Peru"]),
    ("Chad\rPeru", ["Chad", "Peru"]),
    ("Chad\n\nPeru", ["Chad", "", "Peru"]),
    ("\n", [""]),
    ("Chad\n\n", ["Chad", ""]),
])
def test_split_lines(text, expected):
    assert split_lines(text) == expected


def test_read_lines_keeps_whitespace(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_bytes(b"  Chad \r\nCote d'Ivoire\r\n")

    assert read_lines(path) == ["  Chad ", "Cote d'Ivoire"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


def test_write_lines_creates_parent(tmp_path):
    out = tmp_path / "matches" / "nested" / "data.txt"

    write_lines(["", "Header:", "Chad"], out)

    assert out.read_text(encoding="utf-8") == "\nHeader:\nChad\n"


def test_write_lines_overwrites(tmp_path):
    out = tmp_path / "data.txt"
    out.write_text("old content that is much longer than the new one\n")

    write_lines(["new"], out)

    assert out.read_text() == "new\n"
    assert os.listdir(tmp_path) == ["data.txt"]


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(previous)


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_write_lines_new_file_follows_umask(tmp_path, umask_022):
    out = tmp_path / "matches" / "data.txt"

    write_lines(["Chad"], out)

    assert stat.S_IMODE(out.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_write_lines_keeps_existing_mode(tmp_path, umask_022):
    out = tmp_path / "data.txt"
    out.write_text("previous\n")
    os.chmod(out, 0o640)

    write_lines(["Chad"], out)

    assert stat.S_IMODE(out.stat().st_mode) == 0o640
    assert out.read_text() == "Chad\n"


def test_write_lines_failure_keeps_previous_file(tmp_path, monkeypatch):
    """A failed write leaves the old report and no temp files behind."""
    out = tmp_path / "data.txt"
    out.write_text("previous\n")

    def boom(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(core_io.os, "replace", boom)

    with pytest.raises(OSError):
        write_lines(["new"], out)

    assert out.read_text() == "previous\n"
    assert os.listdir(tmp_path) == ["data.txt"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
