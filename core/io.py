"""Centralised text I/O helpers for the report pipeline.

Every read/write goes through here so the report modules focus on the
section logic.  Errors are plain ``OSError`` subclasses; the report builder
decides how to surface them.
"""

import os
import stat
import tempfile
from pathlib import Path

from .runtime import ensure_dir


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def split_lines(text):
    """Split ``text`` into lines the way line-oriented readers do.

    ``\\n``, ``\\r\\n`` and ``\\r`` all terminate a line.  A terminator at the
    very end does not start another (empty) line, so ``"a\\nb\\n"`` gives two
    entries and ``""`` gives none.  Blank lines in the middle are kept.
    """

    if not text:
        return []
    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalised.split("\n")
    if normalised.endswith("\n"):
        lines.pop()
    return lines


def read_lines(path, encoding="utf-8"):
    """Return the lines of a text file as a list of strings.

    Raises ``FileNotFoundError`` / ``PermissionError`` / ``UnicodeDecodeError``
    from the underlying read.
    """

    # newline="" keeps "\r" visible to split_lines
    with Path(path).open("r", encoding=encoding, newline="") as handle:
        return split_lines(handle.read())


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _target_mode(path):
    """Permission bits the report should end up with.

    An existing file keeps its mode; a new one gets ``0o666`` minus the
    process umask, like a file opened with ``open(path, "w")``.
    """

    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_lines(lines, path, encoding="utf-8"):
    """Write ``lines`` to ``path``, one per line, replacing any prior file.

    The content is staged in a temporary file next to ``path`` and moved into
    place with ``os.replace``, so readers see either the old file or the
    complete new one.  The parent directory is created when missing.
    """

    out_path = Path(path)
    parent = ensure_dir(out_path.parent)
    payload = "".join(f"{line}\n" for line in lines)
    mode = _target_mode(out_path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{out_path.name}.", suffix=".tmp",
                                    dir=str(parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(payload)
        # mkstemp creates 0600
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, out_path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return out_path
