"""Runtime helpers shared by the entry point and the report pipeline.

Small, explicit utilities for paths.  Plain functions, no classes.
"""

from pathlib import Path


def repo_root():
    """Return the repository root (resolved Path)."""

    return Path(__file__).resolve().parents[1]


def resolve_path(path, base=None):
    """Return ``path`` as a Path, joined onto ``base`` when relative.

    ``base`` defaults to the current working directory, which is where the
    input and output files of a run live.
    """

    out = Path(path).expanduser()
    if out.is_absolute():
        return out
    return Path(base or Path.cwd()) / out


def ensure_dir(path, *parts):
    """Create a directory (and its parents) and return it."""

    base = resolve_path(path)
    for part in parts:
        base = base / part
    base.mkdir(parents=True, exist_ok=True)
    return base
