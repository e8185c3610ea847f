"""
Exceptions raised by the report pipeline.

Only I/O can fail: any line of the input, however odd, is a valid
country name.
"""
from __future__ import annotations

from pathlib import Path


class ReportIOError(OSError):
    """Reading the country list or writing the report failed.

    The underlying ``OSError`` is kept as ``cause`` (and chained as
    ``__cause__`` by the raiser) so callers can inspect errno/filename.
    """

    def __init__(self, message: str, *, path: Path | str | None = None,
                 cause: BaseException | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is not None:
            return f"{base}: {self.cause}"
        return base
