"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Terminal failures raised while reloading persisted records.

Recoverable conditions (unclassifiable BFP, unsupported gender, unknown
user) are never raised; they are logged and a best-effort value returned.
"""

from __future__ import annotations

from pathlib import Path


class RecordSourceError(RuntimeError):
    def __init__(self, message: str, source: str | Path | None = None) -> None:
        super().__init__(message)
        self.source = source


class SourceNotFound(RecordSourceError):
    """Source does not exist or cannot be opened."""


class SourceEmpty(RecordSourceError):
    """Source exists but holds zero bytes."""


class ParseFailure(RecordSourceError, ValueError):
    def __init__(
        self,
        message: str,
        source: str | Path | None = None,
        line_no: int | None = None,
    ) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message, source)
        self.line_no = line_no
