from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import WatermarkManagerError


@dataclass
class OperationResult:
    """
    Outcome of one top-level operation (edit, text or image watermark).
    Callers map any failure to a single user-facing message; the error
    itself stays available for logging and tests.
    """
    ok: bool
    path: Path | None = None # File written (or checked) by the operation.
    error: WatermarkManagerError | None = None

    @classmethod
    def success(cls, path: Path | None = None) -> "OperationResult":
        return cls(ok=True, path=path)

    @classmethod
    def failure(cls, error: WatermarkManagerError) -> "OperationResult":
        return cls(ok=False, error=error)
