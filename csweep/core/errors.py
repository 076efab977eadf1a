"""Exceptions raised while sweeping C files."""

from pathlib import Path


class SweepError(Exception):
    """Base class for sweeper errors."""


class SweepFileError(SweepError):
    """A single file could not be analyzed. The scan skips it and continues."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class UnreadableFileError(SweepFileError):
    def __init__(self, path: Path, detail: str = "") -> None:
        reason = "Could not read file"
        if detail:
            reason = f"{reason} ({detail})"
        super().__init__(path, reason)


class UnparsableFileError(SweepFileError):
    def __init__(self, path: Path, detail: str = "") -> None:
        reason = "Could not parse file"
        if detail:
            reason = f"{reason} ({detail})"
        super().__init__(path, reason)
