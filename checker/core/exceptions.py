"""
Error kinds raised by the output checker.

EnumerationError, EmptyBatchError and ReadError abort a run.
InvalidSelection is recoverable and only raised by the interactive session.
"""

from __future__ import annotations

from pathlib import Path


class CheckerError(Exception):
    """Base class for all checker errors."""


class EnumerationError(CheckerError):
    """The reference folder could not be listed."""

    def __init__(self, folder: Path | str, reason: str):
        self.folder = str(folder)
        self.reason = reason
        super().__init__(f"Error counting files in {self.folder}: {reason}")


class EmptyBatchError(CheckerError):
    """No numbered files were found in the reference folder."""

    def __init__(self, folder: Path | str):
        self.folder = str(folder)
        super().__init__(f"No files found in reference folder: {self.folder}")


class ReadError(CheckerError):
    """A specific file could not be read."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed reading file {self.path}: {reason}")


class InvalidSelection(CheckerError):
    """The operator picked an out-of-range file or an unknown display mode."""
