from __future__ import annotations

from pathlib import Path


class TagCloudError(RuntimeError):
    """Base class for failures surfaced to the user."""


class InputFileError(TagCloudError):
    """Raised when the input text file cannot be opened."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Error opening input file {path}: {reason}")
        self.path = path


class OutputFileError(TagCloudError):
    """Raised when the output document cannot be written."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Error writing output file {path}: {reason}")
        self.path = path
