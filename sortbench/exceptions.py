"""
Error taxonomy for sortbench.

Input problems surface as subclasses of DataLoadError so the driver can abort a
single size and move on to the next one. The concrete errors also inherit from
the matching builtin (FileNotFoundError, ValueError) so callers that only know
the standard library still catch them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BenchmarkError(Exception):
    """Base class for all sortbench errors."""


class DataLoadError(BenchmarkError):
    """Raised when a data file cannot be turned into a dataset."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class DataFileNotFoundError(DataLoadError, FileNotFoundError):
    """The data file for a configured size does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Data file not found: {path}", path=path)


class TruncatedInputError(DataLoadError):
    """The data file holds fewer complete records than requested."""

    def __init__(self, path: Path, expected: int, found: int) -> None:
        super().__init__(
            f"{path}: expected {expected} records, found only {found}", path=path
        )
        self.expected = expected
        self.found = found


class RecordParseError(DataLoadError, ValueError):
    """A record's tokens could not be converted into field values."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        record_index: Optional[int] = None,
    ) -> None:
        location = ""
        if path is not None:
            location = f"{path}"
            if record_index is not None:
                location += f" (record {record_index})"
            location += ": "
        super().__init__(f"{location}{message}", path=path)
        self.record_index = record_index


class TargetSelectionError(BenchmarkError, ValueError):
    """The requested search target index does not exist in the dataset."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"target index {index} is outside [0, {size})")
        self.index = index
        self.size = size


__all__ = [
    "BenchmarkError",
    "TargetSelectionError",
    "DataLoadError",
    "DataFileNotFoundError",
    "TruncatedInputError",
    "RecordParseError",
]
