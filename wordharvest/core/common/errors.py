# File: wordharvest/core/common/errors.py

from pathlib import Path
from typing import Optional

from .enums import ErrorKind


class HarvestError(Exception):
    """
    Base for every error the harvest pipeline reports.
    Carries a machine-readable kind and, where relevant, the offending path.
    """
    kind: ErrorKind

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class UnsupportedExtensionError(HarvestError, ValueError):
    """A requested extension is not on the allow-list. Fatal to configuration."""
    kind = ErrorKind.UNSUPPORTED_EXTENSION

    def __init__(self, extension: str):
        super().__init__(f"Extension '{extension}' not allowed.")
        self.extension = extension


class DirectoryUnreadableError(HarvestError, OSError):
    """A directory could not be listed. Local to that subtree."""
    kind = ErrorKind.DIRECTORY_UNREADABLE


class TruncatedReadError(HarvestError, OSError):
    """Fewer bytes were read than the file size announced."""
    kind = ErrorKind.TRUNCATED_READ


class ContentOutOfMemoryError(HarvestError, MemoryError):
    kind = ErrorKind.OUT_OF_MEMORY


class OutputUnavailableError(HarvestError, OSError):
    """The output file could not be opened. Fatal to the run."""
    kind = ErrorKind.OUTPUT_UNAVAILABLE
