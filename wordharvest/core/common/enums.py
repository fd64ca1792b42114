# File: wordharvest/core/common/enums.py

from enum import Enum, unique

@unique
class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"

@unique
class ErrorKind(str, Enum):
    UNSUPPORTED_EXTENSION = "UnsupportedExtension"
    DIRECTORY_UNREADABLE = "DirectoryUnreadable"
    TRUNCATED_READ = "TruncatedRead"
    OUT_OF_MEMORY = "OutOfMemory"
    OUTPUT_UNAVAILABLE = "OutputUnavailable"
