from abc import ABC, abstractmethod
from pathlib import Path
from .models import FileContent

class IContentReader(ABC):
    """
    Contract for loading a whole file into memory.
    """
    @abstractmethod
    def read_all(self, path: Path) -> FileContent:
        """
        Reads the entire file.

        Raises:
            TruncatedReadError: the bytes read do not match the file size, or I/O failed.
            ContentOutOfMemoryError: the buffer could not be allocated.
        """
        pass
