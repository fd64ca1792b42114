from dataclasses import dataclass
from pathlib import Path

# Returned instead of an empty buffer so tokenization always has a separator to work on
EMPTY_CONTENT = b" "

@dataclass(frozen=True)
class FileContent:
    """
    The complete contents of one file.
    Owned by the visit that produced it and dropped after tokenization.
    """
    path: Path
    data: bytes
    size: int

    @classmethod
    def empty(cls, path: Path) -> "FileContent":
        return cls(path=path, data=EMPTY_CONTENT, size=0)

    def __len__(self) -> int:
        return len(self.data)
