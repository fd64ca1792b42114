from abc import ABC, abstractmethod
from typing import Iterator

class IWordSet(ABC):
    """
    Contract for exact-match word deduplication.
    Words compare byte for byte; no case folding or trimming.
    """
    @abstractmethod
    def insert(self, word: bytes) -> bool:
        """Adds word. Returns True only if it was not already present."""
        pass

    @abstractmethod
    def contains(self, word: bytes) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[bytes]:
        """Iterates words in first-seen order."""
        pass

    def __contains__(self, word: bytes) -> bool:
        return self.contains(word)
