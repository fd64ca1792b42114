from abc import ABC, abstractmethod
from typing import Iterator

class ITokenizer(ABC):
    @abstractmethod
    def tokenize(self, content: bytes) -> Iterator[bytes]:
        """
        Lazily yields candidate words from raw file content.
        Each call returns a fresh iterator over the same sequence.
        """
        pass
