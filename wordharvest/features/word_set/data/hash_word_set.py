from threading import Lock
from typing import Dict, Iterator, List, Optional
from ..domain.interfaces import IWordSet

class HashWordSet(IWordSet):
    """
    Dict-backed word set. Grows without bound and keeps insertion order,
    so iteration yields words in the order they were first seen.
    """

    def __init__(self):
        self._words: Dict[bytes, None] = {}

    def insert(self, word: bytes) -> bool:
        if word in self._words:
            return False
        self._words[word] = None
        return True

    def contains(self, word: bytes) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._words)


class LockedWordSet(IWordSet):
    """
    Serialises every operation on an inner word set behind one lock.
    Used when several workers harvest files in parallel.
    """

    def __init__(self, inner: Optional[IWordSet] = None):
        self._inner = inner if inner is not None else HashWordSet()
        self.lock = Lock()

    def insert(self, word: bytes) -> bool:
        with self.lock:
            return self._inner.insert(word)

    def contains(self, word: bytes) -> bool:
        with self.lock:
            return self._inner.contains(word)

    def __len__(self) -> int:
        with self.lock:
            return len(self._inner)

    def __iter__(self) -> Iterator[bytes]:
        # Snapshot, so callers never iterate while another thread inserts
        with self.lock:
            snapshot: List[bytes] = list(self._inner)
        return iter(snapshot)
