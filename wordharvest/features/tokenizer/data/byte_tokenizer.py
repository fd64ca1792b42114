import re
import string
from typing import Iterator
from ..domain.interfaces import ITokenizer

# ASCII whitespace and ASCII punctuation split words.
# Bytes >= 0x80 are word bytes, so UTF-8 encoded letters stay inside their word.
SEPARATORS = (string.whitespace + string.punctuation).encode("ascii")

_WORD_PATTERN = re.compile(b"[^" + re.escape(SEPARATORS) + b"]+")


class ByteTokenizer(ITokenizer):
    """
    Splits content into maximal runs of non-separator bytes.
    Case is preserved; nothing is normalised.
    """

    def __init__(self, min_length: int = 1):
        if min_length < 1:
            raise ValueError(f"Minimum word length must be at least 1, got {min_length}")
        self.min_length = min_length

    def tokenize(self, content: bytes) -> Iterator[bytes]:
        for match in _WORD_PATTERN.finditer(content):
            word = match.group()
            if len(word) >= self.min_length:
                yield word
