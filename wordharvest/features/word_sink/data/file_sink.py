import logging
from pathlib import Path
from threading import Lock

from wordharvest.core.common.errors import OutputUnavailableError

logger = logging.getLogger(__name__)

class FileWordSink:
    """
    Append-only output file, one word per line, in the order words are written.
    Safe to share between threads: writes never interleave.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.words_written = 0
        self._lock = Lock()
        self._handle = None

    def open(self) -> "FileWordSink":
        try:
            self._handle = open(self.path, "wb")
        except OSError as e:
            raise OutputUnavailableError(
                f"Cannot open output file {self.path}: {e.strerror or e}", self.path
            ) from e
        logger.debug(f"Writing words to {self.path}")
        return self

    def write(self, word: bytes) -> None:
        with self._lock:
            if self._handle is None:
                raise ValueError(f"Output file {self.path} is not open.")
            self._handle.write(word + b"\n")
            self.words_written += 1

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> "FileWordSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
