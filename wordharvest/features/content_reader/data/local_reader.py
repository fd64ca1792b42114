import os
from pathlib import Path

from wordharvest.core.common.errors import TruncatedReadError, ContentOutOfMemoryError
from ..domain.interfaces import IContentReader
from ..domain.models import FileContent

class LocalContentReader(IContentReader):
    def read_all(self, path: Path) -> FileContent:
        """
        Sizes the file from its open handle, then reads exactly that many bytes.
        A file that shrinks between the two steps is reported as truncated.
        """
        try:
            with open(path, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if size == 0:
                    return FileContent.empty(path)

                try:
                    data = f.read(size)
                except MemoryError as e:
                    raise ContentOutOfMemoryError(f"Cannot allocate {size} bytes for {path}", path) from e
        except OSError as e:
            raise TruncatedReadError(f"Failed to read {path}: {e.strerror or e}", path) from e

        if len(data) != size:
            raise TruncatedReadError(f"Read {len(data)} of {size} bytes from {path}", path)

        return FileContent(path=path, data=data, size=size)
