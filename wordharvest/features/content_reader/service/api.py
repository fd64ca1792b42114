from pathlib import Path
from typing import Dict, Optional

from ..domain.interfaces import IContentReader
from ..domain.models import FileContent
from ..data.local_reader import LocalContentReader
from ..data.pdftotext_adapter import PdfToTextReader

class ContentReaderRouter(IContentReader):
    """
    Dispatches to a specialised reader by file suffix, defaulting to a raw byte read.
    """

    def __init__(self,
                 default: Optional[IContentReader] = None,
                 by_extension: Optional[Dict[str, IContentReader]] = None):
        self.default = default or LocalContentReader()
        self.by_extension = dict(by_extension or {})

    @classmethod
    def with_pdf_support(cls, pdftotext_binary: Optional[Path]) -> "ContentReaderRouter":
        if pdftotext_binary is None:
            return cls()
        return cls(by_extension={"pdf": PdfToTextReader(pdftotext_binary)})

    def read_all(self, path: Path) -> FileContent:
        # Suffix lookup is case-sensitive, like extension matching
        reader = self.by_extension.get(path.suffix[1:], self.default)
        return reader.read_all(path)


def read_file(path: str) -> FileContent:
    """
    Standalone API: loads a file's full contents.
    """
    return LocalContentReader().read_all(Path(path))
