import subprocess
import logging
from pathlib import Path

from wordharvest.core.common.errors import TruncatedReadError
from ..domain.interfaces import IContentReader
from ..domain.models import FileContent

logger = logging.getLogger(__name__)

class PdfToTextReader(IContentReader):
    """
    Extracts the text layer of a PDF through the pdftotext command line tool.
    """

    def __init__(self, binary: Path):
        self.binary = binary

    def read_all(self, path: Path) -> FileContent:
        # -q: suppress warnings
        # "-": write the text to stdout
        cmd = [str(self.binary), "-q", str(path), "-"]

        logger.debug(f"Extracting PDF text: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.decode(errors="replace").strip() if e.stderr else str(e)
            logger.error(f"pdftotext failed on {path}: {error_msg}")
            raise TruncatedReadError(f"PDF extraction failed for {path}: {error_msg}", path) from e
        except OSError as e:
            raise TruncatedReadError(f"Cannot run {self.binary}: {e.strerror or e}", path) from e

        if not result.stdout:
            return FileContent.empty(path)

        return FileContent(path=path, data=result.stdout, size=len(result.stdout))
