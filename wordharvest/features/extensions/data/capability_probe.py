import os
import shutil
import logging
from pathlib import Path
from typing import Optional, Sequence
from ..domain.interfaces import ICapabilityProbe

logger = logging.getLogger(__name__)

_NOT_PROBED = object()

class ExecutableProbe(ICapabilityProbe):
    """
    Looks for an executable at a list of conventional locations,
    then falls back to a PATH lookup.
    The filesystem is checked once per instance; later calls reuse the answer.
    """

    def __init__(self, name: str, candidate_paths: Sequence[Path] = (), search_path: bool = True):
        self.name = name
        self.candidate_paths = tuple(Path(p) for p in candidate_paths)
        self.search_path = search_path
        self._result = _NOT_PROBED

    def find(self) -> Optional[Path]:
        if self._result is _NOT_PROBED:
            self._result = self._locate()
        return self._result

    def _locate(self) -> Optional[Path]:
        for candidate in self.candidate_paths:
            if candidate.is_file() and os.access(candidate, os.X_OK):
                logger.debug(f"Found {self.name} at {candidate}")
                return candidate

        if self.search_path:
            located = shutil.which(self.name)
            if located:
                logger.debug(f"Found {self.name} on PATH: {located}")
                return Path(located)

        logger.debug(f"{self.name} not found")
        return None
