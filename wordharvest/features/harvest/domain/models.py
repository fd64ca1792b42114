from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from wordharvest.core.config.settings import settings
from wordharvest.features.extensions.domain.models import ExtensionSet

@dataclass(frozen=True)
class HarvestRequest:
    """
    Everything one harvest run needs, validated up front.
    """
    root_path: Path
    output_path: Path
    extensions: ExtensionSet
    workers: int = settings.WORKERS
    min_word_length: int = settings.MIN_WORD_LENGTH

    def __post_init__(self):
        if not self.root_path.exists():
            raise FileNotFoundError(f"Harvest root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Harvest root is not a directory: {self.root_path}")
        if self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")
        if self.min_word_length < 1:
            raise ValueError(f"Minimum word length must be at least 1, got {self.min_word_length}")

@dataclass(frozen=True)
class FileOutcome:
    """
    Result of harvesting a single file.
    """
    path: Path
    words_seen: int = 0
    words_new: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

@dataclass
class HarvestSummary:
    """
    Report returned after a harvest completes.
    """
    files_visited: int = 0
    files_harvested: int = 0
    files_failed: int = 0
    directories_failed: int = 0
    words_seen: int = 0
    words_written: int = 0
    errors: List[str] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        self.files_visited += 1
        if outcome.failed:
            self.files_failed += 1
            self.errors.append(outcome.error)
            return
        self.files_harvested += 1
        self.words_seen += outcome.words_seen
        self.words_written += outcome.words_new
