from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from wordharvest.core.common.enums import EntryKind

@dataclass(frozen=True)
class PathEntry:
    """
    A directory entry seen during traversal.
    Transient: never retained beyond the visit that produced it.
    """
    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name

@dataclass
class WalkStats:
    """
    Counters collected while walking a tree.
    """
    directories_listed: int = 0
    directories_failed: int = 0
    files_matched: int = 0
    entries_skipped: int = 0
    errors: List[str] = field(default_factory=list)
