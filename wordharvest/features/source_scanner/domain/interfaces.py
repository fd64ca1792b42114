from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from wordharvest.core.common.errors import DirectoryUnreadableError
from wordharvest.features.extensions.domain.interfaces import IExtensionMatcher
from .models import WalkStats

Visitor = Callable[[Path], None]
ErrorHandler = Callable[[DirectoryUnreadableError], None]

class IDirectoryWalker(ABC):
    """
    Contract for traversing a filesystem tree.
    """
    @abstractmethod
    def walk(self,
             root: Path,
             matcher: IExtensionMatcher,
             visit: Visitor,
             on_error: Optional[ErrorHandler] = None) -> WalkStats:
        """
        Calls visit(path) once for every regular file under root whose name
        satisfies the matcher. Subdirectories are recursed into.

        A directory that cannot be listed is reported through on_error and
        its subtree is skipped; traversal of its siblings continues.
        """
        pass
