import os
import logging
from pathlib import Path
from typing import Optional

from wordharvest.core.common.enums import EntryKind
from wordharvest.core.common.errors import DirectoryUnreadableError
from wordharvest.features.extensions.domain.interfaces import IExtensionMatcher
from ..domain.interfaces import IDirectoryWalker, Visitor, ErrorHandler
from ..domain.models import PathEntry, WalkStats

logger = logging.getLogger(__name__)

class RecursiveDirectoryWalker(IDirectoryWalker):
    """
    Depth-first walker built on os.scandir.

    Symbolic links, devices, sockets and FIFOs are skipped without being
    followed, so a symlinked directory is never entered.
    There is no visited-inode tracking: a cycle made of real directories
    (e.g. bind mounts) would recurse until Python's recursion limit.
    """

    def walk(self,
             root: Path,
             matcher: IExtensionMatcher,
             visit: Visitor,
             on_error: Optional[ErrorHandler] = None) -> WalkStats:
        stats = WalkStats()
        self._walk_directory(Path(root), matcher, visit, on_error, stats, is_root=True)
        return stats

    def _walk_directory(self,
                        directory: Path,
                        matcher: IExtensionMatcher,
                        visit: Visitor,
                        on_error: Optional[ErrorHandler],
                        stats: WalkStats,
                        is_root: bool = False) -> None:
        try:
            # Materialise the listing so no directory handle stays open while recursing
            with os.scandir(directory) as it:
                listing = list(it)
        except OSError as e:
            error = DirectoryUnreadableError(
                f"Cannot list directory {directory}: {e.strerror or e}", directory
            )
            stats.directories_failed += 1
            stats.errors.append(str(error))

            if on_error is not None:
                on_error(error)
                return
            if is_root:
                raise error from e
            logger.error(str(error))
            return

        stats.directories_listed += 1

        for dir_entry in listing:
            entry = self._classify(directory, dir_entry)

            if entry.kind == EntryKind.DIRECTORY:
                self._walk_directory(entry.path, matcher, visit, on_error, stats)
            elif entry.kind == EntryKind.FILE:
                if matcher.matches(entry.name):
                    stats.files_matched += 1
                    visit(entry.path)
            else:
                stats.entries_skipped += 1

    @staticmethod
    def _classify(directory: Path, dir_entry: os.DirEntry) -> PathEntry:
        # Each call builds its own child path; nothing is shared between recursion levels
        path = directory / dir_entry.name
        try:
            if dir_entry.is_dir(follow_symlinks=False):
                return PathEntry(path, EntryKind.DIRECTORY)
            if dir_entry.is_file(follow_symlinks=False):
                return PathEntry(path, EntryKind.FILE)
        except OSError as e:
            logger.debug(f"Cannot stat {path}: {e}")
        return PathEntry(path, EntryKind.OTHER)
