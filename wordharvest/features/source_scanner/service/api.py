from pathlib import Path
from typing import List

from wordharvest.features.extensions.domain.models import ExtensionSet
from wordharvest.features.extensions.service.api import compile_matcher
from ..data.directory_walker import RecursiveDirectoryWalker

def find_matching_files(root: str, extension_set: ExtensionSet) -> List[Path]:
    """
    Standalone API: lists every regular file under root whose suffix is in extension_set.
    Unreadable subdirectories are logged and skipped.
    """
    found: List[Path] = []
    walker = RecursiveDirectoryWalker()
    walker.walk(Path(root), compile_matcher(extension_set), found.append)
    return found
