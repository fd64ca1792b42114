import re
from ..domain.interfaces import IExtensionMatcher
from ..domain.models import ExtensionSet

class RegexExtensionMatcher(IExtensionMatcher):
    """
    Compiles the whole extension set into one anchored pattern: \\.(?:txt|asc)\\Z
    """

    def __init__(self, extension_set: ExtensionSet):
        if len(extension_set) == 0:
            raise ValueError("Cannot build a matcher from an empty extension set.")

        alternatives = "|".join(re.escape(ext) for ext in extension_set)
        self.extension_set = extension_set
        self._pattern = re.compile(rf"\.(?:{alternatives})\Z")

    def matches(self, filename: str) -> bool:
        # Only the last path component is considered
        name = filename.replace("\\", "/").rsplit("/", 1)[-1]
        return self._pattern.search(name) is not None

    def __repr__(self) -> str:
        return f"RegexExtensionMatcher({self._pattern.pattern!r})"
