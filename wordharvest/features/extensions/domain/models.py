import os
from dataclasses import dataclass
from typing import Iterable, Tuple

from wordharvest.core.config.settings import settings


@dataclass(frozen=True)
class ExtensionSet:
    """
    Ordered, immutable collection of allowed filename suffixes (no leading dot).
    Compared case-sensitively: "txt" and "TXT" are different extensions.
    """
    extensions: Tuple[str, ...]

    def __post_init__(self):
        if not self.extensions:
            raise ValueError("Extension set cannot be empty.")
        if len(self.extensions) > settings.MAX_EXTENSIONS:
            raise ValueError(
                f"Too many extensions ({len(self.extensions)}), maximum is {settings.MAX_EXTENSIONS}."
            )
        if len(set(self.extensions)) != len(self.extensions):
            raise ValueError(f"Duplicate extensions in {self.extensions}.")

        for ext in self.extensions:
            if not ext:
                raise ValueError("Extension cannot be empty.")
            if len(ext) > settings.MAX_EXTENSION_LENGTH:
                raise ValueError(
                    f"Extension '{ext}' is longer than {settings.MAX_EXTENSION_LENGTH} characters."
                )
            if "/" in ext or os.sep in ext or "." in ext:
                raise ValueError(f"Extension '{ext}' must not contain path separators or dots.")

    @classmethod
    def of(cls, extensions: Iterable[str]) -> "ExtensionSet":
        # Keeps the first occurrence of each suffix
        return cls(tuple(dict.fromkeys(extensions)))

    def __contains__(self, extension: str) -> bool:
        return extension in self.extensions

    def __iter__(self):
        return iter(self.extensions)

    def __len__(self) -> int:
        return len(self.extensions)

    def __str__(self) -> str:
        return " ".join(self.extensions)
