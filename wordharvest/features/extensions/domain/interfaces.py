from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class IExtensionMatcher(ABC):
    """
    Contract for deciding whether a filename is eligible for harvesting.
    Implementations must be stateless so one instance can be shared by all workers.
    """
    @abstractmethod
    def matches(self, filename: str) -> bool:
        """True iff filename ends with '.' followed by exactly one allowed suffix."""
        pass


class ICapabilityProbe(ABC):
    """
    Contract for detecting an optional external helper program.
    Must be a read-only filesystem check.
    """
    @abstractmethod
    def find(self) -> Optional[Path]:
        """Returns the path of the helper, or None if it is not installed."""
        pass

    def is_available(self) -> bool:
        return self.find() is not None
