"""
Abstract interfaces for time and identity sources.

The core never reads the system clock or generates ids on its own.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware time."""
        pass


class IIdGenerator(ABC):
    """Source of unique identifiers."""

    @abstractmethod
    def new_id(self, prefix: str = "") -> str:
        """Return a new unique id, optionally prefixed (e.g. "tx_")."""
        pass
