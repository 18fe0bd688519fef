"""Abstract Document Source - interface definition."""

from abc import ABC, abstractmethod


class DocumentSource(ABC):
    """Abstract base class for manifest byte sources."""

    @abstractmethod
    async def load(self) -> bytes:
        """Return the full manifest content or raise a DavMountError."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Get a human readable location for logging."""
        pass
