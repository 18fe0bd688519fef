"""Abstract Base Mounter - interface definition."""

from abc import ABC, abstractmethod

from .mount_session import MountSession


class BaseMounter(ABC):
    """Abstract base class for platform-specific mount operations."""

    @abstractmethod
    async def mount(self, location: str, session: MountSession) -> None:
        """Mount the volume enclosing ``location``. Raises MountError on failure."""
        pass

    @abstractmethod
    def get_platform_name(self) -> str:
        """Get platform name for logging."""
        pass
