"""Platform Factory - platform detection and mounter creation."""

import logging
import platform

from ...config import Settings
from .base_mounter import BaseMounter


class UnsupportedPlatformError(Exception):
    """Raised when platform is not supported for WebDAV mounting."""
    pass


class PlatformFactory:
    """Factory for creating the platform mount implementation. Only GVfs on Linux serves dav:// locations."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def detect_platform(self) -> str:
        """Detect current platform. Returns: linux."""
        system = platform.system().lower()

        if system != "linux":
            raise UnsupportedPlatformError(f"Platform {system} not supported for WebDAV mounting")
        return "linux"

    def create_mounter(self) -> BaseMounter:
        """Create platform-specific mounter instance."""
        self.detect_platform()

        from .gio_mounter import GioMounter
        mounter = GioMounter(gio_command=self._settings.gio_command)
        logging.debug(f"Initialized {mounter.get_platform_name()} mounter")
        return mounter
