"""
Network Mount Module

Adapter around the platform mount subsystem. The pipeline only sees
BaseMounter.mount(location, session); everything platform specific lives
behind it.

Components:
- BaseMounter: Abstract base class for platform mount operations
- GioMounter: GVfs implementation driving ``gio mount``
- MountSession: Handle for one interactive mount attempt
- PlatformFactory: Platform detection and mounter creation
"""

from .base_mounter import BaseMounter
from .mount_session import MountSession
from .platform_factory import PlatformFactory, UnsupportedPlatformError

__all__ = [
    "BaseMounter",
    "MountSession",
    "PlatformFactory",
    "UnsupportedPlatformError",
]
