from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .services.completion_handler import CompletionHandler
from .services.error_reporter import ErrorReporter, RichErrorReporter
from .services.mount_coordinator import MountCoordinator
from .services.network_mount import BaseMounter, PlatformFactory
from .services.viewer_launcher import ViewerLauncher

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Hent Settings singleton instance."""
    return Settings()


def get_error_reporter() -> ErrorReporter:
    if "error_reporter" not in _singletons:
        _singletons["error_reporter"] = RichErrorReporter()
    return _singletons["error_reporter"]


def get_mounter(settings: Settings) -> BaseMounter:
    if "mounter" not in _singletons:
        _singletons["mounter"] = PlatformFactory(settings).create_mounter()
    return _singletons["mounter"]


def create_mount_coordinator(settings: Settings) -> MountCoordinator:
    """Build a fresh coordinator; one coordinator handles exactly one run."""
    viewer_launcher = None
    if settings.open_viewer_on_success:
        launcher = ViewerLauncher(settings.viewer_command)
        if launcher.is_configured:
            viewer_launcher = launcher

    completion_handler = CompletionHandler(
        error_reporter=get_error_reporter(),
        viewer_launcher=viewer_launcher,
    )
    return MountCoordinator(
        mounter=get_mounter(settings),
        completion_handler=completion_handler,
        interactive=settings.interactive_mount,
    )


def reset_singletons() -> None:
    """Reset all singletons - used in testing."""
    _singletons.clear()
    get_settings.cache_clear()
