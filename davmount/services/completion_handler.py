"""Completion Handler - turns the end of a run into user-visible output."""

import logging
from typing import Optional

from ..core.exceptions import DavMountError
from ..models import MountTarget
from .error_reporter import ErrorReporter
from .viewer_launcher import ViewerLauncher


class CompletionHandler:
    """Runs the success or failure continuation exactly once per run."""

    def __init__(
        self,
        error_reporter: ErrorReporter,
        viewer_launcher: Optional[ViewerLauncher] = None,
    ):
        self._error_reporter = error_reporter
        self._viewer_launcher = viewer_launcher
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def _mark_completed(self) -> None:
        if self._completed:
            raise RuntimeError("Run already completed")
        self._completed = True

    async def on_success(self, target: MountTarget) -> None:
        """Hand the mounted location to the viewer, if one is configured."""
        self._mark_completed()
        logging.info(f"Mount completed: {target.mount_uri}")
        if self._viewer_launcher is not None:
            await self._viewer_launcher.open_in_viewer(target.mount_uri)

    def on_failure(self, error: DavMountError) -> None:
        """Report ``error`` to the user."""
        self._mark_completed()
        logging.error(f"Run failed: {error}")
        self._error_reporter.report_error(error.primary, error.secondary)
