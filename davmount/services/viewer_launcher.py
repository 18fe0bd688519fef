"""Viewer Launcher - opens a mounted location in the desktop file manager."""

import asyncio
import logging
import shlex


class ViewerLauncher:
    """Best-effort ``open_in_viewer``; failures are logged, never raised."""

    def __init__(self, command: str = "xdg-open"):
        self._command = shlex.split(command)

    @property
    def is_configured(self) -> bool:
        return bool(self._command)

    async def open_in_viewer(self, location: str) -> bool:
        if not self._command:
            logging.warning(f"No viewer command configured, not opening {location}")
            return False

        cmd = [*self._command, location]
        logging.info(f"Opening {location} with {self._command[0]}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate()
        except OSError as e:
            logging.warning(f"Could not start viewer {self._command[0]}: {e}")
            return False

        if process.returncode != 0:
            error_msg = stderr.decode(errors="replace").strip() if stderr else "Unknown error"
            logging.warning(f"Viewer exited with {process.returncode} for {location}: {error_msg}")
            return False
        return True
