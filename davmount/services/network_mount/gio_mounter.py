"""GVfs Network Mounter - mounts dav:// locations with ``gio mount``."""

import asyncio
import logging

from ...core.exceptions import MountError
from .base_mounter import BaseMounter
from .mount_session import MountSession


class GioMounter(BaseMounter):
    """Linux GVfs mount implementation."""

    def __init__(self, gio_command: str = "gio"):
        self._gio_command = gio_command

    async def mount(self, location: str, session: MountSession) -> None:
        """Mount the enclosing volume of ``location`` using ``gio mount``.

        An interactive session inherits the terminal so gio can ask for a
        username and password itself; otherwise stdin is closed and gio fails
        on any credential challenge.
        """
        cmd = [self._gio_command, "mount", location]
        logging.info(f"Attempting GVfs mount: {location}")

        if session.interactive:
            stdin, stdout = None, None
        else:
            stdin, stdout = asyncio.subprocess.DEVNULL, asyncio.subprocess.PIPE

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd, stdin=stdin, stdout=stdout, stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            logging.error(f"Could not start {self._gio_command}: {e}")
            raise MountError(f"Could not run {self._gio_command}: {e.strerror or e}") from e

        _, stderr = await process.communicate()

        if process.returncode == 0:
            logging.info(f"Successfully mounted {location}")
            return

        error_msg = self._clean_error(stderr.decode(errors="replace") if stderr else "", location)
        logging.error(f"Mount failed for {location}: {error_msg or 'Unknown error'}")
        raise MountError(error_msg or None)

    @staticmethod
    def _clean_error(message: str, location: str) -> str:
        """Strip gio's ``gio: <location>: `` prefix from an error line."""
        message = message.strip()
        for prefix in (f"gio: {location}: ", "gio: "):
            if message.startswith(prefix):
                return message[len(prefix):].strip()
        return message

    def get_platform_name(self) -> str:
        """Get platform name for logging."""
        return "GVfs"
