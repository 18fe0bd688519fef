"""Mount Session - handle for one outstanding mount attempt."""

import itertools
import logging

_session_ids = itertools.count(1)


class MountSession:
    """Opaque handle the mount subsystem may route credential prompts through.

    Created right before the mount request and released exactly once when
    the request completes.
    """

    def __init__(self, interactive: bool = True):
        self._id = next(_session_ids)
        self._interactive = interactive
        self._released = False
        logging.debug(f"Mount session {self._id} created (interactive={interactive})")

    @property
    def session_id(self) -> int:
        return self._id

    @property
    def interactive(self) -> bool:
        return self._interactive

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            raise RuntimeError(f"Mount session {self._id} already released")
        self._released = True
        logging.debug(f"Mount session {self._id} released")
