"""Mount Coordinator - drives one manifest from bytes to a mounted location."""

import logging
from typing import Optional

from ..core.exceptions import DavMountError, MountError
from ..core.run_state_machine import RunStateMachine
from ..models import MountTarget, RunState
from .completion_handler import CompletionHandler
from .document_source import DocumentSource
from .manifest import build_mount_target, parse_manifest
from .network_mount import BaseMounter, MountSession


class MountCoordinator:
    """
    Runs Load -> Parse -> Build -> Mount -> Complete as sequential awaited
    steps. Every stage either returns a value or raises a DavMountError; this
    class is the only place such an error is turned into a report, after
    which the run ends.
    """

    def __init__(
        self,
        mounter: BaseMounter,
        completion_handler: CompletionHandler,
        interactive: bool = True,
        state_machine: Optional[RunStateMachine] = None,
    ):
        self._mounter = mounter
        self._completion_handler = completion_handler
        self._interactive = interactive
        self._state_machine = state_machine or RunStateMachine()

    @property
    def state(self) -> RunState:
        return self._state_machine.state

    async def run(self, source: DocumentSource) -> RunState:
        """Process the manifest from ``source`` and return the final state."""
        self._state_machine.transition(RunState.LOADING)
        logging.info(f"Loading mount manifest from {source.describe()}")

        try:
            data = await source.load()
        except DavMountError as e:
            return self._fail(e, RunState.FAILED)

        try:
            manifest = parse_manifest(data)
        except DavMountError as e:
            return self._fail(e, RunState.INVALID)
        self._state_machine.transition(RunState.PARSED)

        try:
            target = build_mount_target(manifest)
        except DavMountError as e:
            return self._fail(e, RunState.INVALID)

        return await self.mount(target)

    async def mount(self, target: MountTarget) -> RunState:
        """Issue the single mount request for ``target`` and complete the run."""
        self._state_machine.transition(RunState.MOUNTING)

        session = MountSession(interactive=self._interactive)
        error: Optional[MountError] = None
        try:
            await self._mounter.mount(target.mount_uri, session)
        except MountError as e:
            error = e
        finally:
            session.release()

        if error is not None:
            return self._fail(error, RunState.FAILED)

        await self._completion_handler.on_success(target)
        return self._state_machine.transition(RunState.DONE)

    def _fail(self, error: DavMountError, state: RunState) -> RunState:
        self._completion_handler.on_failure(error)
        return self._state_machine.transition(state)
