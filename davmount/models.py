from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RunState(str, Enum):
    """
    Status for en enkelt mount-kørsel.

    Normal Workflow: Idle -> Loading -> Parsed -> Mounting -> Done
    Alternative: Loading -> Failed (fetch/read fejl), Loading/Parsed -> Invalid,
    Mounting -> Failed (mount fejl)
    """

    IDLE = "Idle"  # Intet startet endnu
    LOADING = "Loading"  # Manifest hentes eller læses
    PARSED = "Parsed"  # Manifest valideret
    INVALID = "Invalid"  # Manifest eller mount-URL ugyldig (terminal)
    MOUNTING = "Mounting"  # Mount request er sendt til subsystemet
    DONE = "Done"  # Mount lykkedes (terminal)
    FAILED = "Failed"  # Fetch eller mount fejlede (terminal)

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.INVALID, RunState.DONE, RunState.FAILED)


class ManifestResult(BaseModel):
    """The two fields extracted from a dav mount manifest."""

    model_config = ConfigDict(frozen=True)

    mount_base: str = Field(..., min_length=1, description="HTTP(S) location of the share")
    open_target: str = Field(..., min_length=1, description="Resource path relative to mount_base")


class MountTarget(BaseModel):
    """The WebDAV location handed to the mount subsystem."""

    model_config = ConfigDict(frozen=True)

    mount_uri: str = Field(..., min_length=1, description="dav:// or davs:// location to mount")
