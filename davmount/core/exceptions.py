# davmount/core/exceptions.py
from typing import Optional


class InvalidTransitionError(Exception):
    """Raised when a run state transition is not allowed."""
    def __init__(self, from_state: str, to_state: str):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid run state transition: "
            f"Cannot move from '{from_state}' to '{to_state}'."
        )


class DavMountError(Exception):
    """Base exception for every terminal failure of a mount run.

    ``primary`` is the short headline shown to the user, ``secondary`` the
    optional detail line underneath it.
    """

    primary = "Error mounting WebDAV"

    def __init__(self, secondary: Optional[str] = None):
        self.secondary = secondary
        message = self.primary if not secondary else f"{self.primary}: {secondary}"
        super().__init__(message)


class FetchError(DavMountError):
    """Raised when the manifest could not be fetched over HTTP."""

    primary = "HTTP Error"

    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status = status
        self.reason = reason
        if status is None:
            detail = reason
        else:
            detail = f"{status} {reason}".strip() if reason else str(status)
        super().__init__(detail)


class DocumentReadError(DavMountError):
    """Raised when a local manifest file is missing or unreadable."""

    primary = "Could not read mount file"

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        super().__init__(f"{path}: {reason}" if reason else path)


class MalformedXmlError(DavMountError):
    """Raised when the manifest bytes are not well-formed XML."""

    primary = "Could not parse xml"


class EmptyDocumentError(DavMountError):
    """Raised when the manifest has no root element or an empty root."""

    primary = "XML Document empty"


class SchemaMismatchError(DavMountError):
    """Raised when the root element is not a dav mount element."""

    primary = "Not a valid dav mount xml"


class IncompleteManifestError(DavMountError):
    """Raised when the url or open element is missing."""

    primary = "Invalid mount spec"


class UnsupportedSchemeError(DavMountError):
    """Raised when the mount base is not an http(s) location."""

    primary = "Unsupported mount location"

    def __init__(self, mount_base: str):
        self.mount_base = mount_base
        super().__init__(mount_base)


class MountError(DavMountError):
    """Raised by the mount subsystem when mounting fails."""

    primary = "Error during mount"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(detail)
