"""Document Source Factory - maps the CLI location and remote flag to a source."""

from ...config import Settings
from .base_source import DocumentSource
from .local_source import LocalDocumentSource
from .remote_source import RemoteDocumentSource


def create_document_source(location: str, remote: bool, settings: Settings) -> DocumentSource:
    """Create the document source variant selected by ``remote``."""
    if remote:
        return RemoteDocumentSource(
            location,
            timeout=settings.http_timeout_seconds,
            follow_redirects=settings.http_follow_redirects,
        )
    return LocalDocumentSource(location)
