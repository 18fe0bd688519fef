"""
Document Source Module

Yields the raw bytes of a mount manifest. Both variants expose the same
awaitable ``load()`` so the rest of the pipeline never branches on where
the manifest came from.

Components:
- DocumentSource: Abstract base class
- LocalDocumentSource: Reads a file from disk on the next loop iteration
- RemoteDocumentSource: Issues a single HTTP GET with httpx
- create_document_source: Picks the variant from the CLI arguments
"""

from .base_source import DocumentSource
from .local_source import LocalDocumentSource
from .remote_source import RemoteDocumentSource
from .source_factory import create_document_source

__all__ = [
    "DocumentSource",
    "LocalDocumentSource",
    "RemoteDocumentSource",
    "create_document_source",
]
