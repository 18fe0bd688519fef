"""Local Document Source - reads a manifest file from disk."""

import asyncio
import logging
from pathlib import Path
from typing import Union

from ...core.exceptions import DocumentReadError
from .base_source import DocumentSource


class LocalDocumentSource(DocumentSource):
    """Reads the manifest synchronously, deferred to the next loop iteration."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> bytes:
        # Yield once so a local read suspends exactly like a remote fetch
        await asyncio.sleep(0)

        logging.info(f"Reading mount manifest: {self._path}")
        try:
            data = self._path.read_bytes()
        except OSError as e:
            logging.error(f"Could not read manifest {self._path}: {e}")
            raise DocumentReadError(str(self._path), e.strerror or str(e)) from e

        logging.debug(f"Read {len(data)} bytes from {self._path}")
        return data

    def describe(self) -> str:
        return str(self._path)
