"""Mount URI Builder - turns an http(s) manifest location into a GVfs dav location."""

import logging

from ...core.exceptions import UnsupportedSchemeError
from ...models import ManifestResult, MountTarget

HTTP_SCHEME_PREFIX = "http"
WEBDAV_SCHEME_MARKER = "dav"


def join_uri_path(base: str, path: str) -> str:
    """Join two location parts with exactly one ``/`` between them."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def to_webdav_location(mount_base: str) -> str:
    """Swap the literal ``http`` prefix for ``dav``.

    ``http://h`` becomes ``dav://h`` and ``https://h`` becomes ``davs://h``.
    """
    if not mount_base.startswith(HTTP_SCHEME_PREFIX):
        raise UnsupportedSchemeError(mount_base)
    return WEBDAV_SCHEME_MARKER + mount_base[len(HTTP_SCHEME_PREFIX):]


def build_mount_target(manifest: ManifestResult) -> MountTarget:
    """Derive the location to mount from a parsed manifest."""
    mount_uri = join_uri_path(to_webdav_location(manifest.mount_base), manifest.open_target)
    logging.info(f"URI: {mount_uri}")
    return MountTarget(mount_uri=mount_uri)
