from .manifest_parser import MANIFEST_NAMESPACE, parse_manifest
from .mount_uri_builder import WEBDAV_SCHEME_MARKER, build_mount_target, join_uri_path

__all__ = [
    "MANIFEST_NAMESPACE",
    "WEBDAV_SCHEME_MARKER",
    "build_mount_target",
    "join_uri_path",
    "parse_manifest",
]
