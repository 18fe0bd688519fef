"""Resolve WebDAV mount descriptors into GVfs mounts."""

__version__ = "0.1.0"
