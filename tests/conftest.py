"""
Pytest configuration og shared fixtures.
"""

import pytest

from davmount.dependencies import reset_singletons


MANIFEST_NS = "http://purl.org/NET/webdav/mount"


def make_manifest(body: str, ns: str = MANIFEST_NS, root: str = "mount") -> bytes:
    """Wrap ``body`` in a manifest root element."""
    return f'<{root} xmlns="{ns}">{body}</{root}>'.encode("utf-8")


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before hver test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def valid_manifest() -> bytes:
    return make_manifest(
        "<url>http://example.com/dav</url><open>docs/a.txt</open>"
    )
