"""
Manifest Parser - validates a dav mount manifest and extracts its fields.

A manifest looks like::

    <mount xmlns="http://purl.org/NET/webdav/mount">
      <url>http://example.com/dav</url>
      <open>docs/a.txt</open>
    </mount>

Validation runs in a fixed order and stops at the first failure:

1. well-formed XML                      -> MalformedXmlError
2. a root element with some content     -> EmptyDocumentError
3. root is ``mount`` in the namespace   -> SchemaMismatchError
4. both ``url`` and ``open`` captured   -> IncompleteManifestError

Duplicate ``url`` or ``open`` elements are allowed and the LAST one wins.
Existing manifests rely on plain document-order reassignment, so this is
kept deliberately and only logged as a warning.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from lxml import etree

from ...core.exceptions import (
    EmptyDocumentError,
    IncompleteManifestError,
    MalformedXmlError,
    SchemaMismatchError,
)
from ...models import ManifestResult

MANIFEST_NAMESPACE = "http://purl.org/NET/webdav/mount"


def _create_parser() -> etree.XMLParser:
    # Blank text nodes and CDATA sections are not preserved; never recover
    return etree.XMLParser(
        remove_blank_text=True,
        strip_cdata=True,
        ns_clean=True,
        compact=True,
        recover=False,
        resolve_entities=False,
        no_network=True,
    )


@contextmanager
def _manifest_document(data: bytes) -> Iterator[etree._Element]:
    """Parse ``data`` and yield the root element.

    The tree is released when the block exits, whichever way it exits.
    """
    if not data or not data.strip():
        raise EmptyDocumentError()

    try:
        root = etree.fromstring(data, parser=_create_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedXmlError(str(e)) from e

    try:
        yield root
    finally:
        root.clear()
        del root
        logging.debug("Released manifest document")


def _is_element(node) -> bool:
    # Comments and processing instructions have a non-string tag
    return isinstance(node.tag, str)


def _has_name_ns(node: etree._Element, name: str, ns_href: str) -> bool:
    """Name is case-sensitive, namespace URI is compared case-insensitively."""
    qname = etree.QName(node)
    if qname.localname != name:
        return False
    return qname.namespace is not None and qname.namespace.lower() == ns_href.lower()


def _is_empty(root: etree._Element) -> bool:
    return len(root) == 0 and not (root.text and root.text.strip())


def _text_content(node: etree._Element) -> Optional[str]:
    text = "".join(node.itertext()).strip()
    return text or None


def parse_manifest(data: bytes) -> ManifestResult:
    """Validate manifest ``data`` and return the extracted fields.

    Raises:
        MalformedXmlError: The bytes are not well-formed XML.
        EmptyDocumentError: No root element, or a root without content.
        SchemaMismatchError: Root is not ``mount`` in the manifest namespace.
        IncompleteManifestError: ``url`` or ``open`` is missing or empty.
    """
    with _manifest_document(data) as root:
        if _is_empty(root):
            raise EmptyDocumentError()

        if not _has_name_ns(root, "mount", MANIFEST_NAMESPACE):
            logging.warning(f"Unexpected manifest root element: {root.tag}")
            raise SchemaMismatchError(root.tag)

        mount_base: Optional[str] = None
        open_target: Optional[str] = None
        url_count = open_count = 0

        for node in root:
            if not _is_element(node):
                continue

            # Last one wins, an empty element resets the captured value
            if _has_name_ns(node, "url", MANIFEST_NAMESPACE):
                mount_base = _text_content(node)
                url_count += 1
            elif _has_name_ns(node, "open", MANIFEST_NAMESPACE):
                open_target = _text_content(node)
                open_count += 1

        if url_count > 1 or open_count > 1:
            logging.warning(
                f"Manifest has {url_count} url and {open_count} open elements, "
                f"using the last of each"
            )

        if mount_base is None or open_target is None:
            missing = [
                name
                for name, value in (("url", mount_base), ("open", open_target))
                if value is None
            ]
            raise IncompleteManifestError(f"missing {', '.join(missing)}")

        result = ManifestResult(mount_base=mount_base, open_target=open_target)

    logging.info(f"Manifest parsed: url={result.mount_base} open={result.open_target}")
    return result
