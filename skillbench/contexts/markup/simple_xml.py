"""
Minimal XML helpers: build a one-element document, sniff a root element.
"""

import xml.sax
from typing import BinaryIO, Union

from lxml import etree

from skillbench.contexts.markup.logger import _log_debug


def create_xml(tag_name: str, text: str) -> str:
    """
    Serialize a document holding a single element with a text node.

    Special characters in text are escaped; no XML declaration is emitted.

    Example:
        >>> create_xml("root", "<R&D>")
        '<root>&lt;R&amp;D&gt;</root>'

    Raises:
        ValueError: If tag_name is not a valid XML name
    """
    element = etree.Element(tag_name)
    element.text = text
    return etree.tostring(element, encoding="unicode")


class _RootElementHandler(xml.sax.ContentHandler):
    """Remembers the qualified name of the first element."""

    def __init__(self):
        super().__init__()
        self.root_name = ""
        self._found = False

    def startElement(self, name, attrs):
        if not self._found:
            self.root_name = name
            self._found = True


def parse_root_element(source: Union[BinaryIO, str]) -> str:
    """
    Stream an XML document and return its root element's qualified name.

    The whole document is parsed, so it must be well-formed, but nothing is
    kept in memory beyond the root name. Namespace prefixes are returned as
    written and need not be declared.

    Args:
        source: Binary stream or file path

    Raises:
        xml.sax.SAXParseException: If the document is not well-formed
    """
    handler = _RootElementHandler()
    xml.sax.parse(source, handler)
    _log_debug(f"Root element: {handler.root_name}")
    return handler.root_name
