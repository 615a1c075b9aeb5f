"""Unit tests for DOM creation and SAX root sniffing."""

import io
import xml.sax

import pytest

from skillbench.contexts.markup.simple_xml import create_xml, parse_root_element


@pytest.mark.unit
def test_create_xml():
    """Test a single element with text and no declaration."""
    assert create_xml("root", "text") == "<root>text</root>"


@pytest.mark.unit
def test_create_xml_escapes_text():
    """Test escaping of special characters."""
    assert create_xml("root", "<R&D>") == "<root>&lt;R&amp;D&gt;</root>"


@pytest.mark.unit
def test_create_xml_invalid_tag():
    """Test that an invalid element name is rejected."""
    with pytest.raises(ValueError):
        create_xml("1bad tag", "text")


@pytest.mark.unit
def test_parse_root_element():
    """Test reading the first element's name from a stream."""
    document = b"<?xml version='1.0'?><articles><article><title>SAX</title></article></articles>"
    assert parse_root_element(io.BytesIO(document)) == "articles"


@pytest.mark.unit
def test_parse_root_element_keeps_prefix():
    """Test that an undeclared namespace prefix is returned as written."""
    assert parse_root_element(io.BytesIO(b"<soap:Envelope><soap:Body/></soap:Envelope>")) == "soap:Envelope"


@pytest.mark.unit
@pytest.mark.parametrize("document", [b"<a><b></a>", b"", b"<a>text"])
def test_parse_root_element_malformed(document):
    """Test that malformed documents raise SAXParseException."""
    with pytest.raises(xml.sax.SAXParseException):
        parse_root_element(io.BytesIO(document))
