from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from defusedxml import DefusedXmlException

from xmlvalue.errors import XMLParseError
from xmlvalue.tree import parse_document, parse_node, read_document

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_simple_text() -> None:
    node = parse_node("<data>5</data>")
    assert node.name == "data"
    assert node.text == "5"
    assert node.cdata is None
    assert node.children == []


def test_self_closing_element_has_no_text() -> None:
    node = parse_node("<do_want/>")
    assert node.text is None
    assert node.cdata is None


def test_whitespace_only_text_is_none_but_real_text_is_verbatim() -> None:
    root = parse_node("<root>\n  <a> padded </a>\n</root>")
    assert root.text is None
    assert root.children[0].text == " padded "


def test_cdata_kept_apart_from_text() -> None:
    node = parse_node("<note><![CDATA[<b>bold</b> & more]]></note>")
    assert node.text is None
    assert node.cdata == "<b>bold</b> & more"


def test_mixed_text_and_cdata() -> None:
    node = parse_node("<m>before<![CDATA[raw]]></m>")
    assert node.text == "before"
    assert node.cdata == "raw"


def test_attributes_and_children_preserve_order() -> None:
    root = parse_node('<r z="1" a="2"><x/><y/><x/></r>')
    assert list(root.attributes.items()) == [("z", "1"), ("a", "2")]
    assert [c.name for c in root.children] == ["x", "y", "x"]


def test_entities_are_decoded() -> None:
    assert parse_node("<t>a &lt; b &amp; c</t>").text == "a < b & c"


def test_parse_bytes_with_declaration() -> None:
    doc = parse_document('<?xml version="1.0" encoding="UTF-8"?><r>café</r>'.encode())
    assert doc.root.text == "café"


@pytest.mark.parametrize("raw", ["<open>", "<a></b>", "not xml", ""])
def test_malformed_xml_raises_parse_error(raw: str) -> None:
    with pytest.raises(XMLParseError):
        parse_node(raw)


def test_entity_expansion_is_refused() -> None:
    bomb = '<!DOCTYPE r [<!ENTITY a "aaaa"><!ENTITY b "&a;&a;">]><r>&b;</r>'
    with pytest.raises(XMLParseError) as excinfo:
        parse_node(bomb)
    assert isinstance(excinfo.value.__cause__, DefusedXmlException)


def test_read_document_from_file(tmp_path: Path) -> None:
    p = tmp_path / "conf.xml"
    p.write_text("<conf><port>80</port></conf>\n", encoding="utf-8")
    doc = read_document(p)
    assert doc.root.find("port").text == "80"


def test_read_document_error_mentions_file(tmp_path: Path) -> None:
    p = tmp_path / "broken.xml"
    p.write_text("<conf>", encoding="utf-8")
    with pytest.raises(XMLParseError, match="broken.xml"):
        read_document(p)
