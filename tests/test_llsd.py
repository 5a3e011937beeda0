import pytest

from sluatypes.document import MapNode
from sluatypes.errors import CatalogueFormatError
from sluatypes.llsd import clean_text, parse_keywords_xml, unescape_entities
from tests._shared_cases import KEYWORDS_XML


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("plain text", "plain text"),
        ("collapse    four  spaces", "collapse four spaces"),
        ("line one\\nline two", "line one\nline two"),
        ("raw\nnewline dropped", "rawnewline dropped"),
        ("a &lt;b&gt; &amp;amp; c", "a <b> &amp; c"),
        ("quote &quot;x&quot; and &#39;y&#39;", "quote \"x\" and 'y'"),
        ("numeric &#65;&#x42;", "numeric AB"),
        ("a &amp;#60; b", "a &#60; b"),
        ("a &amp;#x3C; b", "a &#x3C; b"),
        ("indented\n               continuation", "indented continuation"),
    ],
)
def test_clean_text_golden(raw: str, expected: str) -> None:
    assert clean_text(raw) == expected


def test_unescape_entities_decodes_once() -> None:
    assert unescape_entities("&amp;lt;") == "&lt;"
    assert unescape_entities("&amp;#39;") == "&#39;"
    assert unescape_entities("&amp;#60;&#60;") == "&#60;<"


def test_unescape_entities_keeps_out_of_range_reference() -> None:
    assert unescape_entities("&#x110000;") == "&#x110000;"


def test_parse_keywords_xml_returns_root_map() -> None:
    root = parse_keywords_xml(KEYWORDS_XML)

    assert isinstance(root, MapNode)
    assert [name for name, _ in root.entries] == [
        "llsd-lsl-syntax-version",
        "constants",
        "events",
        "functions",
        "types",
    ]
    functions = root.get("functions")
    assert isinstance(functions, MapNode)
    say = functions.get("llSay")
    assert isinstance(say, MapNode)
    assert say.get_text("return") == "void"


def test_parse_keywords_xml_normalizes_text() -> None:
    root = parse_keywords_xml(KEYWORDS_XML)
    constants = root.get("constants")
    assert isinstance(constants, MapNode)
    debug = constants.get("DEBUG_CHANNEL")
    assert isinstance(debug, MapNode)

    assert debug.get_text("tooltip") == "Chat channel reserved for script debugging and error messages."


def test_parse_keywords_xml_decodes_xml_entities() -> None:
    source = "<llsd><map><key>a</key><string>x &amp;lt; y</string></map></llsd>"

    root = parse_keywords_xml(source)

    # SAX decodes &amp; to a literal "&lt;", which text normalization decodes once more.
    assert root.get_text("a") == "x < y"


def test_parse_keywords_xml_rejects_malformed_markup() -> None:
    with pytest.raises(CatalogueFormatError, match="Malformed keywords XML"):
        parse_keywords_xml("<llsd><map></llsd>")


def test_parse_keywords_xml_requires_root_map() -> None:
    with pytest.raises(CatalogueFormatError, match="does not start with a <map>"):
        parse_keywords_xml("<llsd><array></array></llsd>")


def test_parse_keywords_xml_requires_llsd_root() -> None:
    with pytest.raises(CatalogueFormatError, match="no <llsd>"):
        parse_keywords_xml("<map><key>a</key><string>b</string></map>")
