import pytest

from reqkit.domain.results import InvalidXmlError
from reqkit.domain.xmlfmt import XmlFormatOptions, format_xml, safe_parse_xml, try_parse_xml


@pytest.fixture(autouse=True)
def _default_indent(monkeypatch):
    monkeypatch.delenv("XML_INDENT", raising=False)


def test_pretty_prints_nested_elements():
    assert safe_parse_xml("<a><b>1</b><c/></a>") == "<a>\n    <b>1</b>\n    <c/>\n</a>"


def test_reindents_existing_whitespace():
    assert safe_parse_xml("<a>\n<b>1</b>   </a>") == "<a>\n    <b>1</b>\n</a>"


def test_keeps_declaration():
    out = safe_parse_xml('<?xml version="1.0" encoding="UTF-8"?><a><b/></a>')
    assert out == '<?xml version="1.0" encoding="UTF-8"?>\n<a>\n    <b/>\n</a>'


def test_options_indentation_and_line_separator():
    opts = XmlFormatOptions(indentation="  ", line_separator="\r\n")
    assert safe_parse_xml("<a><b>1</b></a>", opts) == "<a>\r\n  <b>1</b>\r\n</a>"


def test_strip_comments_option():
    opts = XmlFormatOptions(strip_comments=True)
    assert safe_parse_xml("<a><!-- note --><b>1</b></a>", opts) == "<a>\n    <b>1</b>\n</a>"


def test_indent_width_from_env(monkeypatch):
    monkeypatch.setenv("XML_INDENT", "2")
    assert safe_parse_xml("<a><b/></a>") == "<a>\n  <b/>\n</a>"


@pytest.mark.parametrize("value", ["<a>", "<a></b>", "plain text", ""])
def test_invalid_returns_input(value):
    assert safe_parse_xml(value) == value


def test_non_string_passes_through():
    assert safe_parse_xml(None) is None


def test_try_parse_reports_fallback():
    assert try_parse_xml("<a>").changed is False
    assert try_parse_xml("<a/>").changed is True


def test_strict_format_raises_with_code():
    with pytest.raises(InvalidXmlError) as exc:
        format_xml("<a><b></a>")
    assert exc.value.code == "invalid_xml"


def test_default_line_separator_is_newline():
    assert XmlFormatOptions().line_separator == "\n"
    assert "\r" not in safe_parse_xml("<a><b/></a>")
