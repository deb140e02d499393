from lxml import etree as ET
import pytest

from ods_styles import InvalidStyleError, XMLContext
from ods_styles.rendering.xml_utils import OFFICE_NS, q
from ods_styles.styles import (
    NumberFormat,
    PageLayoutStyle,
    TableCellStyle,
    TableRowStyle,
    TableStyle,
    child_cell_style,
    cell_style,
    data_style,
)


def _ns():
    return {
        "style": "urn:oasis:names:tc:opendocument:xmlns:style:1.0",
        "number": "urn:oasis:names:tc:opendocument:xmlns:datastyle:1.0",
        "table": "urn:oasis:names:tc:opendocument:xmlns:table:1.0",
        "fo": "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0",
    }


def _render(style, ctx=None):
    sink = ET.Element(q(OFFICE_NS, "automatic-styles"))
    style.append_xml(ctx or XMLContext(), sink)
    assert len(sink) == 1
    return sink[0]


def _attr(el, prefix, local):
    return el.get(f"{{{_ns()[prefix]}}}{local}")


def test_number_style_stamps_locale_and_decimals():
    el = _render(data_style("NUM2_DS", decimals=2, grouping=True), XMLContext(locale=("fr", "FR")))
    assert el.tag == f"{{{_ns()['number']}}}number-style"
    assert _attr(el, "style", "name") == "NUM2_DS"
    assert _attr(el, "number", "language") == "fr"
    assert _attr(el, "number", "country") == "FR"
    num = el.find("number:number", _ns())
    assert _attr(num, "number", "decimal-places") == "2"
    assert _attr(num, "number", "min-decimal-places") == "2"
    assert _attr(num, "number", "grouping") == "true"


def test_percentage_style_has_trailing_percent():
    el = _render(data_style("PCT1_DS", kind="percentage", decimals=1))
    assert el.tag == f"{{{_ns()['number']}}}percentage-style"
    texts = [t.text for t in el.findall("number:text", _ns())]
    assert texts == ["%"]


def test_negative_cash_style_uses_parentheses():
    el = _render(data_style("CASH2_NEG_DS", prefix="(", suffix=")", display_factor=-1, grouping=True))
    children = [ET.QName(c).localname for c in el]
    assert children == ["text", "number", "text"]
    assert el[0].text == "(" and el[2].text == ")"
    assert _attr(el[1], "number", "display-factor") == "-1"


def test_negative_color_maps_negatives_to_a_coloured_style():
    sink = ET.Element(q(OFFICE_NS, "automatic-styles"))
    style = data_style("NUM1_DS", decimals=1, negative_color="#FF0000")
    main = style.append_xml(XMLContext(), sink)
    assert [_attr(el, "style", "name") for el in sink] == ["NUM1_DS-neg", "NUM1_DS"]
    neg = sink[0]
    assert neg.tag == f"{{{_ns()['number']}}}number-style"
    assert _attr(neg.find("style:text-properties", _ns()), "fo", "color") == "#FF0000"
    assert [t.text for t in neg.findall("number:text", _ns())] == ["-"]
    assert main is sink[1]
    style_map = main[-1]
    assert ET.QName(style_map).localname == "map"
    assert _attr(style_map, "style", "condition") == "value()<0"
    assert _attr(style_map, "style", "apply-style-name") == "NUM1_DS-neg"


def test_negative_color_keeps_parentheses_without_sign():
    sink = ET.Element(q(OFFICE_NS, "automatic-styles"))
    data_style("CASH2_NEG_DS", prefix="(", suffix=")", display_factor=-1,
               negative_color="#FF0000").append_xml(XMLContext(), sink)
    texts = [t.text for t in sink[0].findall("number:text", _ns())]
    assert texts == ["(", ")"]


def test_cell_style_serialization():
    el = _render(cell_style("HeaderCell", background_color="#D9D9D9", font_weight="bold"))
    assert _attr(el, "style", "family") == "table-cell"
    assert _attr(el, "style", "parent-style-name") is None
    cell_props = el.find("style:table-cell-properties", _ns())
    assert _attr(cell_props, "fo", "background-color") == "#D9D9D9"
    text_props = el.find("style:text-properties", _ns())
    assert _attr(text_props, "fo", "font-weight") == "bold"


def test_child_cell_style_references_parent_and_data_style():
    child = child_cell_style(cell_style("Base"), data_style("D"))
    el = _render(child)
    assert child.hidden
    assert _attr(el, "style", "name") == "Base@@D"
    assert _attr(el, "style", "parent-style-name") == "Base"
    assert _attr(el, "style", "data-style-name") == "D"


def test_row_table_and_page_layout_styles():
    row = _render(TableRowStyle("ro1", height="1cm"))
    assert _attr(row.find("style:table-row-properties", _ns()), "style", "row-height") == "1cm"
    table = _render(TableStyle("ta1", "Page"))
    assert _attr(table, "style", "master-page-name") == "Page"
    layout = _render(PageLayoutStyle("PL", print_orientation="landscape", header_min_height="1cm"))
    props = layout.find("style:page-layout-properties", _ns())
    assert _attr(props, "style", "print-orientation") == "landscape"
    hf = layout.find("style:header-style/style:header-footer-properties", _ns())
    assert _attr(hf, "fo", "min-height") == "1cm"


@pytest.mark.parametrize("factory", [
    lambda: data_style(""),
    lambda: data_style("D", kind="fraction"),
    lambda: data_style("D", decimals=-1),
    lambda: NumberFormat(decimal_places=True),
    lambda: data_style("D", negative_color="red"),
    lambda: cell_style("   "),
    lambda: cell_style("C", background_color="red"),
    lambda: TableCellStyle(None),  # type: ignore[arg-type]
])
def test_factories_validate(factory):
    with pytest.raises(InvalidStyleError):
        factory()


def test_invalid_style_error_is_a_value_error():
    with pytest.raises(ValueError):
        data_style("")


def test_styles_are_immutable():
    style = cell_style("C")
    with pytest.raises(AttributeError):
        style.name = "D"  # type: ignore[misc]
