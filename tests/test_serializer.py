"""XML rendering and preview truncation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from inventory_report.adapters.inventory.source import parse_inventory
from inventory_report.adapters.report.serializer import PREVIEW_ELLIPSIS, preview_report, serialize_report
from inventory_report.domain.errors import ReportRenderError
from inventory_report.domain.models import InventoryItem
from inventory_report.domain.report import build_report

EXPECTED_EXAMPLE = """\
<InventoryReport GeneratedDate="2024-01-01">
  <Item ID="3">
    <Name>Bolt</Name>
    <Category>A</Category>
    <Quantity>100</Quantity>
  </Item>
  <Item ID="1">
    <Name>Widget</Name>
    <Category>B</Category>
    <Quantity>10</Quantity>
  </Item>
</InventoryReport>"""


@pytest.mark.os_agnostic
def test_example_renders_indented_xml(example_items: list[InventoryItem], example_date: date) -> None:
    assert serialize_report(build_report(example_items, example_date)) == EXPECTED_EXAMPLE


@pytest.mark.os_agnostic
def test_empty_indent_renders_a_single_line(example_items: list[InventoryItem], example_date: date) -> None:
    text = serialize_report(build_report(example_items, example_date), indent="")

    assert "\n" not in text
    assert text.startswith('<InventoryReport GeneratedDate="2024-01-01"><Item ID="3"><Name>Bolt</Name>')


@pytest.mark.os_agnostic
def test_tab_indent_is_used_per_level(example_items: list[InventoryItem], example_date: date) -> None:
    text = serialize_report(build_report(example_items, example_date), indent="\t")

    assert "\n\t<Item" in text
    assert "\n\t\t<Name>" in text


@pytest.mark.os_agnostic
def test_empty_report_is_a_self_closing_root() -> None:
    assert serialize_report(build_report([], date(2024, 1, 1))) == '<InventoryReport GeneratedDate="2024-01-01" />'


@pytest.mark.os_agnostic
def test_xml_declaration_is_optional(example_items: list[InventoryItem], example_date: date) -> None:
    document = build_report(example_items, example_date)

    assert not serialize_report(document).startswith("<?xml")
    assert serialize_report(document, xml_declaration=True).startswith("<?xml version='1.0'")


@pytest.mark.os_agnostic
def test_special_characters_are_escaped() -> None:
    items = [InventoryItem(1, 'Nuts & "Bolts" <M6>', "R&D", 5)]

    text = serialize_report(build_report(items, date(2024, 1, 1)))

    assert "<Name>Nuts &amp; \"Bolts\" &lt;M6&gt;</Name>" in text
    assert "<Category>R&amp;D</Category>" in text


@pytest.mark.os_agnostic
def test_missing_text_fields_parse_back_as_empty() -> None:
    text = serialize_report(build_report([InventoryItem(2, None, None, 0)], date(2024, 1, 1)))

    item = ET.fromstring(text).find("Item")
    assert item is not None
    assert item.findtext("Name") == ""
    assert item.findtext("Category") == ""
    assert item.findtext("Quantity") == "0"


def _is_xml_char(char: str) -> bool:
    code = ord(char)
    return char in "\t\n\r" or 0x20 <= code <= 0xD7FF or 0xE000 <= code <= 0xFFFD or code >= 0x10000


@pytest.mark.os_agnostic
@given(
    names=st.lists(
        st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20),
        min_size=1,
        max_size=8,
    )
)
def test_parsed_xml_matches_report_lines(names: list[str]) -> None:
    """Names either survive a parse round trip unchanged or are rejected up front."""
    items = [InventoryItem(index, name, "C", index) for index, name in enumerate(names)]
    document = build_report(items, date(2024, 1, 1))

    if not all(_is_xml_char(char) for name in names for char in name):
        with pytest.raises(ReportRenderError, match="which XML cannot represent"):
            serialize_report(document, indent="")
        return

    root = ET.fromstring(serialize_report(document, indent=""))

    parsed = [(int(node.get("ID", "-1")), node.findtext("Name")) for node in root.iter("Item")]
    assert parsed == [(line.item_id, line.name) for line in document.lines()]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("bad", ["\x00", "\x01", "\x08", "\x0b", "\x1f", "\uFFFE"])
def test_control_characters_in_names_are_rejected(bad: str) -> None:
    document = build_report([InventoryItem(1, f"Bolt{bad}", "A", 1)], date(2024, 1, 1))

    with pytest.raises(ReportRenderError, match="Name contains"):
        serialize_report(document)


@pytest.mark.os_agnostic
def test_control_character_in_category_is_rejected() -> None:
    document = build_report([InventoryItem(1, "Bolt", "A\x07", 1)], date(2024, 1, 1))

    with pytest.raises(ReportRenderError, match="Category contains"):
        serialize_report(document)


@pytest.mark.os_agnostic
def test_control_character_in_generated_date_is_rejected() -> None:
    document = build_report([], date(2024, 1, 1), date_format="%Y\x1b%m")

    with pytest.raises(ReportRenderError, match="GeneratedDate"):
        serialize_report(document)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["a\r\nb", "a\rb", "\r", "line1\nline2\tend"])
def test_line_breaks_and_tabs_in_names_parse_back_unchanged(name: str) -> None:
    text = serialize_report(build_report([InventoryItem(1, name, "A", 1)], date(2024, 1, 1)))

    assert "\r" not in text
    assert ET.fromstring(text).findtext("Item/Name") == name


@pytest.mark.os_agnostic
def test_carriage_return_is_written_as_character_reference() -> None:
    text = serialize_report(build_report([InventoryItem(1, "a\r\nb", "A", 1)], date(2024, 1, 1)), indent="")

    assert "<Name>a&#13;\nb</Name>" in text


@pytest.mark.os_agnostic
def test_control_character_escaped_in_json_input_is_rejected() -> None:
    """JSON can carry characters that XML 1.0 cannot."""
    items = parse_inventory(b'[{"itemId": 1, "name": "Bolt\\u0001", "category": "A", "stockQuantity": 5}]')

    with pytest.raises(ReportRenderError, match="Name contains"):
        serialize_report(build_report(items, date(2024, 1, 1)))


# ======================== preview_report ========================


@pytest.mark.os_agnostic
def test_preview_truncates_long_text_with_ellipsis() -> None:
    text = "x" * 500

    preview = preview_report(text, 300)

    assert preview == "x" * 300 + PREVIEW_ELLIPSIS


@pytest.mark.os_agnostic
@pytest.mark.parametrize("length", [0, 1, 299, 300])
def test_preview_returns_short_text_unchanged(length: int) -> None:
    text = "y" * length

    assert preview_report(text, 300) == text


@pytest.mark.os_agnostic
@given(text=st.text(max_size=400), limit=st.integers(min_value=1, max_value=400))
def test_preview_is_a_prefix_of_the_text(text: str, limit: int) -> None:
    preview = preview_report(text, limit)

    if len(text) <= limit:
        assert preview == text
    else:
        assert preview.endswith(PREVIEW_ELLIPSIS)
        assert text.startswith(preview[: -len(PREVIEW_ELLIPSIS)])
        assert len(preview) == limit + len(PREVIEW_ELLIPSIS)
