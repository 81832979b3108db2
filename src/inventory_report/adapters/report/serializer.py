"""XML rendering of report documents via ``xml.etree.ElementTree``."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from inventory_report.domain.errors import ReportRenderError
from inventory_report.domain.models import ReportDocument, ReportNode

#: Marker appended to truncated previews.
PREVIEW_ELLIPSIS = "..."

# Complement of the XML 1.0 ``Char`` production.
_NOT_XML_CHAR = re.compile("[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _checked(value: str, where: str) -> str:
    match = _NOT_XML_CHAR.search(value)
    if match is not None:
        raise ReportRenderError(f"{where} contains {match.group()!r}, which XML cannot represent")
    return value


def _to_element(node: ReportNode) -> ET.Element:
    attributes = {name: _checked(value, f"{node.tag}/@{name}") for name, value in node.attributes}
    element = ET.Element(node.tag, attributes)
    if node.text is not None:
        element.text = _checked(node.text, node.tag)
    for child in node.children:
        element.append(_to_element(child))
    return element


def serialize_report(document: ReportDocument, *, indent: str = "  ", xml_declaration: bool = False) -> str:
    """Render ``document`` as XML text.

    Carriage returns in text are written as ``&#13;`` so a parser reads them
    back instead of folding ``\\r\\n`` into ``\\n``.

    Args:
        document: Report tree built by the domain.
        indent: Whitespace per nesting level; empty string renders on one line.
        xml_declaration: Prefix the text with an ``<?xml ...?>`` declaration.

    Returns:
        Unicode XML text. Attribute order and child order follow the tree.

    Raises:
        ReportRenderError: If a name, category or attribute holds a character
            outside the XML 1.0 character range (e.g. ``\\x01``).

    Example:
        >>> from datetime import date
        >>> from inventory_report.domain import InventoryItem, build_report
        >>> doc = build_report([InventoryItem(3, "Bolt", "A", 100)], date(2024, 1, 1))
        >>> print(serialize_report(doc))
        <InventoryReport GeneratedDate="2024-01-01">
          <Item ID="3">
            <Name>Bolt</Name>
            <Category>A</Category>
            <Quantity>100</Quantity>
          </Item>
        </InventoryReport>
    """
    root = _to_element(document.root)
    if indent:
        ET.indent(root, space=indent)
    # ElementTree already escapes CR inside attributes; element text is left raw.
    text = ET.tostring(root, encoding="unicode", xml_declaration=xml_declaration)
    return text.replace("\r", "&#13;")


def preview_report(text: str, limit: int) -> str:
    """Return the first ``limit`` characters of ``text`` with an ellipsis.

    Text no longer than ``limit`` is returned unchanged.

    Example:
        >>> preview_report("<InventoryReport />", 8)
        '<Invento...'
        >>> preview_report("<a />", 300)
        '<a />'
    """
    if len(text) <= limit:
        return text
    return text[:limit] + PREVIEW_ELLIPSIS


__all__ = [
    "PREVIEW_ELLIPSIS",
    "preview_report",
    "serialize_report",
]
