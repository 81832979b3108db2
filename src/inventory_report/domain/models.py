"""Immutable value objects for inventory records and report documents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

#: Tag names of the report document tree.
ROOT_TAG = "InventoryReport"
ITEM_TAG = "Item"
GENERATED_DATE_ATTRIBUTE = "GeneratedDate"
ID_ATTRIBUTE = "ID"
NAME_TAG = "Name"
CATEGORY_TAG = "Category"
QUANTITY_TAG = "Quantity"


@dataclass(frozen=True, slots=True)
class InventoryItem:
    """A single stocked item as supplied by the caller.

    Only ``item_id``, ``name``, ``category``, ``stock_quantity`` and
    ``is_discontinued`` take part in the report. ``unit_price`` and
    ``last_restock_date`` are carried for completeness and never read by
    the report pipeline.

    Example:
        >>> item = InventoryItem(item_id=101, name="Laptop", category="Electronics", stock_quantity=15)
        >>> item.is_discontinued
        False
    """

    item_id: int
    name: str | None
    category: str | None
    stock_quantity: int
    is_discontinued: bool = False
    unit_price: Decimal = Decimal("0")
    last_restock_date: date | None = None


@dataclass(frozen=True, slots=True)
class ReportLine:
    """The four fields of an inventory item that appear in the report."""

    item_id: int
    name: str
    category: str
    quantity: int


@dataclass(frozen=True, slots=True)
class ReportNode:
    """Named node of the report tree with ordered attributes and children.

    Nodes are immutable so two trees built from equal input compare equal.

    Example:
        >>> node = ReportNode("Name", text="Bolt")
        >>> node == ReportNode("Name", text="Bolt")
        True
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    text: str | None = None
    children: tuple[ReportNode, ...] = ()

    def attribute(self, name: str) -> str | None:
        """Return the value of attribute ``name`` or None when absent."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def child(self, tag: str) -> ReportNode | None:
        """Return the first child with ``tag`` or None."""
        for node in self.children:
            if node.tag == tag:
                return node
        return None


@dataclass(frozen=True, slots=True)
class ReportDocument:
    """Inventory report tree rooted at an ``InventoryReport`` node."""

    root: ReportNode

    @property
    def generated_date(self) -> str:
        return self.root.attribute(GENERATED_DATE_ATTRIBUTE) or ""

    @property
    def items(self) -> tuple[ReportNode, ...]:
        return tuple(node for node in self.root.children if node.tag == ITEM_TAG)

    def lines(self) -> list[ReportLine]:
        """Read the ``Item`` nodes back as report lines, in document order."""
        return [_line_from_node(node) for node in self.items]


def _child_text(node: ReportNode, tag: str) -> str:
    found = node.child(tag)
    if found is None or found.text is None:
        return ""
    return found.text


def _line_from_node(node: ReportNode) -> ReportLine:
    return ReportLine(
        item_id=int(node.attribute(ID_ATTRIBUTE) or 0),
        name=_child_text(node, NAME_TAG),
        category=_child_text(node, CATEGORY_TAG),
        quantity=int(_child_text(node, QUANTITY_TAG) or 0),
    )


__all__ = [
    "CATEGORY_TAG",
    "GENERATED_DATE_ATTRIBUTE",
    "ID_ATTRIBUTE",
    "ITEM_TAG",
    "InventoryItem",
    "NAME_TAG",
    "QUANTITY_TAG",
    "ROOT_TAG",
    "ReportDocument",
    "ReportLine",
    "ReportNode",
]
