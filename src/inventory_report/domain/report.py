"""Pure inventory report pipeline: filter, sort, project, build.

No I/O and no clock access; the caller supplies the generation timestamp.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from .models import (
    CATEGORY_TAG,
    GENERATED_DATE_ATTRIBUTE,
    ID_ATTRIBUTE,
    ITEM_TAG,
    NAME_TAG,
    QUANTITY_TAG,
    ROOT_TAG,
    InventoryItem,
    ReportDocument,
    ReportLine,
    ReportNode,
)

#: Default ``GeneratedDate`` format (ISO short date).
SHORT_DATE_FORMAT = "%Y-%m-%d"


def select_active(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Keep items that are not discontinued, in input order.

    Example:
        >>> kept = select_active([InventoryItem(1, "A", "x", 1), InventoryItem(2, "B", "x", 1, True)])
        >>> [item.item_id for item in kept]
        [1]
    """
    return [item for item in items if not item.is_discontinued]


def _category_key(item: InventoryItem) -> str:
    return item.category or ""


def sort_by_category(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Order items by ascending category; equal categories keep input order.

    Missing categories sort as the empty string.

    Example:
        >>> ordered = sort_by_category([InventoryItem(1, "A", "b", 1), InventoryItem(2, "B", None, 1)])
        >>> [item.item_id for item in ordered]
        [2, 1]
    """
    return sorted(items, key=_category_key)


def project(item: InventoryItem) -> ReportLine:
    """Extract the report fields of ``item``; missing texts become empty strings."""
    return ReportLine(
        item_id=item.item_id,
        name=item.name or "",
        category=item.category or "",
        quantity=item.stock_quantity,
    )


def format_generated_date(generated_at: date | datetime, date_format: str = SHORT_DATE_FORMAT) -> str:
    """Render the ``GeneratedDate`` attribute value.

    Example:
        >>> format_generated_date(date(2024, 1, 1))
        '2024-01-01'
        >>> format_generated_date(datetime(2024, 1, 31, 17, 5), "%m/%d/%Y")
        '01/31/2024'
    """
    return generated_at.strftime(date_format)


def _item_node(line: ReportLine) -> ReportNode:
    return ReportNode(
        ITEM_TAG,
        attributes=((ID_ATTRIBUTE, str(line.item_id)),),
        children=(
            ReportNode(NAME_TAG, text=line.name),
            ReportNode(CATEGORY_TAG, text=line.category),
            ReportNode(QUANTITY_TAG, text=str(line.quantity)),
        ),
    )


def build_report(
    items: Sequence[InventoryItem],
    generated_at: date | datetime,
    *,
    date_format: str = SHORT_DATE_FORMAT,
) -> ReportDocument:
    """Build the inventory report document for ``items``.

    Discontinued items are dropped, the rest are stably sorted by category
    and projected to their ID, name, category and quantity.

    Args:
        items: Inventory records; only read, never modified. May be empty.
        generated_at: Timestamp recorded in the ``GeneratedDate`` attribute.
        date_format: ``strftime`` pattern for ``GeneratedDate``.

    Returns:
        A new document; equal arguments always produce equal documents.

    Example:
        >>> doc = build_report(
        ...     [
        ...         InventoryItem(1, "Widget", "B", 10),
        ...         InventoryItem(2, "Gadget", "A", 5, is_discontinued=True),
        ...         InventoryItem(3, "Bolt", "A", 100),
        ...     ],
        ...     date(2024, 1, 1),
        ... )
        >>> [line.item_id for line in doc.lines()]
        [3, 1]
        >>> doc.generated_date
        '2024-01-01'
    """
    lines = [project(item) for item in sort_by_category(select_active(items))]
    root = ReportNode(
        ROOT_TAG,
        attributes=((GENERATED_DATE_ATTRIBUTE, format_generated_date(generated_at, date_format)),),
        children=tuple(_item_node(line) for line in lines),
    )
    return ReportDocument(root=root)


__all__ = [
    "SHORT_DATE_FORMAT",
    "build_report",
    "format_generated_date",
    "project",
    "select_active",
    "sort_by_category",
]
