"""Bundled sample inventory used when no input file is given."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from inventory_report.domain.models import InventoryItem


def sample_inventory() -> list[InventoryItem]:
    """Return the demo inventory: thirteen items, one of them discontinued.

    Example:
        >>> items = sample_inventory()
        >>> len(items), sum(item.is_discontinued for item in items)
        (13, 1)
    """
    return [
        InventoryItem(101, "Laptop", "Electronics", 15, False, Decimal("999.99"), date(2025, 10, 20)),
        InventoryItem(102, "Mouse", "Electronics", 150, False, Decimal("15.50"), date(2025, 11, 1)),
        InventoryItem(103, "Keyboard", "Electronics", 80, False, Decimal("45.00"), date(2025, 9, 15)),
        InventoryItem(201, "T-Shirt", "Apparel", 250, False, Decimal("19.99"), date(2025, 8, 10)),
        InventoryItem(202, "Jeans", "Apparel", 45, False, Decimal("49.99"), date(2024, 12, 5)),
        InventoryItem(203, "Jacket", "Apparel", 10, False, Decimal("89.99"), date(2025, 7, 25)),
        InventoryItem(301, "Notebook", "Office", 300, False, Decimal("3.50"), date(2025, 5, 1)),
        InventoryItem(302, "Pen Set", "Office", 30, False, Decimal("12.99"), date(2025, 10, 15)),
        InventoryItem(303, "Monitor", "Electronics", 5, True, Decimal("299.99"), date(2025, 11, 5)),
        InventoryItem(401, "Coffee Maker", "Appliances", 60, False, Decimal("75.00"), date(2024, 11, 28)),
        InventoryItem(402, "Toaster", "Appliances", 15, False, Decimal("30.00"), date(2025, 10, 30)),
        InventoryItem(403, "Blender", "Appliances", 110, False, Decimal("45.99"), date(2025, 2, 14)),
        InventoryItem(501, "Socks", "Apparel", 50, False, Decimal("5.99"), date(2025, 3, 10)),
    ]


__all__ = ["sample_inventory"]
