"""Build XML inventory reports from stock records.

Library use needs only the pure pipeline and the XML renderer:

    >>> from datetime import date
    >>> from inventory_report import InventoryItem, build_report, serialize_report
    >>> items = [InventoryItem(1, "Widget", "B", 10), InventoryItem(2, "Gadget", "A", 5, is_discontinued=True)]
    >>> print(serialize_report(build_report(items, date(2024, 1, 1)), indent=""))
    <InventoryReport GeneratedDate="2024-01-01"><Item ID="1"><Name>Widget</Name><Category>B</Category><Quantity>10</Quantity></Item></InventoryReport>
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.loader import get_config
from .adapters.report.serializer import serialize_report
from .domain.models import InventoryItem, ReportDocument, ReportLine, ReportNode
from .domain.report import build_report

__all__ = [
    "InventoryItem",
    "ReportDocument",
    "ReportLine",
    "ReportNode",
    "build_report",
    "get_config",
    "print_info",
    "serialize_report",
]
