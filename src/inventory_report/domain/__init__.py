"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the inventory value objects and the report pipeline that form the
core of the application.

Contents:
    * :mod:`.models` - Inventory records and report tree value objects
    * :mod:`.report` - Filter, sort, project and build steps
    * :mod:`.enums` - Domain enumerations (OutputFormat, ReportView)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat, ReportView
from .errors import ConfigurationError, InventorySourceError, ReportRenderError
from .models import InventoryItem, ReportDocument, ReportLine, ReportNode
from .report import (
    SHORT_DATE_FORMAT,
    build_report,
    format_generated_date,
    project,
    select_active,
    sort_by_category,
)

__all__ = [
    # Models
    "InventoryItem",
    "ReportDocument",
    "ReportLine",
    "ReportNode",
    # Report pipeline
    "SHORT_DATE_FORMAT",
    "build_report",
    "format_generated_date",
    "project",
    "select_active",
    "sort_by_category",
    # Enums
    "OutputFormat",
    "ReportView",
    # Errors
    "ConfigurationError",
    "InventorySourceError",
    "ReportRenderError",
]
