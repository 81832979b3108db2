"""Report adapter - XML rendering, persistence, settings and clock.

Contents:
    * :mod:`.serializer` - Report tree to XML text and previews
    * :mod:`.storage` - Atomic file persistence
    * :mod:`.settings` - ``[report]`` configuration model
    * :mod:`.clock` - Generation timestamp source
"""

from __future__ import annotations

from .clock import current_time
from .serializer import preview_report, serialize_report
from .settings import ReportSettings, load_report_settings
from .storage import save_report

__all__ = [
    "ReportSettings",
    "current_time",
    "load_report_settings",
    "preview_report",
    "save_report",
    "serialize_report",
]
