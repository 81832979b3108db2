"""In-memory doubles for the application ports.

Nothing here reads files, the system clock or starts the logging runtime,
so CLI tests can drive whole commands and assert on what was captured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .report import FIXED_NOW, FixedClock, InventoryStub, ReportSinkSpy

if TYPE_CHECKING:
    from inventory_report.application.ports import CurrentTime, DisplayConfig, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_current_time: CurrentTime = FixedClock()

__all__ = [
    "FIXED_NOW",
    "FixedClock",
    "InventoryStub",
    "ReportSinkSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
