"""Composition root: the one place that picks concrete adapters.

The CLI only ever talks to an :class:`AppServices` container. Production
code gets it from :func:`build_production`; tests swap the inventory
source, the clock and the report sink for in-memory doubles through
:func:`build_testing`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.inventory.sample import sample_inventory
from ..adapters.inventory.source import load_inventory
from ..adapters.logging.setup import init_logging
from ..adapters.report.clock import current_time
from ..adapters.report.serializer import serialize_report
from ..adapters.report.settings import load_report_settings
from ..adapters.report.storage import save_report

if TYPE_CHECKING:
    from ..adapters.memory.report import FixedClock, InventoryStub, ReportSinkSpy
    from ..application.ports import (
        CurrentTime,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadInventory,
        LoadReportSettings,
        SampleInventory,
        SaveReport,
        SerializeReport,
    )

    # pyright checks each production adapter against its port here.
    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_report_settings: LoadReportSettings = load_report_settings
    _assert_load_inventory: LoadInventory = load_inventory
    _assert_sample_inventory: SampleInventory = sample_inventory
    _assert_current_time: CurrentTime = current_time
    _assert_serialize_report: SerializeReport = serialize_report
    _assert_save_report: SaveReport = save_report


@dataclass(frozen=True, slots=True)
class AppServices:
    """Everything the CLI needs from the outside world, one callable per port."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_report_settings: LoadReportSettings
    load_inventory: LoadInventory
    sample_inventory: SampleInventory
    current_time: CurrentTime
    serialize_report: SerializeReport
    save_report: SaveReport


def build_production() -> AppServices:
    """Layered config files, lib_log_rich, the real clock and the filesystem."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_report_settings=load_report_settings,
        load_inventory=load_inventory,
        sample_inventory=sample_inventory,
        current_time=current_time,
        serialize_report=serialize_report,
        save_report=save_report,
    )


def build_testing(
    *,
    sink: ReportSinkSpy | None = None,
    inventory: InventoryStub | None = None,
    clock: FixedClock | None = None,
) -> AppServices:
    """Services that never touch disk, the system clock or the logging runtime.

    Settings parsing and XML serialization are pure, so the production
    functions are used for both.

    Args:
        sink: Spy that records saved reports; a fresh one when None.
        inventory: Stub serving input records; the sample inventory when None.
        clock: Fixed clock; ``FIXED_NOW`` when None.

    Example:
        >>> from pathlib import Path
        >>> services = build_testing()
        >>> services.current_time().year
        2024
        >>> services.save_report("<r />", Path("r.xml")).name
        'r.xml'
    """
    from ..adapters.memory import (
        FixedClock,
        InventoryStub,
        ReportSinkSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    report_sink = sink if sink is not None else ReportSinkSpy()
    inventory_stub = inventory if inventory is not None else InventoryStub()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_report_settings=load_report_settings,
        load_inventory=inventory_stub.load_inventory,
        sample_inventory=inventory_stub.sample_inventory,
        current_time=clock if clock is not None else FixedClock(),
        serialize_report=serialize_report,
        save_report=report_sink.save_report,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
