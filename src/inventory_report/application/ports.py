"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``ReportSettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import InventoryItem, ReportDocument

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.report.settings import ReportSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadReportSettings(Protocol):
    """Load ReportSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> ReportSettings: ...


class LoadInventory(Protocol):
    """Read inventory records from a file."""

    def __call__(self, path: Path) -> list[InventoryItem]: ...


class SampleInventory(Protocol):
    """Return the bundled demo inventory."""

    def __call__(self) -> list[InventoryItem]: ...


class CurrentTime(Protocol):
    """Return the timestamp recorded as the report generation time."""

    def __call__(self) -> datetime: ...


class SerializeReport(Protocol):
    """Render a report document as text."""

    def __call__(self, document: ReportDocument, *, indent: str = ..., xml_declaration: bool = ...) -> str: ...


class SaveReport(Protocol):
    """Persist serialized report text and return the written location."""

    def __call__(self, text: str, path: Path) -> Path: ...


__all__ = [
    "CurrentTime",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadInventory",
    "LoadReportSettings",
    "SampleInventory",
    "SaveReport",
    "SerializeReport",
]
