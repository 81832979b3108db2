"""Report settings model and loader.

Provides the ReportSettings Pydantic model for validated, immutable report
options and the loader that builds it from the ``[report]`` configuration
section.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inventory_report.domain.errors import ConfigurationError
from inventory_report.domain.report import SHORT_DATE_FORMAT

#: Characters of XML shown by the preview view.
DEFAULT_PREVIEW_CHARS = 300


class ReportSettings(BaseModel):
    """Validated, immutable report configuration.

    Example:
        >>> settings = ReportSettings()
        >>> settings.output_path.name
        'inventory_report.xml'
        >>> settings.preview_chars
        300
    """

    model_config = ConfigDict(frozen=True)

    output_path: Path = Path("inventory_report.xml")
    date_format: str = SHORT_DATE_FORMAT
    indent: str = "  "
    xml_declaration: bool = False
    preview_chars: int = Field(default=DEFAULT_PREVIEW_CHARS, gt=0)
    save: bool = False

    @field_validator("date_format")
    @classmethod
    def _check_date_format(cls, v: str) -> str:
        """Reject empty formats and formats that strftime cannot render.

        Examples:
            >>> ReportSettings._check_date_format("%d.%m.%Y")
            '%d.%m.%Y'
        """
        if not v.strip():
            raise ValueError("date_format must not be empty")
        date(2000, 1, 1).strftime(v)
        return v

    @field_validator("indent")
    @classmethod
    def _check_indent(cls, v: str) -> str:
        if v.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return v


def load_report_settings(config_dict: Mapping[str, Any]) -> ReportSettings:
    """Load ReportSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    ReportSettings model. Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'report' section.

    Returns:
        Report settings with defaults for missing values.

    Raises:
        ConfigurationError: When the section holds invalid values.

    Example:
        >>> load_report_settings({"report": {"preview_chars": 120}}).preview_chars
        120
        >>> load_report_settings({}).save
        False
    """
    report_raw = config_dict.get("report", {})
    try:
        return ReportSettings.model_validate(report_raw if report_raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [report] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_PREVIEW_CHARS",
    "ReportSettings",
    "load_report_settings",
]
