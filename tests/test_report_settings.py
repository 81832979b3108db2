"""Report settings validation at the configuration boundary."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from inventory_report.adapters.report.settings import DEFAULT_PREVIEW_CHARS, ReportSettings, load_report_settings
from inventory_report.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_defaults_describe_an_unsaved_iso_dated_report() -> None:
    settings = ReportSettings()

    assert settings.output_path == Path("inventory_report.xml")
    assert settings.date_format == "%Y-%m-%d"
    assert settings.indent == "  "
    assert settings.xml_declaration is False
    assert settings.preview_chars == DEFAULT_PREVIEW_CHARS == 300
    assert settings.save is False


@pytest.mark.os_agnostic
def test_load_report_settings_reads_report_section() -> None:
    settings = load_report_settings(
        {"report": {"output_path": "exports/stock.xml", "date_format": "%d.%m.%Y", "save": True}}
    )

    assert settings.output_path == Path("exports/stock.xml")
    assert settings.date_format == "%d.%m.%Y"
    assert settings.save is True


@pytest.mark.os_agnostic
def test_load_report_settings_ignores_other_sections() -> None:
    assert load_report_settings({"lib_log_rich": {"console_level": "DEBUG"}}) == ReportSettings()


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("section", "field"),
    [
        ({"preview_chars": 0}, "preview_chars"),
        ({"preview_chars": -1}, "preview_chars"),
        ({"date_format": ""}, "date_format"),
        ({"date_format": "   "}, "date_format"),
        ({"indent": "--"}, "indent"),
        ({"save": "maybe"}, "save"),
    ],
)
def test_invalid_values_raise_configuration_error(section: dict[str, object], field: str) -> None:
    with pytest.raises(ConfigurationError, match=field):
        load_report_settings({"report": section})


@pytest.mark.os_agnostic
@pytest.mark.parametrize("indent", ["", " ", "    ", "\t"])
def test_whitespace_indents_are_accepted(indent: str) -> None:
    assert ReportSettings(indent=indent).indent == indent


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    settings = ReportSettings()

    with pytest.raises(ValidationError):
        settings.save = True  # type: ignore[misc]
