"""Inventory report CLI command.

Builds the XML inventory report from a JSON inventory file (or the bundled
sample inventory), prints it, and optionally saves it.

Contents:
    * :func:`cli_report` - Build, print and optionally save the report.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import lib_log_rich.runtime
import rich_click as click

from inventory_report.adapters.report.serializer import preview_report
from inventory_report.adapters.report.settings import ReportSettings
from inventory_report.domain.enums import ReportView
from inventory_report.domain.errors import ConfigurationError, InventorySourceError, ReportRenderError
from inventory_report.domain.models import InventoryItem, ReportDocument
from inventory_report.domain.report import build_report

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from inventory_report.composition import AppServices

logger = logging.getLogger(__name__)


def _fail(exc: Exception, log_message: str, user_message: str, *, exit_code: ExitCode) -> NoReturn:
    """Log ``exc``, print a one-line error and exit with ``exit_code``."""
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


def _load_settings(cli_ctx: CLIContext) -> ReportSettings:
    try:
        return cli_ctx.services.load_report_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        _fail(exc, "Report configuration invalid", "Invalid report configuration", exit_code=ExitCode.CONFIG_ERROR)


def _read_inventory(services: AppServices, input_path: Path | None) -> list[InventoryItem]:
    """Load records from ``input_path`` or fall back to the sample inventory.

    Exception order matters: InventorySourceError is a ValueError and
    FileNotFoundError/PermissionError are OSErrors.
    """
    if input_path is None:
        logger.info("No input given, using the sample inventory")
        return services.sample_inventory()
    try:
        return services.load_inventory(input_path)
    except FileNotFoundError as exc:
        _fail(exc, "Inventory file not found", "Inventory file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except PermissionError as exc:
        _fail(exc, "Inventory file not readable", "Permission denied", exit_code=ExitCode.PERMISSION_DENIED)
    except InventorySourceError as exc:
        _fail(exc, "Inventory file invalid", "Invalid inventory file", exit_code=ExitCode.INVALID_ARGUMENT)


def _render(services: AppServices, document: ReportDocument, settings: ReportSettings) -> str:
    try:
        return services.serialize_report(document, indent=settings.indent, xml_declaration=settings.xml_declaration)
    except ReportRenderError as exc:
        _fail(exc, "Report text not representable as XML", "Invalid inventory data", exit_code=ExitCode.INVALID_ARGUMENT)


def _save(services: AppServices, text: str, destination: Path) -> Path:
    try:
        return services.save_report(text, destination)
    except PermissionError as exc:
        _fail(exc, "Report not writable", "Permission denied", exit_code=ExitCode.PERMISSION_DENIED)
    except OSError as exc:
        _fail(exc, "Report save failed", "Could not save report", exit_code=ExitCode.GENERAL_ERROR)


@click.command("report", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON inventory file (array of records); uses the sample inventory when omitted",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file when saving (default: report.output_path)",
)
@click.option(
    "--save/--no-save",
    default=None,
    help="Write the report to disk (default: report.save)",
)
@click.option(
    "--date",
    "report_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Generation date to record instead of today (YYYY-MM-DD)",
)
@click.option(
    "--view",
    type=click.Choice([v.value for v in ReportView], case_sensitive=False),
    default=ReportView.PREVIEW.value,
    help="Print a short preview or the full XML",
)
@click.pass_context
def cli_report(
    ctx: click.Context,
    input_path: Path | None,
    output_path: Path | None,
    save: bool | None,
    report_date: datetime | None,
    view: str,
) -> None:
    """Build the XML inventory report.

    Discontinued items are left out and the rest are listed by category.
    The XML goes to stdout; status messages go to stderr.

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> # Real invocation tested in test_cli_report.py
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    settings = _load_settings(cli_ctx)
    report_view = ReportView(view.lower())
    should_save = settings.save if save is None else save
    destination = output_path if output_path is not None else settings.output_path

    extra = {"command": "report", "input": str(input_path) if input_path else None, "save": should_save}
    with lib_log_rich.runtime.bind(job_id="cli-report", extra=extra):
        items = _read_inventory(services, input_path)
        generated_at: date | datetime = report_date.date() if report_date is not None else services.current_time()
        document = build_report(items, generated_at, date_format=settings.date_format)
        logger.info(
            "Built inventory report",
            extra={"records": len(items), "report_items": len(document.items)},
        )

        text = _render(services, document, settings)
        click.echo(text if report_view is ReportView.FULL else preview_report(text, settings.preview_chars))

        if should_save:
            written = _save(services, text, destination)
            click.echo(f"\nSaved inventory report to {written}", err=True)
        else:
            click.echo(f"\nReport not saved (use --save to write {destination})", err=True)


__all__ = ["cli_report"]
