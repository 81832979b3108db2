"""Console-script entry: run the group, turn every outcome into an exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from inventory_report import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .root import cli

if TYPE_CHECKING:
    from inventory_report.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; a worker shutting it down would silence the rest.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(argv: Sequence[str] | None = None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run the CLI with ``argv`` (``sys.argv[1:]`` when None) and return the exit code.

    ``services_factory`` is handed to Click as ``obj``; the root group calls
    it once. Console scripts pass ``build_production``.

    Example:
        >>> from inventory_report.composition import build_testing
        >>> main(["--version"], services_factory=build_testing)  # doctest: +SKIP
        0
    """
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt get an exit code too
        return _report_failure(exc)
    finally:
        _shutdown_logging()
    return 0


__all__ = ["main"]
