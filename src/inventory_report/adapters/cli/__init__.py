"""Command-line interface: the root group, its subcommands and ``main``."""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_report
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import CLIContext, apply_traceback_preferences, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_info",
    "cli_report",
    "get_cli_context",
    "main",
]
