"""State the root group hands to every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from inventory_report.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from inventory_report.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read ``profile`` and layer ``--set`` assignments on top of it."""
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Services plus the configuration resolved from ``--profile`` and ``--set``."""

    services: AppServices
    config: Config
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    traceback: bool = False

    @classmethod
    def load(
        cls,
        services: AppServices,
        *,
        profile: str | None = None,
        set_overrides: tuple[str, ...] = (),
        traceback: bool = False,
    ) -> CLIContext:
        """Resolve the root options into a context.

        Raises:
            click.UsageError: If a ``--set`` assignment is malformed.

        Example:
            >>> from inventory_report.composition import build_testing
            >>> state = CLIContext.load(build_testing(), set_overrides=("report.save=true",))
            >>> state.config.get("report.save")
            True
        """
        config = _load_config(services, profile, set_overrides)
        return cls(services, config, profile, set_overrides, traceback)

    def for_profile(self, profile: str | None) -> Config:
        """Config for ``profile``; the root ``--set`` assignments still apply.

        Returns the already loaded config when ``profile`` is empty.
        """
        if not profile:
            return self.config
        return _load_config(self.services, profile, self.set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored on ``ctx``.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; invoke subcommands through the root group")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Let ``lib_cli_exit_tools`` print full, coloured tracebacks when ``enabled``.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


__all__ = [
    "CLIContext",
    "apply_traceback_preferences",
    "get_cli_context",
]
