"""Configuration doubles: no file discovery, no console output."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Empty configuration, so every setting falls back to its model default.

    Example:
        >>> get_config_in_memory(profile="warehouse-east").as_dict()
        {}
    """
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the call and print nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
