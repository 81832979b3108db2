"""Read the layered configuration, one cached ``Config`` per profile."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from inventory_report import __init__conf__

#: Bundled defaults; every other layer is optional.
DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge defaults, app, host, user, dotenv and environment layers.

    With ``profile`` set, each file layer is read from a ``profile/<name>/``
    subdirectory so one machine can keep settings per warehouse. The
    result is cached per ``(profile, start_dir)``; ``get_config.cache_clear()``
    forces a re-read.

    Raises:
        ValueError: If ``profile`` is empty, too long or contains path
            separators.

    Example:
        >>> get_config().get("report.preview_chars")
        300
        >>> get_config(profile="../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "get_config",
]
