"""lib_log_rich runtime setup shared by the console script, ``python -m`` and tests."""

from __future__ import annotations

from .setup import LogSettings, init_logging

__all__ = ["LogSettings", "init_logging"]
