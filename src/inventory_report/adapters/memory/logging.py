"""In-memory logging adapter for testing.

Leaves the lib_log_rich runtime untouched so CLI tests can run commands
without starting log handlers.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Skip runtime initialization; satisfies the InitLogging protocol."""


__all__ = ["init_logging_in_memory"]
