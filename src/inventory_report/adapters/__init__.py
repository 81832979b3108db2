"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.inventory` - Inventory input suppliers
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.report` - XML rendering, persistence, settings and clock
"""

from __future__ import annotations

__all__: list[str] = []
