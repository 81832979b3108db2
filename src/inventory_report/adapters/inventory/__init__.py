"""Inventory adapter - input suppliers for the report pipeline.

Contents:
    * :mod:`.source` - JSON inventory loading with Pydantic validation
    * :mod:`.sample` - Bundled demo inventory
"""

from __future__ import annotations

from .sample import sample_inventory
from .source import load_inventory, parse_inventory

__all__ = [
    "load_inventory",
    "parse_inventory",
    "sample_inventory",
]
