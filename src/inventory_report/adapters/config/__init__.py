"""Layered configuration for the report CLI.

``loader`` reads and caches the merged layers, ``overrides`` applies
``--set`` assignments on top, and ``display`` prints the result.
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
]
