"""Type-safe domain enums for output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ReportView(str, Enum):
    """How much of the serialized report the CLI prints.

    Example:
        >>> ReportView("full") is ReportView.FULL
        True
    """

    PREVIEW = "preview"
    FULL = "full"


__all__ = [
    "OutputFormat",
    "ReportView",
]
