"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[report]`` configuration section holds values that
    cannot be used. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from inventory_report.domain.errors import ConfigurationError
        >>> err = ConfigurationError("preview_chars must be positive")
        >>> str(err)
        'preview_chars must be positive'
    """


class InventorySourceError(ValueError):
    """Inventory input could not be read into records.

    Raised when an input document is not valid JSON, is not a list of
    records, or a record fails validation. Inherits from ValueError so
    generic ``except ValueError`` handlers still catch it.

    Example:
        >>> from inventory_report.domain.errors import InventorySourceError
        >>> err = InventorySourceError("record 3: stock_quantity must be >= 0")
        >>> str(err)
        'record 3: stock_quantity must be >= 0'
        >>> isinstance(err, ValueError)
        True
    """


class ReportRenderError(ValueError):
    """Report text holds characters that XML 1.0 cannot represent.

    Control characters other than tab, newline and carriage return (and the
    non-characters U+FFFE/U+FFFF) have no XML encoding, not even as a
    character reference.

    Example:
        >>> err = ReportRenderError("Name of item 7 contains '\\x01'")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InventorySourceError",
    "ReportRenderError",
]
