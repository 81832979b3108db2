"""Static package metadata and layered-config identifiers.

Kept in sync with ``pyproject.toml``; the version line is the only value
that changes between releases.
"""

from __future__ import annotations

name = "inventory_report"
title = "Build XML inventory reports from stock records"
version = "1.0.0"
author = "Inventory Report Maintainers"
shell_command = "inventory-report"

#: Identifiers used by lib_layered_config to locate configuration files.
LAYEREDCONF_VENDOR = "inventory-report"
LAYEREDCONF_APP = "Inventory Report"
LAYEREDCONF_SLUG = "inventory-report"


def print_info() -> None:
    """Print the summarised metadata block for the package.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for inventory_report:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
