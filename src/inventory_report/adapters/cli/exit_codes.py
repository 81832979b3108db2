"""POSIX-conventional exit codes for CLI error paths.

Signal codes are listed for reference only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by the CLI commands.

    Values follow errno (2, 13, 22) and sysexits.h (78) where applicable;
    128+N denotes signal N.

    Example:
        >>> int(ExitCode.FILE_NOT_FOUND)
        2
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
