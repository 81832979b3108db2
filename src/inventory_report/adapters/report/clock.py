"""System clock adapter supplying report generation timestamps."""

from __future__ import annotations

from datetime import datetime


def current_time() -> datetime:
    """Return the current local time."""
    return datetime.now().astimezone()


__all__ = ["current_time"]
