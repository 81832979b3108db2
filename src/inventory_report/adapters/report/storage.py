"""Persist serialized reports to the filesystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def save_report(text: str, path: Path) -> Path:
    """Write ``text`` to ``path`` atomically.

    Parent directories are created as needed. The content is written to a
    sibling ``.tmp`` file first and then moved over ``path``, so readers
    never observe a partially written report. A failed write removes the
    temporary file again.

    Args:
        text: Serialized report.
        path: Destination file.

    Returns:
        Resolved destination path.

    Raises:
        OSError: When the directory or file cannot be written.
    """
    target = path.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = target.with_name(f"{target.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.info("Saved inventory report", extra={"path": str(target), "chars": len(text)})
    return target


__all__ = ["save_report"]
