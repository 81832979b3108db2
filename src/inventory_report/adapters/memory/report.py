"""In-memory report adapters for testing.

Provides inventory, clock and persistence functions that satisfy the same
Protocols as production adapters but never touch the filesystem or the
system clock.

Contents:
    * :class:`InventoryStub` - Serves canned records and records requested paths.
    * :class:`FixedClock` - Returns a constant generation timestamp.
    * :class:`ReportSinkSpy` - Captures saved reports for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ...domain.models import InventoryItem
from ..inventory.sample import sample_inventory

#: Timestamp returned by a default FixedClock.
FIXED_NOW = datetime(2024, 1, 1, 9, 30)


def _empty_item_list() -> list[InventoryItem]:
    """Create an empty typed list for inventory records."""
    return []


def _empty_path_list() -> list[Path]:
    """Create an empty typed list for requested paths."""
    return []


def _empty_save_list() -> list[tuple[str, Path]]:
    """Create an empty typed list for saved reports."""
    return []


@dataclass
class InventoryStub:
    """Serves a fixed list of records regardless of the requested path.

    Attributes:
        items: Records returned by :meth:`load_inventory`; defaults to the
            bundled sample inventory when left empty.
        requested: Paths passed to :meth:`load_inventory`.
        raise_exception: When set, :meth:`load_inventory` raises it.

    Example:
        >>> stub = InventoryStub()
        >>> len(stub.load_inventory(Path("stock.json")))
        13
        >>> [path.name for path in stub.requested]
        ['stock.json']
    """

    items: list[InventoryItem] = field(default_factory=_empty_item_list)
    requested: list[Path] = field(default_factory=_empty_path_list)
    raise_exception: Exception | None = None

    def load_inventory(self, path: Path) -> list[InventoryItem]:
        self.requested.append(path)
        if self.raise_exception is not None:
            raise self.raise_exception
        return list(self.items) if self.items else sample_inventory()

    def sample_inventory(self) -> list[InventoryItem]:
        return list(self.items) if self.items else sample_inventory()


@dataclass
class FixedClock:
    """Clock returning the same timestamp on every call."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now


@dataclass
class ReportSinkSpy:
    """Captures save operations for test assertions.

    Each test should create its own ReportSinkSpy instance to avoid
    cross-test pollution.

    Attributes:
        saved: ``(text, path)`` pairs in save order.
        raise_exception: When set, :meth:`save_report` raises it.

    Example:
        >>> spy = ReportSinkSpy()
        >>> spy.save_report("<InventoryReport />", Path("out.xml")).name
        'out.xml'
        >>> spy.saved[0][0]
        '<InventoryReport />'
    """

    saved: list[tuple[str, Path]] = field(default_factory=_empty_save_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.saved.clear()
        self.raise_exception = None

    def save_report(self, text: str, path: Path) -> Path:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.saved.append((text, path))
        return path


__all__ = [
    "FIXED_NOW",
    "FixedClock",
    "InventoryStub",
    "ReportSinkSpy",
]
