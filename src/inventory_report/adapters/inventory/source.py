"""Load inventory records from JSON documents.

Records are validated with a Pydantic model at the boundary and converted
to immutable domain :class:`InventoryItem` values. Both snake_case keys and
the camelCase keys of the upstream inventory export (``itemId``,
``stockQuantity``, ``isDiscontinued`` ...) are accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, cast

import orjson
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from inventory_report.domain.errors import InventorySourceError
from inventory_report.domain.models import InventoryItem

logger = logging.getLogger(__name__)


class InventoryRecordModel(BaseModel):
    """Pydantic model for a single inventory record.

    Example:
        >>> record = InventoryRecordModel.model_validate(
        ...     {"itemId": 3, "name": "Bolt", "category": "A", "stockQuantity": 100, "isDiscontinued": False}
        ... )
        >>> record.to_domain().item_id
        3
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    item_id: int = Field(validation_alias=AliasChoices("item_id", "itemId", "ItemID", "id"))
    name: str | None = None
    category: str | None = None
    stock_quantity: int = Field(
        ge=0,
        validation_alias=AliasChoices("stock_quantity", "stockQuantity", "StockQuantity", "qty"),
    )
    is_discontinued: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_discontinued", "isDiscontinued", "IsDiscontinued", "disc"),
    )
    unit_price: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("unit_price", "unitPrice", "UnitPrice"),
    )
    last_restock_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("last_restock_date", "lastRestockDate", "LastRestockDate"),
    )

    def to_domain(self) -> InventoryItem:
        return InventoryItem(
            item_id=self.item_id,
            name=self.name,
            category=self.category,
            stock_quantity=self.stock_quantity,
            is_discontinued=self.is_discontinued,
            unit_price=self.unit_price,
            last_restock_date=self.last_restock_date,
        )


def _extract_records(payload: object) -> Sequence[object]:
    """Accept either a bare JSON array or an object with an ``items`` array."""
    if isinstance(payload, Mapping):
        payload = cast("Mapping[str, object]", payload).get("items")
    if not isinstance(payload, list):
        raise InventorySourceError("Inventory document must be a JSON array or an object with an 'items' array")
    return cast("list[object]", payload)


def parse_inventory(raw: bytes | str) -> list[InventoryItem]:
    """Parse a JSON inventory document into domain records.

    Args:
        raw: JSON text or bytes.

    Returns:
        Records in document order.

    Raises:
        InventorySourceError: If the document is not valid JSON, has the
            wrong shape, or a record fails validation.

    Example:
        >>> items = parse_inventory(b'[{"item_id": 1, "name": "Widget", "category": "B", "stock_quantity": 10}]')
        >>> items[0].name
        'Widget'
    """
    try:
        payload: Any = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise InventorySourceError(f"Inventory document is not valid JSON: {exc}") from exc

    items: list[InventoryItem] = []
    for index, record in enumerate(_extract_records(payload)):
        try:
            items.append(InventoryRecordModel.model_validate(record).to_domain())
        except ValidationError as exc:
            raise InventorySourceError(f"record {index}: {exc}") from exc
    return items


def load_inventory(path: Path) -> list[InventoryItem]:
    """Read inventory records from the JSON file at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InventorySourceError: If the content cannot be parsed into records.
    """
    items = parse_inventory(path.read_bytes())
    logger.info("Loaded inventory", extra={"path": str(path), "records": len(items)})
    return items


__all__ = [
    "InventoryRecordModel",
    "load_inventory",
    "parse_inventory",
]
