"""Product domain model — the single entity persisted in ``products``."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from productstore.errors import RowDecodeError


@dataclass
class Product:
    """A named, priced product. ``id`` is fixed at construction."""

    name: str
    price: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price}

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        try:
            product_id = row["id"]
            name = row["name"]
            raw_price = row["price"]
        except KeyError as exc:
            raise RowDecodeError(f"Product row is missing column {exc}") from exc

        if not isinstance(product_id, str) or not isinstance(name, str):
            raise RowDecodeError(f"Product row has non-text id/name: {row!r}")
        # MySQL hands back DECIMAL columns as Decimal
        if isinstance(raw_price, bool) or not isinstance(raw_price, (int, float, Decimal)):
            raise RowDecodeError(f"Product {product_id} has non-numeric price {raw_price!r}")
        return cls(id=product_id, name=name, price=float(raw_price))


def create_product(name: str, price: float) -> Product:
    """Build a new in-memory product with a fresh UUID4 id."""
    return Product(name=name, price=price)
