"""The fixed create → insert → update → read → delete walk-through."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository
from productstore.errors import ProductNotFoundError
from productstore.models.product import Product, create_product

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """What the walk-through observed at each read step."""
    product: Product
    fetched: Product
    listing: list[Product]
    deleted: bool

    def to_text(self) -> str:
        lines = [f"Fetched: {self.fetched}"]
        lines.append(f"All products ({len(self.listing)}):")
        for p in self.listing:
            lines.append(f"  {p.id} | {p.name} | {p.price}")
        lines.append(f"Deleted: {'yes' if self.deleted else 'no'}")
        return "\n".join(lines)


def run_scenario(
    db: Database,
    name: str = "SpaceShip",
    price: float = 10.02,
    updated_name: str = "updatedSpaceShip",
    updated_price: float = 11.05,
) -> ScenarioResult:
    """Run every store operation once, in order. Any StoreError propagates."""
    repo = ProductRepository(db)

    product = create_product(name, price)
    repo.insert(product)

    product.name = updated_name
    product.price = updated_price
    repo.update(product)

    fetched = repo.get_by_id(product.id)
    logger.info(f"Read back {fetched.id}: {fetched.name} @ {fetched.price}")
    listing = repo.list_all()

    repo.delete(product.id)
    try:
        repo.get_by_id(product.id)
        deleted = False
    except ProductNotFoundError:
        deleted = True

    return ScenarioResult(product=product, fetched=fetched, listing=listing, deleted=deleted)
