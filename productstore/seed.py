"""Seed the ``products`` table from a YAML file.

Expected layout::

    products:
      - name: SpaceShip
        price: 10.02
      - id: 6f1c...   # optional, otherwise generated
        name: Rover
        price: 3.5
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository
from productstore.errors import StoreError
from productstore.models.product import Product, create_product

logger = logging.getLogger(__name__)


def seed_products(db: Database, path: Path) -> list[Product]:
    """Insert every product listed in ``path``; bad entries are logged and skipped."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with a 'products' key")

    entries = data.get("products") or []
    if not isinstance(entries, list):
        raise ValueError(f"{path}: 'products' must be a list")

    repo = ProductRepository(db)
    inserted: list[Product] = []
    for entry in entries:
        try:
            if entry.get("id"):
                product = Product(name=entry["name"], price=float(entry["price"]), id=str(entry["id"]))
            else:
                product = create_product(entry["name"], float(entry["price"]))
            repo.insert(product)
        except (AttributeError, KeyError, TypeError, ValueError, StoreError) as e:
            logger.warning(f"Skipping product entry {entry!r}: {e}")
            continue
        inserted.append(product)
    logger.info(f"Seeded {len(inserted)} product(s) from {path}")
    return inserted
