"""Repository for the ``products`` table — single-statement CRUD.

Update and delete report the affected row count but treat zero rows as
success; callers that need "must exist" semantics check the return value.
"""

from __future__ import annotations

import logging

from productstore.db.database import Database
from productstore.errors import (
    ConstraintViolationError,
    DuplicateProductError,
    ProductNotFoundError,
)
from productstore.models.product import Product

logger = logging.getLogger(__name__)

INSERT_SQL = "INSERT INTO products(id, name, price) VALUES (?, ?, ?)"
UPDATE_SQL = "UPDATE products SET name = ?, price = ? WHERE id = ?"
SELECT_ONE_SQL = "SELECT id, name, price FROM products WHERE id = ?"
SELECT_ALL_SQL = "SELECT id, name, price FROM products"
DELETE_SQL = "DELETE FROM products WHERE id = ?"


class ProductRepository:
    """Single-Responsibility repository for product persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def insert(self, product: Product) -> Product:
        """Insert a new product. Raises DuplicateProductError on id collision."""
        try:
            with self._db.transaction():
                self._db.execute(INSERT_SQL, (product.id, product.name, product.price)).close()
        except ConstraintViolationError as exc:
            raise DuplicateProductError(product.id) from exc
        logger.info(f"Inserted product {product.id} ({product.name})")
        return product

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, product_id: str) -> Product:
        row = self._db.fetchone(SELECT_ONE_SQL, (product_id,))
        if row is None:
            raise ProductNotFoundError(product_id)
        return Product.from_row(row)

    def list_all(self) -> list[Product]:
        """Every product, in whatever order the engine returns them."""
        rows = self._db.fetchall(SELECT_ALL_SQL)
        return [Product.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, product: Product) -> int:
        """Overwrite name and price for ``product.id``; returns rows affected."""
        with self._db.transaction():
            cursor = self._db.execute(UPDATE_SQL, (product.name, product.price, product.id))
            affected = cursor.rowcount
            cursor.close()
        if affected == 0:
            logger.warning(f"Update matched no product with id {product.id}")
        else:
            logger.info(f"Updated product {product.id}")
        return affected

    # -- Delete ----------------------------------------------------------------

    def delete(self, product_id: str) -> int:
        """Remove the product row; returns rows affected (0 is not an error)."""
        with self._db.transaction():
            cursor = self._db.execute(DELETE_SQL, (product_id,))
            affected = cursor.rowcount
            cursor.close()
        if affected == 0:
            logger.warning(f"Delete matched no product with id {product_id}")
        else:
            logger.info(f"Deleted product {product_id}")
        return affected
