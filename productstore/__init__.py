"""productstore — CRUD data-access layer for the ``products`` table."""

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository
from productstore.errors import (
    ConstraintViolationError,
    DuplicateProductError,
    ProductNotFoundError,
    RowDecodeError,
    StatementError,
    StoreConnectionError,
    StoreError,
)
from productstore.models.product import Product, create_product

__all__ = [
    "Database", "ProductRepository",
    "Product", "create_product",
    "StoreError", "StoreConnectionError", "StatementError",
    "ConstraintViolationError", "DuplicateProductError",
    "RowDecodeError", "ProductNotFoundError",
]
