"""Database layer — MySQL/SQLite connection wrapper and the product repository."""

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository
from productstore.db.schema import SCHEMA_DDL

__all__ = ["Database", "ProductRepository", "SCHEMA_DDL"]
