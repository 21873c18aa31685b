"""Error hierarchy for the product store.

Driver exceptions (``sqlite3`` / ``pymysql``) never leak out of the DB layer
unwrapped; they are chained onto one of these as ``__cause__``.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for every failure raised by productstore."""


class StoreConnectionError(StoreError):
    """The database could not be reached, or the connection was lost."""


class StatementError(StoreError):
    """A statement failed to prepare or execute."""


class ConstraintViolationError(StatementError):
    """The database rejected a statement on an integrity constraint."""


class DuplicateProductError(ConstraintViolationError):
    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} already exists")
        self.product_id = product_id


class RowDecodeError(StoreError):
    """A fetched row could not be mapped onto a Product."""


class ProductNotFoundError(StoreError):
    def __init__(self, product_id: str):
        super().__init__(f"No product with id {product_id}")
        self.product_id = product_id
