"""Domain models for the product store."""

from productstore.models.product import Product, create_product

__all__ = ["Product", "create_product"]
