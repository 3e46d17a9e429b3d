# Export all DAO classes
from .product_store import ProductStore, DuplicateProductError, SEED_PRODUCTS

__all__ = [
    "ProductStore",
    "DuplicateProductError",
    "SEED_PRODUCTS",
]
