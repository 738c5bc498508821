"""Inventory data layer package."""
from .product_schema import Product, ProductDraft, ProductPatch, DerivedStats
from .store import ProductStore
from .seed import seed_products, SUGGESTED_CATEGORIES

__all__ = [
    "Product",
    "ProductDraft",
    "ProductPatch",
    "DerivedStats",
    "ProductStore",
    "seed_products",
    "SUGGESTED_CATEGORIES"
]
