"""Case-insensitive product search."""
from typing import List, Sequence
from stockdash.data.product_schema import Product


def filter_products(products: Sequence[Product], query: str) -> List[Product]:
    """
    Keep the products whose name, SKU or category contains the query.
    
    Matching is a case-insensitive substring test on each field
    independently; a match on any one field is enough. An empty query
    returns the whole collection in its original order.
    """
    if not query:
        return list(products)
    
    needle = query.lower()
    return [
        p for p in products
        if needle in p.name.lower()
        or needle in p.sku.lower()
        or needle in p.category.lower()
    ]
