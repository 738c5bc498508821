"""Dashboard statistics aggregation."""
from decimal import Decimal
from typing import Dict, Sequence
from stockdash.data.product_schema import DerivedStats, Product

ALERT_REQUIRED = "Attention requise"
ALL_CLEAR = "Tout est normal"


def compute_stats(products: Sequence[Product]) -> DerivedStats:
    """
    Derive summary statistics from the product collection.
    
    Args:
        products: Current product collection (not modified)
        
    Returns:
        Total stock value, record count, low-stock count and the
        per-category quantity distribution in first-seen category order
    """
    total_value = sum((p.price * p.quantity for p in products), Decimal("0"))
    low_stock_count = sum(1 for p in products if p.is_critical)
    
    # dicts keep insertion order, so categories stay in first-seen order
    category_distribution: Dict[str, int] = {}
    for p in products:
        category_distribution[p.category] = category_distribution.get(p.category, 0) + p.quantity
    
    return DerivedStats(
        total_value=total_value,
        total_items=len(products),
        low_stock_count=low_stock_count,
        category_distribution=category_distribution
    )


def stock_alert_label(stats: DerivedStats) -> str:
    """Headline shown next to the low-stock counter."""
    return ALERT_REQUIRED if stats.low_stock_count > 0 else ALL_CLEAR
