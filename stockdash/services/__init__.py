"""Pure derived views over the product collection."""
from .stats import compute_stats, stock_alert_label
from .search import filter_products

__all__ = [
    "compute_stats",
    "stock_alert_label",
    "filter_products"
]
