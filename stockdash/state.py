"""Application state shared by the API routes."""
from typing import Iterable, Optional, Tuple
from fastapi import Request
from stockdash.analysis.pipeline import StockAnalyst
from stockdash.analysis.slot import AnalysisSlot
from stockdash.data.product_schema import DerivedStats, Product
from stockdash.data.seed import seed_products
from stockdash.data.store import ProductStore
from stockdash.services.stats import compute_stats

DESCRIPTION_FAILURE_MESSAGE = "Erreur lors de la génération IA."
ANALYSIS_FAILURE_MESSAGE = "Erreur lors de l'analyse."


class InventoryState:
    """
    Everything the dashboard needs for one process lifetime: the product
    store, the analyst used for remote calls and one independent result slot
    per analysis kind. Store mutations go through ``store``; derived stats
    are recomputed only when the store's collection changes.
    """
    
    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        analyst: Optional[StockAnalyst] = None
    ):
        """
        Initialize the state.
        
        Args:
            products: Initial collection (defaults to the seed products)
            analyst: Optional analyst, e.g. one built around a test client
        """
        self.store = ProductStore(seed_products() if products is None else products)
        self.analyst = analyst or StockAnalyst()
        self.description_slot = AnalysisSlot("description", DESCRIPTION_FAILURE_MESSAGE)
        self.stock_health_slot = AnalysisSlot("stock-health", ANALYSIS_FAILURE_MESSAGE)
        self._stats_cache: Optional[Tuple[Tuple[Product, ...], DerivedStats]] = None
    
    def stats(self) -> DerivedStats:
        """Dashboard stats for the current collection, memoized per collection."""
        products = self.store.products
        if self._stats_cache is None or self._stats_cache[0] is not products:
            self._stats_cache = (products, compute_stats(products))
        return self._stats_cache[1]


def get_state(request: Request) -> InventoryState:
    """Dependency returning the state attached to the running app."""
    return request.app.state.inventory
