"""In-memory product store."""
import logging
from typing import Iterable, Optional, Tuple
from stockdash.data.product_schema import Product, ProductDraft

logger = logging.getLogger(__name__)


class ProductStore:
    """
    Ordered collection of products held in process memory.

    Every mutation swaps in a new tuple, so callers holding a previous
    ``products`` value keep a consistent snapshot and derived views can
    detect changes by identity.
    """
    
    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Tuple[Product, ...] = tuple(products or ())
    
    @property
    def products(self) -> Tuple[Product, ...]:
        """Current collection, in insertion order."""
        return self._products
    
    def __len__(self) -> int:
        return len(self._products)
    
    def get(self, product_id: str) -> Optional[Product]:
        """Return the product with the given id, or None."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None
    
    def create(self, draft: ProductDraft) -> Product:
        """
        Append a new product built from a validated draft.
        
        Args:
            draft: Validated form payload
            
        Returns:
            The stored product, with a fresh identifier and today's date
        """
        product = Product.from_draft(draft)
        self._products = self._products + (product,)
        logger.info("Created product %s (sku=%s)", product.id, product.sku)
        return product
    
    def update(self, product_id: str, draft: ProductDraft) -> Optional[Product]:
        """
        Replace every editable field of an existing product.
        
        Args:
            product_id: Identifier of the product to update
            draft: Validated form payload
            
        Returns:
            The updated product, or None if the id is unknown (store unchanged)
        """
        updated = None
        products = []
        for product in self._products:
            if product.id == product_id:
                updated = Product.from_draft(draft, product_id=product.id)
                products.append(updated)
            else:
                products.append(product)
        
        if updated is None:
            return None
        
        self._products = tuple(products)
        logger.info("Updated product %s", product_id)
        return updated
    
    def delete(self, product_id: str) -> bool:
        """
        Remove a product outright.
        
        Returns:
            True if a record was removed, False if the id is unknown (store unchanged)
        """
        remaining = tuple(p for p in self._products if p.id != product_id)
        if len(remaining) == len(self._products):
            return False
        
        self._products = remaining
        logger.info("Deleted product %s", product_id)
        return True
