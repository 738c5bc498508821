"""Dashboard statistics routes."""
from decimal import Decimal
from typing import Dict
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from stockdash.services.stats import stock_alert_label
from stockdash.state import InventoryState, get_state

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


class StatsResponse(BaseModel):
    """Response model for the dashboard statistics endpoint."""
    total_value: Decimal = Field(..., description="Sum of price x quantity over all products")
    total_items: int = Field(..., description="Number of product records")
    low_stock_count: int = Field(..., description="Products at or below their minimum stock")
    category_distribution: Dict[str, int] = Field(..., description="Quantity per category, first-seen order")
    alert: str = Field(..., description="Headline for the low-stock counter")


@router.get("/stats", response_model=StatsResponse)
def get_stats(state: InventoryState = Depends(get_state)):
    """Derived statistics for the current product collection."""
    stats = state.stats()
    return StatsResponse(**stats.model_dump(), alert=stock_alert_label(stats))
