"""AI analysis routes: product descriptions and stock-health reports."""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, field_validator
from stockdash.analysis.slot import SlotSnapshot, SlotStatus
from stockdash.state import InventoryState, get_state

router = APIRouter(prefix="/analysis", tags=["analysis"])


class DescriptionRequest(BaseModel):
    """Request model for the description endpoint."""
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Product category")

    @field_validator("name", "category")
    @classmethod
    def validate_present(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Veuillez remplir le nom et la catégorie pour générer une description.")
        return v


class DescriptionResponse(BaseModel):
    """Response model for the description endpoint."""
    description: str = Field(..., description="Generated product description")


@router.post("/description", response_model=DescriptionResponse)
async def generate_description(
    request: DescriptionRequest,
    state: InventoryState = Depends(get_state)
):
    """
    Generate a short sales description for a product being edited.
    
    A failure of the text-generation service is reported as 502 with a
    generic message; a request replaced by a newer one gets 409.
    """
    snapshot = await state.description_slot.run(
        lambda: state.analyst.generate_product_description(request.name, request.category)
    )
    
    if snapshot.superseded:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Requête remplacée par une demande plus récente."
        )
    if snapshot.status == SlotStatus.FAILED:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=snapshot.error
        )
    return DescriptionResponse(description=snapshot.result)


@router.get("/stock-health", response_model=SlotSnapshot)
def get_stock_health(state: InventoryState = Depends(get_state)):
    """Current state of the stock-health report slot."""
    return state.stock_health_slot.snapshot()


@router.post("/stock-health", response_model=SlotSnapshot)
async def run_stock_health(state: InventoryState = Depends(get_state)):
    """
    Run a stock-health analysis over the current product collection.
    
    The report overwrites the previous one. On failure the snapshot carries
    status "failed" and a generic message instead of a report.
    """
    products = state.store.products
    return await state.stock_health_slot.run(
        lambda: state.analyst.analyze_stock_health(products)
    )
