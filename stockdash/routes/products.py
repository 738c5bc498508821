"""Product routes: listing, search and CRUD."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from typing import List
from pydantic import BaseModel, Field, ValidationError
from stockdash.data.product_schema import Product, ProductDraft, ProductPatch
from stockdash.data.seed import SUGGESTED_CATEGORIES
from stockdash.services.search import filter_products
from stockdash.state import InventoryState, get_state

router = APIRouter(prefix="/products", tags=["products"])

DELETE_CONFIRMATION = "Êtes-vous sûr de vouloir supprimer ce produit ?"


class DeleteResponse(BaseModel):
    """Outcome of a delete request."""
    product_id: str
    deleted: bool = Field(..., description="False when the deletion was not confirmed")
    message: str


def _not_found(product_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product with ID {product_id} not found"
    )


@router.get("", response_model=List[Product], include_in_schema=False)
@router.get(
    "/",
    response_model=List[Product],
    summary="List products",
    description="List products, optionally narrowed by a case-insensitive search on name, SKU or category"
)
def list_products(
    q: str = Query("", description="Search term"),
    state: InventoryState = Depends(get_state)
):
    """List (and optionally search) products."""
    return filter_products(state.store.products, q)


@router.get(
    "/categories",
    response_model=List[str],
    summary="Suggested categories"
)
def list_categories():
    """Category labels offered by the product form."""
    return SUGGESTED_CATEGORIES


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Get product by ID"
)
def get_product(
    product_id: str,
    state: InventoryState = Depends(get_state)
):
    """Get a product by ID."""
    product = state.store.get(product_id)
    if product is None:
        raise _not_found(product_id)
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post(
    "/",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product"
)
def create_product(
    draft: ProductDraft,
    state: InventoryState = Depends(get_state)
):
    """Create a new product. SKUs are not required to be unique."""
    return state.store.create(draft)


@router.put(
    "/{product_id}",
    response_model=Product,
    summary="Update a product",
    description="Replace every editable field of an existing product"
)
def update_product(
    product_id: str,
    draft: ProductDraft,
    state: InventoryState = Depends(get_state)
):
    """Update a product."""
    product = state.store.update(product_id, draft)
    if product is None:
        raise _not_found(product_id)
    return product


@router.patch(
    "/{product_id}",
    response_model=Product,
    summary="Partially update a product"
)
def patch_product(
    product_id: str,
    patch: ProductPatch,
    state: InventoryState = Depends(get_state)
):
    """Merge the provided fields onto the product and save it as a full update."""
    existing = state.store.get(product_id)
    if existing is None:
        raise _not_found(product_id)
    
    merged = existing.to_draft().model_dump()
    merged.update(patch.model_dump(exclude_unset=True))
    try:
        draft = ProductDraft(**merged)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    return update_product(product_id, draft, state)


@router.delete(
    "/{product_id}",
    response_model=DeleteResponse,
    summary="Delete a product",
    description="Delete a product; nothing happens unless confirm=true is passed"
)
def delete_product(
    product_id: str,
    confirm: bool = Query(False, description="Explicit confirmation of the deletion"),
    state: InventoryState = Depends(get_state)
):
    """Delete a product after explicit confirmation."""
    if state.store.get(product_id) is None:
        raise _not_found(product_id)
    
    if not confirm:
        return DeleteResponse(product_id=product_id, deleted=False, message=DELETE_CONFIRMATION)
    
    state.store.delete(product_id)
    return DeleteResponse(product_id=product_id, deleted=True, message="Produit supprimé.")
