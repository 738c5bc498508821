"""Product schemas for the inventory store and API validation."""
import uuid
from datetime import date
from decimal import Decimal
from typing import Dict, Optional
from pydantic import BaseModel, Field, computed_field, field_validator

STOCK_STATUS_LOW = "Bas"
STOCK_STATUS_OK = "OK"


class ProductDraft(BaseModel):
    """Form payload accepted by the create/update operations."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    sku: str = Field(..., min_length=1, max_length=100, description="Reference code (not unique)")
    category: str = Field("", max_length=100, description="Free-text category label")
    quantity: int = Field(0, ge=0, description="Units in stock")
    min_stock: int = Field(5, ge=0, description="Alert threshold for low stock")
    price: Decimal = Field(Decimal("0"), ge=0, description="Unit price in euros")
    description: str = Field("", description="Free-text product description")

    class Config:
        extra = "forbid"

    @field_validator("name", "sku")
    @classmethod
    def validate_required_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def strip_category(cls, v):
        return v.strip()


class ProductPatch(BaseModel):
    """Schema for partially updating a product (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    quantity: Optional[int] = Field(None, ge=0)
    min_stock: Optional[int] = Field(None, ge=0)
    price: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = None

    class Config:
        extra = "forbid"


class Product(ProductDraft):
    """A stored product record."""
    id: str = Field(..., description="Unique identifier assigned at creation")
    last_updated: date = Field(..., description="Date of the last create/update")

    class Config:
        frozen = True

    @computed_field
    @property
    def is_critical(self) -> bool:
        """A product is critical when its quantity is at or below its threshold."""
        return self.quantity <= self.min_stock

    @computed_field
    @property
    def stock_status(self) -> str:
        return STOCK_STATUS_LOW if self.is_critical else STOCK_STATUS_OK

    @classmethod
    def from_draft(cls, draft: ProductDraft, product_id: Optional[str] = None) -> "Product":
        """
        Build a record from a validated draft.

        Args:
            draft: Validated form payload
            product_id: Existing identifier to preserve (a new UUID4 is generated if None)

        Returns:
            New product stamped with today's date
        """
        return cls(
            **draft.model_dump(),
            id=product_id or str(uuid.uuid4()),
            last_updated=date.today(),
        )

    def to_draft(self) -> ProductDraft:
        return ProductDraft(**self.model_dump(include=set(ProductDraft.model_fields)))


class DerivedStats(BaseModel):
    """Dashboard statistics derived from the product collection."""
    total_value: Decimal = Field(..., description="Sum of price x quantity, unrounded")
    total_items: int = Field(..., description="Number of product records")
    low_stock_count: int = Field(..., description="Number of critical products")
    category_distribution: Dict[str, int] = Field(
        ..., description="Summed quantity per category, in first-seen order"
    )
