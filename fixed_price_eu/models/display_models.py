"""Pydantic models for prices as rendered to shoppers and administrators."""

from typing import Optional, List, Literal
from pydantic import BaseModel, Field


class DisplayedPrice(BaseModel):
    """A single rendered price field."""
    amount: str = Field(..., description="Amount shown to the shopper")
    net: str
    gross: str
    tax_included: bool = Field(..., description="Whether the shown amount includes tax")
    adjusted: bool = Field(False, description="Whether the net price was normalized")


class DisplayedVariant(BaseModel):
    """Rendered variant offer."""
    id: str
    title: str
    sku: Optional[str] = None
    price: DisplayedPrice
    regular_price: DisplayedPrice
    sale_price: Optional[DisplayedPrice] = None
    on_sale: bool = False


class DisplayedProduct(BaseModel):
    """Rendered product with all its price fields."""
    id: str
    title: str
    sku: Optional[str] = None
    currency: str
    country: Optional[str] = None
    price: Optional[DisplayedPrice] = None
    regular_price: Optional[DisplayedPrice] = None
    sale_price: Optional[DisplayedPrice] = None
    on_sale: bool = False
    variants: List[DisplayedVariant] = Field(default_factory=list)


class AdminNotice(BaseModel):
    """Advisory message about store settings."""
    level: Literal["error", "warning"]
    code: str
    message: str
