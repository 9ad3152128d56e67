"""Pydantic models for catalog products and their variants."""

from typing import Optional, List, Literal
from pydantic import BaseModel, Field


TaxStatus = Literal["taxable", "shipping", "none"]


class ProductVariant(BaseModel):
    """A purchasable variant of a product (e.g. "Red / Large")."""
    id: str
    title: str
    sku: Optional[str] = None
    regular_price: float = Field(..., ge=0.0)
    sale_price: Optional[float] = Field(None, ge=0.0)
    tax_class: Optional[str] = None  # None inherits the parent's class
    tax_status: Optional[TaxStatus] = None  # None inherits the parent's status

    @property
    def price(self) -> float:
        """Active price: the sale price when set, otherwise the regular price."""
        return self.sale_price if self.sale_price is not None else self.regular_price


class Product(BaseModel):
    """Catalog product as stored by the merchant."""
    id: str
    title: str
    sku: Optional[str] = None
    regular_price: Optional[float] = Field(None, ge=0.0)
    sale_price: Optional[float] = Field(None, ge=0.0)
    tax_class: str = "standard"
    tax_status: TaxStatus = "taxable"
    variants: List[ProductVariant] = Field(default_factory=list)

    @property
    def price(self) -> Optional[float]:
        """Active price: the sale price when set, otherwise the regular price."""
        return self.sale_price if self.sale_price is not None else self.regular_price

    def is_taxable(self, tax_enabled: bool = True) -> bool:
        return tax_enabled and self.tax_status == "taxable"

    def variant_tax_class(self, variant: ProductVariant) -> str:
        return variant.tax_class if variant.tax_class is not None else self.tax_class

    def variant_is_taxable(self, variant: ProductVariant, tax_enabled: bool = True) -> bool:
        status = variant.tax_status or self.tax_status
        return tax_enabled and status == "taxable"
