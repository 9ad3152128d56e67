"""Models describing a price evaluation request and its outcome."""

from typing import Optional, Literal
from pydantic import BaseModel, Field, field_validator


SkipReason = Literal[
    "not_taxable",
    "price_editing",
    "unresolved_country",
    "base_country",
    "zero_customer_rate",
]


class PriceContext(BaseModel):
    """
    Per-request context for price evaluation.

    Replaces the host platform's global "current customer" and request
    state with explicit values.
    """
    customer_country: Optional[str] = Field(None, description="Customer country, None while unresolved")
    is_admin: bool = Field(False, description="Request comes from the administrative area")
    is_ajax: bool = Field(False, description="Request is an asynchronous storefront call")

    @field_validator("customer_country")
    @classmethod
    def _normalize_country(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().upper()
        if not value:
            return None
        if len(value) != 2 or not value.isalpha():
            raise ValueError(f"invalid country code: {value!r}")
        return value

    @property
    def is_price_editing(self) -> bool:
        """Interactive admin screens edit stored prices; never adjust those."""
        return self.is_admin and not self.is_ajax


class PriceAdjustment(BaseModel):
    """Outcome of one price evaluation."""
    original_price: float
    price: float
    adjusted: bool
    skip_reason: Optional[SkipReason] = None
    target_gross: Optional[float] = None
    base_rate: float = 0.0
    customer_rate: float = 0.0
