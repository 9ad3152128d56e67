"""Configuration management for the fixed-price storefront."""

from typing import Optional, List, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator


DisplayMode = Literal["incl", "excl"]


class TaxRateEntry(BaseModel):
    """A single configured tax rate component."""
    country: str = Field(..., description="ISO 3166-1 alpha-2 country code, or '*' for any country")
    rate: float = Field(..., ge=0.0, le=100.0, description="Rate as a percentage (e.g. 21.0)")
    tax_class: str = Field("standard", description="Product tax class this rate applies to")
    label: Optional[str] = Field(None, description="Display label (e.g., 'VAT')")

    @field_validator("country")
    @classmethod
    def _normalize_country(cls, value: str) -> str:
        value = value.strip().upper()
        if value != "*" and (len(value) != 2 or not value.isalpha()):
            raise ValueError(f"invalid country code: {value!r}")
        return value


class TaxConfig(BaseModel):
    """Tax configuration."""
    enabled: bool = Field(True, description="Whether tax calculation is enabled")
    prices_include_tax: bool = Field(False, description="Whether configured prices already include tax")
    base_country: str = Field(..., description="Merchant's home country (ISO 3166-1 alpha-2)")
    display_shop: DisplayMode = Field("incl", description="Display prices in the catalog including or excluding tax")
    display_cart: DisplayMode = Field("incl", description="Display prices in the cart including or excluding tax")
    rates: List[TaxRateEntry] = Field(default_factory=list, description="Tax rate components")

    @field_validator("base_country")
    @classmethod
    def _normalize_base_country(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 2 or not value.isalpha():
            raise ValueError(f"invalid country code: {value!r}")
        return value


class StoreConfig(BaseModel):
    """Main configuration for a fixed-price storefront."""
    store_name: str = Field(..., description="Your store name")
    currency: str = Field("EUR", description="Store currency code (ISO 4217)")
    price_decimals: int = Field(2, ge=0, le=6, description="Number of decimals shown in prices")
    tax: TaxConfig

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "store_name": "My Store",
                "currency": "EUR",
                "price_decimals": 2,
                "tax": {
                    "enabled": True,
                    "prices_include_tax": False,
                    "base_country": "DE",
                    "display_shop": "incl",
                    "display_cart": "incl",
                    "rates": [
                        {"country": "DE", "rate": 19.0, "label": "MwSt."},
                        {"country": "DE", "rate": 7.0, "tax_class": "reduced-rate", "label": "MwSt."},
                        {"country": "FR", "rate": 20.0, "label": "TVA"},
                        {"country": "NL", "rate": 21.0, "label": "BTW"},
                    ]
                }
            }
        }
    )
