"""
Fixed Price Across EU

Keeps the tax-inclusive price a shopper sees identical across countries by
adjusting the net price to the customer's VAT rate.
"""

__version__ = "1.0.0"

from .config import StoreConfig, TaxConfig, TaxRateEntry
from .normalizer import (
    PriceNormalizer,
    compute_net_price_from_gross,
    compute_target_gross_price,
)
from .notices import check_settings
from .router import get_pricing_router
from .storefront import Storefront

__all__ = [
    "StoreConfig",
    "TaxConfig",
    "TaxRateEntry",
    "PriceNormalizer",
    "compute_net_price_from_gross",
    "compute_target_gross_price",
    "check_settings",
    "get_pricing_router",
    "Storefront",
]
