"""Data models for catalog products, price evaluation and rendered prices."""

from .catalog_models import (
    Product,
    ProductVariant,
)
from .pricing_models import (
    PriceContext,
    PriceAdjustment,
)
from .display_models import (
    DisplayedPrice,
    DisplayedVariant,
    DisplayedProduct,
    AdminNotice,
)

__all__ = [
    "Product",
    "ProductVariant",
    "PriceContext",
    "PriceAdjustment",
    "DisplayedPrice",
    "DisplayedVariant",
    "DisplayedProduct",
    "AdminNotice",
]
