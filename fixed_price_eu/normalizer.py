"""
Price normalization across tax jurisdictions.

Recomputes the net price of an item so that, once the customer's tax rate is
applied, the shopper pays the same gross price the store's base country
would charge.
"""

import logging
from typing import Iterable, Optional, Protocol, List

from .config import TaxRateEntry
from .models.pricing_models import PriceAdjustment, PriceContext, SkipReason

logger = logging.getLogger(__name__)


class RateLookup(Protocol):
    """Source of tax rate components."""

    def get_rates(self, tax_class: str, country: str) -> List[TaxRateEntry]: ...

    def get_base_rates(self, tax_class: str) -> List[TaxRateEntry]: ...


def sum_tax_rates(components: Iterable[TaxRateEntry]) -> float:
    """Sum rate components into a single percentage."""
    return sum((float(c.rate) for c in components), 0.0)


def compute_target_gross_price(price: float, base_rate: float, prices_include_tax: bool) -> float:
    """
    Gross price the base country charges for an item.

    Args:
        price: Configured price (gross when prices_include_tax, net otherwise)
        base_rate: Summed base-country rate, as a percentage
        prices_include_tax: Whether configured prices already include tax

    Returns:
        Gross (tax-inclusive) price
    """
    if prices_include_tax:
        return price
    return price * (1 + base_rate / 100)


def compute_net_price_from_gross(gross_price: float, customer_rate: float) -> float:
    """
    Net price that yields gross_price once customer_rate is applied.

    customer_rate must be non-zero; a zero rate is handled by the caller.
    """
    return gross_price / (1 + customer_rate / 100)


class PriceNormalizer:
    """
    Applies the fixed-price policy to a single price field.

    Holds no mutable state: every call is independent, so the same
    instance serves regular, sale and variant prices alike.
    """

    def __init__(self, rates: RateLookup, base_country: str, prices_include_tax: bool):
        self.rates = rates
        self.base_country = base_country.upper()
        self.prices_include_tax = prices_include_tax

    def _skip(self, price: float, reason: SkipReason, **rates: float) -> PriceAdjustment:
        logger.debug("price_adjustment_skipped", extra={"reason": reason, "price": price})
        return PriceAdjustment(original_price=price, price=price, adjusted=False, skip_reason=reason, **rates)

    def evaluate(
        self,
        price: float,
        tax_class: str,
        taxable: bool,
        context: PriceContext,
    ) -> PriceAdjustment:
        """
        Evaluate the fixed-price policy for one price.

        Args:
            price: Configured price of the item
            tax_class: Item tax class
            taxable: Whether the item is subject to tax
            context: Request context (customer country, admin flags)

        Returns:
            The adjustment; when skipped, price equals the original price
        """
        if not taxable:
            return self._skip(price, "not_taxable")

        if context.is_price_editing:
            return self._skip(price, "price_editing")

        customer_country = context.customer_country
        if customer_country is None:
            return self._skip(price, "unresolved_country")

        if customer_country == self.base_country:
            return self._skip(price, "base_country")

        base_rate = sum_tax_rates(self.rates.get_base_rates(tax_class))
        target_gross = compute_target_gross_price(price, base_rate, self.prices_include_tax)

        customer_rate = sum_tax_rates(self.rates.get_rates(tax_class, customer_country))
        if customer_rate == 0:
            return self._skip(price, "zero_customer_rate", base_rate=base_rate)

        net_price = compute_net_price_from_gross(target_gross, customer_rate)
        logger.debug(
            "price_adjusted",
            extra={
                "country": customer_country,
                "tax_class": tax_class,
                "base_rate": base_rate,
                "customer_rate": customer_rate,
                "price": price,
                "net_price": net_price,
            },
        )
        return PriceAdjustment(
            original_price=price,
            price=net_price,
            adjusted=True,
            target_gross=target_gross,
            base_rate=base_rate,
            customer_rate=customer_rate,
        )

    def adjust_price(
        self,
        price: Optional[float],
        tax_class: str,
        taxable: bool,
        context: PriceContext,
    ) -> Optional[float]:
        """Return the price to use for display; None (no price set) passes through."""
        if price is None:
            return None
        return self.evaluate(price, tax_class, taxable, context).price
