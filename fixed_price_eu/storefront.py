"""Storefront rendering layer applying fixed-price normalization to catalog prices."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple
import logging

from .config import StoreConfig
from .models.catalog_models import Product, ProductVariant
from .models.display_models import DisplayedPrice, DisplayedProduct, DisplayedVariant
from .models.pricing_models import PriceAdjustment, PriceContext
from .normalizer import PriceNormalizer, sum_tax_rates
from .tax_rates import TaxRateTable

logger = logging.getLogger(__name__)


def price_including_tax(net_price: float, rate: float) -> float:
    """Gross price for a net price taxed at rate (percentage)."""
    return net_price * (1 + rate / 100)


class Storefront:
    """
    Renders catalog prices for a shopper.

    Every price field (price, regular price and sale price of a product and
    of each of its variants) goes through the same normalizer call; the host
    never adjusts prices for non-base countries on its own.
    """

    def __init__(self, config: StoreConfig, adjustment_counter: Optional[object] = None):
        """
        Initialize the storefront.

        Args:
            config: Store configuration
            adjustment_counter: Optional OpenTelemetry counter for evaluation outcomes
        """
        self.config = config
        self.rates = TaxRateTable(config.tax.rates, config.tax.base_country)
        self.normalizer = PriceNormalizer(
            self.rates,
            base_country=config.tax.base_country,
            prices_include_tax=config.tax.prices_include_tax,
        )
        self.adjustment_counter = adjustment_counter
        self._quantum = Decimal(1).scaleb(-config.price_decimals)

    def _format(self, value: float) -> str:
        return str(Decimal(str(value)).quantize(self._quantum, rounding=ROUND_HALF_UP))

    def _record(self, adjustment: PriceAdjustment) -> None:
        if self.adjustment_counter is None:
            return
        outcome = "adjusted" if adjustment.adjusted else adjustment.skip_reason
        self.adjustment_counter.add(1, attributes={"outcome": outcome})

    def _unadjusted_net_and_gross(
        self,
        price: float,
        tax_class: str,
        taxable: bool,
        context: PriceContext,
    ) -> Tuple[float, float]:
        """Interpret a stored price with the store's own tax semantics."""
        if not taxable:
            return price, price
        country = context.customer_country or self.config.tax.base_country
        rate = sum_tax_rates(self.rates.get_rates(tax_class, country))
        if self.config.tax.prices_include_tax:
            return price / (1 + rate / 100), price
        return price, price_including_tax(price, rate)

    def quote(
        self,
        price: float,
        tax_class: str,
        taxable: bool,
        context: PriceContext,
    ) -> PriceAdjustment:
        """Evaluate a single price for the given context."""
        taxable = taxable and self.config.tax.enabled
        adjustment = self.normalizer.evaluate(price, tax_class, taxable, context)
        self._record(adjustment)
        return adjustment

    def display_price(
        self,
        price: Optional[float],
        tax_class: str,
        taxable: bool,
        context: PriceContext,
    ) -> Optional[DisplayedPrice]:
        """
        Render one price field.

        Args:
            price: Stored price, None when the field is unset
            tax_class: Tax class of the item
            taxable: Whether the item is subject to tax
            context: Request context

        Returns:
            Rendered price, or None for an unset field
        """
        if price is None:
            return None

        taxable = taxable and self.config.tax.enabled
        adjustment = self.quote(price, tax_class, taxable, context)
        if context.is_price_editing:
            stored = self._format(price)
            return DisplayedPrice(
                amount=stored,
                net=stored,
                gross=stored,
                tax_included=self.config.tax.prices_include_tax,
                adjusted=False,
            )

        if adjustment.adjusted:
            net = adjustment.price
            gross = price_including_tax(net, adjustment.customer_rate)
        else:
            net, gross = self._unadjusted_net_and_gross(price, tax_class, taxable, context)

        include_tax = self.config.tax.display_shop == "incl"
        return DisplayedPrice(
            amount=self._format(gross if include_tax else net),
            net=self._format(net),
            gross=self._format(gross),
            tax_included=include_tax,
            adjusted=adjustment.adjusted,
        )

    def _render_variant(self, product: Product, variant: ProductVariant, context: PriceContext) -> DisplayedVariant:
        tax_class = product.variant_tax_class(variant)
        taxable = product.variant_is_taxable(variant, self.config.tax.enabled)
        return DisplayedVariant(
            id=variant.id,
            title=variant.title,
            sku=variant.sku,
            price=self.display_price(variant.price, tax_class, taxable, context),
            regular_price=self.display_price(variant.regular_price, tax_class, taxable, context),
            sale_price=self.display_price(variant.sale_price, tax_class, taxable, context),
            on_sale=variant.sale_price is not None and variant.sale_price < variant.regular_price,
        )

    def render_product(self, product: Product, context: PriceContext) -> DisplayedProduct:
        """
        Render a product and all of its variants for a shopper.

        Args:
            product: Catalog product
            context: Request context

        Returns:
            Product with every price field rendered
        """
        taxable = product.is_taxable(self.config.tax.enabled)
        on_sale = (
            product.sale_price is not None
            and product.regular_price is not None
            and product.sale_price < product.regular_price
        )
        rendered = DisplayedProduct(
            id=product.id,
            title=product.title,
            sku=product.sku,
            currency=self.config.currency,
            country=context.customer_country,
            price=self.display_price(product.price, product.tax_class, taxable, context),
            regular_price=self.display_price(product.regular_price, product.tax_class, taxable, context),
            sale_price=self.display_price(product.sale_price, product.tax_class, taxable, context),
            on_sale=on_sale,
            variants=[self._render_variant(product, v, context) for v in product.variants],
        )
        logger.debug(
            "product_rendered",
            extra={"product_id": product.id, "country": context.customer_country, "variants": len(product.variants)},
        )
        return rendered
