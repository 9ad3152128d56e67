import pytest

from fixed_price_eu.config import TaxRateEntry
from fixed_price_eu.models.pricing_models import PriceContext
from fixed_price_eu.normalizer import (
    PriceNormalizer,
    compute_net_price_from_gross,
    compute_target_gross_price,
    sum_tax_rates,
)
from fixed_price_eu.tax_rates import TaxRateTable


def make_normalizer(base_country="FR", prices_include_tax=False):
    rates = [
        TaxRateEntry(country="FR", rate=20.0),
        TaxRateEntry(country="PT", rate=23.0),
        TaxRateEntry(country="DE", rate=19.0),
        TaxRateEntry(country="NL", rate=21.0),
        TaxRateEntry(country="FR", rate=5.5, tax_class="reduced-rate"),
        TaxRateEntry(country="US", rate=0.0),
    ]
    table = TaxRateTable(rates, base_country)
    return PriceNormalizer(table, base_country=base_country, prices_include_tax=prices_include_tax)


@pytest.mark.parametrize("price", [0.0, 10.0, 99.99, 1234.5])
@pytest.mark.parametrize("base_rate", [0.0, 7.0, 20.0, 27.0])
def test_target_gross_when_prices_include_tax(price, base_rate):
    assert compute_target_gross_price(price, base_rate, True) == price


@pytest.mark.parametrize("price", [0.0, 10.0, 99.99, 1234.5])
@pytest.mark.parametrize("base_rate", [0.0, 7.0, 20.0, 27.0])
def test_target_gross_when_prices_exclude_tax(price, base_rate):
    assert compute_target_gross_price(price, base_rate, False) == price * (1 + base_rate / 100)


@pytest.mark.parametrize("gross", [0.0, 1.0, 119.0, 999.99])
@pytest.mark.parametrize("customer_rate", [5.5, 17.0, 21.0, 27.0])
def test_net_from_gross_reapplies_to_gross(gross, customer_rate):
    net = compute_net_price_from_gross(gross, customer_rate)
    assert net * (1 + customer_rate / 100) == pytest.approx(gross, abs=1e-9)


def test_sum_tax_rates():
    components = [TaxRateEntry(country="ES", rate=21.0), TaxRateEntry(country="ES", rate=1.5)]
    assert sum_tax_rates(components) == 22.5
    assert sum_tax_rates([]) == 0.0


def test_excluding_tax_store_adjusts_for_higher_rate_country():
    normalizer = make_normalizer(base_country="FR", prices_include_tax=False)
    adjustment = normalizer.evaluate(100.0, "standard", True, PriceContext(customer_country="PT"))
    assert adjustment.adjusted
    assert adjustment.target_gross == pytest.approx(120.0)
    assert adjustment.customer_rate == 23.0
    assert adjustment.price == pytest.approx(97.5609756, abs=1e-7)


def test_including_tax_store_ignores_base_rate_for_gross():
    normalizer = make_normalizer(base_country="DE", prices_include_tax=True)
    adjustment = normalizer.evaluate(119.0, "standard", True, PriceContext(customer_country="NL"))
    assert adjustment.adjusted
    assert adjustment.base_rate == 19.0
    assert adjustment.target_gross == 119.0
    assert adjustment.price == pytest.approx(98.3471074, abs=1e-7)


def test_unresolved_country_keeps_price():
    normalizer = make_normalizer()
    adjustment = normalizer.evaluate(100.0, "standard", True, PriceContext())
    assert not adjustment.adjusted
    assert adjustment.skip_reason == "unresolved_country"
    assert adjustment.price == 100.0


def test_non_taxable_item_keeps_price():
    normalizer = make_normalizer()
    adjustment = normalizer.evaluate(100.0, "standard", False, PriceContext(customer_country="PT"))
    assert adjustment.skip_reason == "not_taxable"
    assert adjustment.price == 100.0


def test_price_editing_keeps_price():
    normalizer = make_normalizer()
    context = PriceContext(customer_country="PT", is_admin=True)
    adjustment = normalizer.evaluate(100.0, "standard", True, context)
    assert adjustment.skip_reason == "price_editing"
    assert adjustment.price == 100.0


def test_admin_ajax_request_is_adjusted():
    normalizer = make_normalizer()
    context = PriceContext(customer_country="PT", is_admin=True, is_ajax=True)
    assert normalizer.evaluate(100.0, "standard", True, context).adjusted


@pytest.mark.parametrize("prices_include_tax", [True, False])
@pytest.mark.parametrize(
    "base_country,rates",
    [
        ("FR", [TaxRateEntry(country="FR", rate=20.0), TaxRateEntry(country="PT", rate=23.0)]),
        ("HU", [TaxRateEntry(country="HU", rate=27.0), TaxRateEntry(country="LU", rate=17.0)]),
        ("LU", [TaxRateEntry(country="LU", rate=14.0), TaxRateEntry(country="LU", rate=3.0)]),
        ("DE", [TaxRateEntry(country="FR", rate=20.0)]),
        ("ES", [TaxRateEntry(country="*", rate=21.0)]),
        ("NL", []),
    ],
)
@pytest.mark.parametrize("price", [0.0, 42.0, 119.99])
def test_base_country_customer_keeps_price(prices_include_tax, base_country, rates, price):
    normalizer = PriceNormalizer(
        TaxRateTable(rates, base_country),
        base_country=base_country,
        prices_include_tax=prices_include_tax,
    )
    context = PriceContext(customer_country=base_country.lower())
    adjustment = normalizer.evaluate(price, "standard", True, context)
    assert adjustment.skip_reason == "base_country"
    assert adjustment.price == price
    assert normalizer.adjust_price(price, "standard", True, context) == price


def test_zero_customer_rate_keeps_price():
    normalizer = make_normalizer()
    adjustment = normalizer.evaluate(100.0, "standard", True, PriceContext(customer_country="US"))
    assert adjustment.skip_reason == "zero_customer_rate"
    assert adjustment.price == 100.0


def test_unknown_country_is_treated_as_zero_rate():
    normalizer = make_normalizer()
    adjustment = normalizer.evaluate(100.0, "standard", True, PriceContext(customer_country="JP"))
    assert adjustment.skip_reason == "zero_customer_rate"
    assert adjustment.price == 100.0


def test_tax_class_selects_rates():
    normalizer = make_normalizer(base_country="FR")
    # No reduced rate configured for PT
    adjustment = normalizer.evaluate(10.0, "reduced-rate", True, PriceContext(customer_country="PT"))
    assert adjustment.skip_reason == "zero_customer_rate"
    assert adjustment.base_rate == 5.5


def test_adjust_price_passes_none_through():
    normalizer = make_normalizer()
    assert normalizer.adjust_price(None, "standard", True, PriceContext(customer_country="PT")) is None


def test_adjust_price_is_repeatable():
    normalizer = make_normalizer()
    context = PriceContext(customer_country="NL")
    first = normalizer.adjust_price(100.0, "standard", True, context)
    second = normalizer.adjust_price(100.0, "standard", True, context)
    assert first == second
    assert first == pytest.approx(120.0 / 1.21)
